"""The C{deploy} workflow."""

from logging import getLogger

from ..bosh import Deploy as DeployRequest
from ..bosh import PrepareDeployment
from ..messages import DeployTaskFailedError
from ..parsers import parse_deploy_output
from ..types import DeployStatus
from ._workflow import Workflow

logger = getLogger("boshci.workflows.deploy")


class Deploy(Workflow):
    """Prepares and deploys every configured deployment.

    The exit code of C{bosh deploy} is not trusted: the last line of its
    output decides. A failed task stops the process so that no other
    deployment is touched.
    """

    name = "deploy"

    def __call__(self) -> None:
        for deployment in self.deployments:
            self.select(deployment)
            self.bosh(PrepareDeployment())

            result = self.bosh(
                DeployRequest(self.config.skip_merge),  # type: ignore[attr-defined]
                last_number=1,
            )
            outcome = parse_deploy_output(result.raw_output)

            if outcome.status is DeployStatus.FAILED:
                err = DeployTaskFailedError(deployment.name, outcome)
                logger.error(err)
                raise err

            if outcome.status is DeployStatus.UNRECOGNIZED:
                logger.warning(
                    "can't tell how deploying %s ended: %r",
                    deployment.name,
                    result.raw_output,
                )
                continue

            logger.info("deployed %s in task %s", deployment.name, outcome.task_id)
