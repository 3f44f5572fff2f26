"""The C{verify} workflow."""

from logging import getLogger

from ..bosh import RunErrand
from ._workflow import Workflow

logger = getLogger("boshci.workflows.verify")


class Verify(Workflow):
    """Runs the configured errands of every deployment, in order."""

    name = "verify"

    def __call__(self) -> None:
        for deployment in self.deployments:
            self.select(deployment)

            if not deployment.errands:
                logger.debug("%s has no errands", deployment.name)

            for errand in deployment.errands:
                self.bosh(RunErrand(errand))
