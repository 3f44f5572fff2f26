"""The C{clean} workflow."""

from logging import getLogger

from ..bosh import DeleteDeployment, ListDeployments
from ..messages import DestructiveActionNotConfirmedError
from ..parsers import parse_deployments_table
from ._workflow import Workflow

logger = getLogger("boshci.workflows.clean")


class Clean(Workflow):
    """Deletes deployments on the director that nothing configures.

    Runs only with DESTROY_DEPLOYMENTS set. A live deployment is kept
    when a configured descriptor declares its name.
    """

    name = "clean"

    def __call__(self) -> None:
        if not self.config.destroy_deployments:  # type: ignore[attr-defined]
            raise DestructiveActionNotConfirmedError()

        # bosh exits non-zero when there are no deployments
        result = self.bosh(ListDeployments(), ignore_failures=True)
        inventory = parse_deployments_table(result.raw_output)
        if not inventory:
            logger.info("no deployments to clean")
            return

        in_use = self.resolver.resolved_names(self.deployments)
        for entry in inventory:
            if not self.resolver.is_orphaned(entry, in_use):
                logger.info("keeping %s", entry.name)
                continue

            logger.warning("deleting deployment %s", entry.name)
            self.bosh(DeleteDeployment(entry.name, force=True))
