"""The C{target} workflow."""

from logging import getLogger

from ..bosh import Login, SetTarget
from ._workflow import Workflow

logger = getLogger("boshci.workflows.target")


class Target(Workflow):
    """Points the bosh CLI at the director and logs in."""

    name = "target"

    def __call__(self) -> None:
        spec = self.config.target_spec()

        self.bosh(SetTarget(spec.address))
        if spec.username is None:
            logger.warning("no username for %s, skipping login", spec.address)
            return

        self.bosh(Login(spec.username, spec.password))
        logger.info("logged in to %s as %s", spec.address, spec.username)
