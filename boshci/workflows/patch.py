"""The C{patch} workflow."""

from logging import getLogger

from ..bosh import ApplyPatch, CreatePatch
from ._workflow import Workflow

logger = getLogger("boshci.workflows.patch")


class Patch(Workflow):
    """Creates and applies deployment patches.

    Creating and applying are independent: a deployment may configure
    either, both or neither. When both are set the patch is created
    first.
    """

    name = "patch"

    def __call__(self) -> None:
        for deployment in self.deployments:
            self.select(deployment)

            if deployment.create_patch:
                self.bosh(CreatePatch(deployment.create_patch))

            if deployment.apply_patch:
                self.bosh(ApplyPatch(deployment.apply_patch))
