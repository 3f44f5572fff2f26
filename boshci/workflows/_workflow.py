"""The base class for all workflows in boshci."""

from abc import ABC, abstractmethod
from logging import getLogger

from ..bosh import Request, SelectDeployment, render
from ..config import Config
from ..resolver import DeploymentResolver
from ..shell import Shell
from ..types import CommandResult, DeploymentDescriptor

logger = getLogger("boshci.workflows.workflow")


class Workflow(ABC):
    """An abstract base class for all workflows.

    A workflow is a fixed sequence of bosh commands. It does not keep
    state between runs; the director session set up by C{target} lives
    in the bosh CLI's own configuration.
    """

    name: str

    def __init__(
        self,
        config: Config,
        shell: Shell,
        resolver: DeploymentResolver | None = None,
    ) -> None:
        """Initializes the workflow.

        Args:
            config: The run configuration.
            shell: Executes the bosh commands.
            resolver: Maps configured deployments to live names,
                built from the configuration when not given.
        """
        self.config = config
        self.shell = shell
        self.resolver = (
            resolver
            if resolver is not None
            else DeploymentResolver(config.deployments_dir)  # type: ignore[attr-defined]
        )

    @property
    def deployments(self) -> tuple[DeploymentDescriptor, ...]:
        return self.config.deployments  # type: ignore[attr-defined]

    def bosh(self, request: Request, **options) -> CommandResult:
        """Runs one bosh request, echoing the command line.

        Args:
            request: The action to run.
            **options: Passed on to L{Shell.run}.
        """
        options.setdefault("output_command", True)
        return self.shell.run(render(request, self.config.bosh_cli), **options)  # type: ignore[attr-defined]

    def select(self, deployment: DeploymentDescriptor) -> CommandResult:
        """Makes C{deployment} the target of the following commands."""
        logger.debug("selecting deployment %s", deployment.name)
        return self.bosh(SelectDeployment(deployment.name))

    @abstractmethod
    def __call__(self) -> None:
        """Runs the workflow."""
        ...
