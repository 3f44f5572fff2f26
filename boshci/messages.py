"""A set of classes for displaying messages to the user.

Every failure that ends a workflow run is one of these. The messages
carry enough context (the command line, its exit code and output) to be
logged without a traceback.
"""

from abc import ABC


class UserMessage(BaseException, ABC):
    """An abstract base class for messages to be displayed to the user."""

    def __str__(self) -> str:
        return self.message  # type: ignore

    def __eq__(self, x: object) -> bool:
        return str(self) == str(x)

    def __hash__(self) -> int:  # type: ignore
        return hash(str(self))


class ErrorMessage(UserMessage, RuntimeError):
    """A program error message to be displayed to the user."""


class UserError(UserMessage, RuntimeError):
    """An error caused by improper usage of the program."""


class SystemCommandNotFoundError(ErrorMessage):
    """Raised when the bosh executable cannot be started."""

    _msg = "Command {0!r} not found"

    def __init__(self, command) -> None:
        self.command = command
        self.message = self._msg.format(command)


class CommandFailedError(ErrorMessage):
    """Raised when a bosh command exits non-zero and failures are not ignored."""

    _message = "Command failed."

    def __init__(self, rc: int, command: str, output: str = "") -> None:
        self.rc = rc
        self.command = command
        self.output = output

    @property
    def message(self) -> str:
        """The error message."""
        return self._message + " rc = {0} Command: {1!r}".format(self.rc, self.command)


class DestructiveActionNotConfirmedError(UserError):
    """Raised when clean is requested without DESTROY_DEPLOYMENTS."""

    def __init__(self, flag: str = "DESTROY_DEPLOYMENTS") -> None:
        self.flag = flag
        self.message = (
            "Refusing to delete deployments: set {0}=true to confirm".format(flag)
        )


class ConfigurationError(UserError):
    """Raised when the configuration file is missing or invalid."""

    def __init__(self, reason: str, path=None) -> None:
        self.reason = reason
        self.path = path

    @property
    def message(self) -> str:
        if self.path is None:
            return "Invalid configuration: {0}".format(self.reason)
        return "Invalid configuration {0}: {1}".format(self.path, self.reason)


class UnknownWorkflowError(UserError):
    """Raised when a workflow name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.message = "Unknown workflow {0!r}".format(name)


class DeployTaskFailedError(SystemExit):
    """The bosh task behind a deploy reported an error.

    This is a process exit rather than a L{UserMessage}: the director
    state may be inconsistent, so nothing else may run after it.
    """

    def __init__(self, deployment: str, outcome) -> None:
        super().__init__(1)
        self.deployment = deployment
        self.outcome = outcome

    def __str__(self) -> str:
        if self.outcome.task_id is None:
            return "Deployment {0!r} failed".format(self.deployment)
        return "Deployment {0!r} failed in task {1}".format(
            self.deployment, self.outcome.task_id
        )
