"""Named tuples for command results and deploy outcomes."""

from enum import Enum, auto
from typing import NamedTuple


class CommandResult(NamedTuple):
    """The captured result of one bosh invocation.

    Attributes:
        command: The command line that was run.
        raw_output: Combined stdout and stderr, possibly truncated to the
            last lines.
        succeeded: False only for a failure that was not raised.
        exitcode: The exit code of the process.
    """

    command: str
    raw_output: str
    succeeded: bool
    exitcode: int


class DeployStatus(Enum):
    """What the last line of C{bosh deploy} says about the task."""

    SUCCEEDED = auto()
    FAILED = auto()
    UNRECOGNIZED = auto()


class DeployOutcome(NamedTuple):
    """The interpreted result of a deploy.

    Attributes:
        task_id: The director task number, if one was printed.
        status: The outcome of the task.
    """

    task_id: int | None
    status: DeployStatus

    @property
    def failed(self) -> bool:
        return self.status is DeployStatus.FAILED
