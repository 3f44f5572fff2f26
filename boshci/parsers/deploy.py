"""A parser for the status line printed by C{bosh deploy}."""

import re
from logging import getLogger

from ..types import DeployOutcome, DeployStatus

logger = getLogger("boshci.parsers.deploy")

_task = re.compile(r"\btask\s+(\d+)", re.IGNORECASE)
_error = re.compile(r"\berror\b", re.IGNORECASE)


def parse_deploy_output(text: str) -> DeployOutcome:
    """Interprets the output of a deploy.

    Args:
        text: Captured output, usually only its last line.

    Returns:
        C{FAILED} when the text mentions an error, C{SUCCEEDED} when it
        names a task without an error, C{UNRECOGNIZED} otherwise.
    """
    match = _task.search(text)
    task_id = int(match.group(1)) if match else None

    if _error.search(text):
        status = DeployStatus.FAILED
    elif task_id is not None:
        status = DeployStatus.SUCCEEDED
    else:
        status = DeployStatus.UNRECOGNIZED

    logger.debug("deploy output %r -> task %s %s", text, task_id, status.name)
    return DeployOutcome(task_id, status)
