"""Runs bosh command lines and captures their output."""

import shlex
import subprocess
import sys
from logging import getLogger
from typing import TextIO

from .messages import CommandFailedError, SystemCommandNotFoundError
from .types import CommandResult

logger = getLogger("boshci.shell")


def last_lines(output: str, number: int) -> str:
    """Returns the last C{number} non-empty lines of C{output}."""
    lines = [x for x in output.splitlines() if x.strip()]
    return "\n".join(lines[-number:]) if number > 0 else ""


class Shell:
    """Executes commands one at a time and collects what they print."""

    def __init__(self, out: TextIO | None = None) -> None:
        """Initializes the shell.

        Args:
            out: Stream the command output is copied to while it runs,
                defaults to C{sys.stdout}.
        """
        self.out = out if out is not None else sys.stdout

    def run(
        self,
        command: str,
        ignore_failures: bool = False,
        output_command: bool = True,
        last_number: int | None = None,
    ) -> CommandResult:
        """Runs a command line and waits for it to finish.

        Args:
            command: The command line, split with C{shlex}.
            ignore_failures: Return the output even if the command fails.
            output_command: Log the command line before running it.
            last_number: Keep only this many trailing lines of output.

        Returns:
            The captured result.

        Raises:
            SystemCommandNotFoundError: If the executable does not exist.
            CommandFailedError: If the command exits non-zero and
                C{ignore_failures} is not set.
        """
        if output_command:
            logger.info("running: %s", command)
        else:
            logger.debug("running: %s", command)

        argv = shlex.split(command)
        captured: list[str] = []
        try:
            with subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
            ) as proc:
                assert proc.stdout is not None
                for line in proc.stdout:
                    self.out.write(line)
                    captured.append(line)
                rc = proc.wait()
        except FileNotFoundError:
            raise SystemCommandNotFoundError(argv[0]) from None

        output = "".join(captured)
        if last_number is not None:
            output = last_lines(output, last_number)

        if rc != 0:
            if not ignore_failures:
                raise CommandFailedError(rc, command, output)
            logger.debug("ignoring failure of %r, rc = %s", command, rc)

        return CommandResult(command, output, True, rc)
