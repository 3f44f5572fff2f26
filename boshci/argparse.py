"""An argument parser that reports failures instead of exiting."""

import argparse
import sys
from typing import TextIO


class ArgsParseFailure(RuntimeError):
    """Exception raised when argument parsing stops the program."""

    def __init__(self, status: int = 0) -> None:
        """Initializes the exception.

        Args:
            status: The exit status argparse asked for.
        """
        self.status = status
        super().__init__()


class ArgumentParser(argparse.ArgumentParser):
    """An argument parser that raises L{ArgsParseFailure} instead of exiting.

    Help and usage go to C{stdout}, errors to C{stderr}; both streams can
    be replaced for testing.
    """

    def __init__(
        self, *a, stdout: TextIO | None = None, stderr: TextIO | None = None, **kw
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        super().__init__(*a, **kw)

    def print_help(self, file=None) -> None:
        # also takes care of default _HelpAction calling
        # print_help
        super().print_help(self.stdout)

    def print_usage(self, file=None) -> None:
        super().print_usage(self.stdout)

    def exit(self, status: int = 0, message: str | None = None) -> None:  # type: ignore
        """Raises L{ArgsParseFailure} instead of calling C{sys.exit}.

        Args:
            status: The exit status code.
            message: The error message to print.
        """
        if message:
            self._print_message(message, self.stderr)

        raise ArgsParseFailure(status)
