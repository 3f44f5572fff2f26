"""A logging formatter that colors the level name on the console."""

import inspect
import logging
import os
import sys
from typing import TextIO

(BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE) = list(range(8))

RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;{}m"

COLORS = {
    "WARNING": YELLOW,
    "INFO": GREEN,
    "DEBUG": BLUE,
    "CRITICAL": RED,
    "ERROR": RED,
}


class ColorFormatter(logging.Formatter):
    """A logging formatter that adds color to the level name.

    Debug records also get the module and function that logged them.
    """

    def __init__(self, msg: str, color: bool = True) -> None:
        """Initializes the formatter.

        Args:
            msg: The format string to use.
            color: Emit ANSI color sequences.
        """
        logging.Formatter.__init__(self, msg)
        self.color = color

    def formatColor(self, levelname: str) -> str:
        """Formats the log level name, colored if enabled.

        Args:
            levelname: The name of the log level (e.g., 'INFO', 'DEBUG').

        Returns:
            The decorated log level name.
        """
        name = levelname.lower()
        if self.color:
            name = COLOR_SEQ.format(30 + COLORS[levelname]) + name + RESET_SEQ

        if levelname != "DEBUG":
            return name

        # 9 frames up from here is the caller of logger.debug()
        caller = inspect.currentframe()
        frame, _, _, function, _, _ = inspect.getouterframes(caller)[9]
        if mo := inspect.getmodule(frame):
            module = mo.__name__
        else:
            module = "unknown"
        return name + " [{!s}:{!s}]".format(module, function)

    def format(self, record: logging.LogRecord) -> str:
        """Formats the log record.

        Args:
            record: The log record to format.

        Returns:
            The formatted log record as a string.
        """
        record.message = record.getMessage()
        if self._fmt and self._fmt.find("%(levelname)") >= 0:
            record.levelname = self.formatColor(record.levelname)

        return logging.Formatter.format(self, record)


def use_color(stream: TextIO) -> bool:
    """Colors are used on terminals unless C{NO_COLOR} is set."""
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def create_logger(
    name: str,
    level: str = "INFO",
    stream: TextIO | None = None,
    color: bool | None = None,
) -> logging.Logger:
    """Creates a logger with a colorized output.

    Args:
        name: The name of the logger.
        level: The logging level.
        stream: Where records go, defaults to C{sys.stderr}.
        color: Force colors on or off, autodetected when None.

    Returns:
        A configured `logging.Logger` instance.
    """
    stream = stream if stream is not None else sys.stderr
    out = logging.getLogger(name) if name else logging.getLogger()
    out.setLevel(level)
    handler = logging.StreamHandler(stream)
    formatter = ColorFormatter(
        "%(levelname)s: %(message)s",
        use_color(stream) if color is None else color,
    )
    handler.setFormatter(formatter)
    out.addHandler(handler)
    return out
