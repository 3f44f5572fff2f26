"""Defines the command-line arguments for the boshci tool."""

from pathlib import Path
from typing import TextIO

from boshci import __version__

from .argparse import ArgumentParser
from .types import target_string
from .workflows import WORKFLOWS


def get_parser(stdout: TextIO | None = None, stderr: TextIO | None = None) -> ArgumentParser:
    """Creates and configures the argument parser for the application.

    Args:
        stdout: Stream for help and version output.
        stderr: Stream for error messages.

    Returns:
        A configured `ArgumentParser` instance.
    """
    parser = ArgumentParser(
        prog="boshci",
        description="Run CI workflows against a bosh director.",
        stdout=stdout,
        stderr=stderr,
    )
    parser.add_argument(
        "workflows",
        metavar="WORKFLOW",
        nargs="+",
        choices=sorted(WORKFLOWS),
        help="workflows to run in order: %(choices)s",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Override default config path"
    )
    parser.add_argument(
        "-t", "--target", type=target_string, help="override config target, [user[:password]@]host:port"
    )
    parser.add_argument(
        "--skip-merge",
        action="store_true",
        default=False,
        help="pass --skip-merge to bosh deploy",
    )
    parser.add_argument(
        "--deployments-dir",
        type=Path,
        help="directory with the deployment descriptors",
    )
    parser.add_argument("--bosh", type=str, help="bosh executable to run")
    parser.add_argument(
        "--destroy-deployments",
        action="store_true",
        default=False,
        help="confirm deleting orphaned deployments, same as DESTROY_DEPLOYMENTS=true",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="enable debugging output",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version="{}".format(__version__),
        help="print version and exit",
    )

    return parser
