"""The main entry point for the boshci application."""

import logging
import sys
from argparse import Namespace
from collections.abc import Sequence
from typing import Literal

from .argparse import ArgsParseFailure
from .args import get_parser
from .colorlog import create_logger
from .config import Config
from .exceptions import MalformedTargetError
from .messages import UnknownWorkflowError, UserMessage
from .resolver import DeploymentResolver
from .shell import Shell
from .workflows import WORKFLOWS


def main(argv: Sequence[str] | None = None) -> int:
    """The main entry point for the boshci application.

    Parses the command line, loads the configuration and runs the
    requested workflows.

    Returns:
        The exit code of the application.
    """
    logger = create_logger("boshci")

    p = get_parser()
    try:
        args = p.parse_args(sys.argv[1:] if argv is None else list(argv))
    except ArgsParseFailure as e:
        return e.status

    if args.debug:
        logger.setLevel(level=logging.DEBUG)

    try:
        cfg = Config(args.config)
    except UserMessage as e:
        logger.error(e)
        return 1

    return run_workflows(cfg, logger, args)


def run_workflows(
    config: Config, logger: logging.Logger, args: Namespace, shell: Shell | None = None
) -> Literal[0, 1]:
    """Runs the workflows named on the command line, in order.

    A failed deploy task raises L{DeployTaskFailedError}, which exits
    the process and is deliberately not caught here.

    Args:
        config: The run configuration.
        logger: The logger instance.
        args: The parsed command-line arguments.
        shell: Executes bosh commands, a new L{Shell} when not given.

    Returns:
        0 on success, 1 on failure.
    """
    config.merge_args(args)
    shell = shell if shell is not None else Shell()
    resolver = DeploymentResolver(config.deployments_dir)  # type: ignore[attr-defined]

    for name in args.workflows:
        try:
            workflow = WORKFLOWS[name](config, shell, resolver)
        except KeyError:
            logger.error(UnknownWorkflowError(name))
            return 1

        logger.info("running workflow %s", name)
        try:
            workflow()
        except (UserMessage, MalformedTargetError) as e:
            logger.error(e)
            return 1

    return 0
