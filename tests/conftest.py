import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from boshci.config import Config
from boshci.shell import Shell
from boshci.types import CommandResult


@pytest.fixture
def write_config(tmp_path):
    """Writes a .ci.yml and returns a Config read from it."""

    def _write(text: str, environ: dict | None = None) -> Config:
        path = tmp_path / ".ci.yml"
        path.write_text(text)
        return Config(path, environ=environ or {})

    return _write


@pytest.fixture
def fake_shell():
    """A Shell whose run() answers from a {command line: output} table."""
    shell = MagicMock(spec=Shell)
    shell.outputs = {}

    def run(command, **kw):
        return CommandResult(command, shell.outputs.get(command, ""), True, 0)

    shell.run.side_effect = run
    return shell


@pytest.fixture
def deployments_dir(tmp_path) -> Path:
    d = tmp_path / "deployments"
    d.mkdir()
    return d


@pytest.fixture(autouse=True)
def reset_logger():
    """Drops the handlers create_logger() attaches to the boshci logger."""
    logger = logging.getLogger("boshci")
    handlers, level = list(logger.handlers), logger.level
    yield
    for h in logger.handlers[:]:
        if h not in handlers:
            logger.removeHandler(h)
    logger.setLevel(level)
