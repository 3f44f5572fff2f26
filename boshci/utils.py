from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

_TRUTHY = frozenset(("1", "true", "yes", "on", "y"))


def load_yaml(path: Path) -> Any:
    """Reads a YAML document with the safe loader.

    Args:
        path: The file to read.

    Returns:
        The parsed document, None for an empty file.
    """
    with path.open() as f:
        return YAML(typ="safe").load(f)


def flag(value: str | None) -> bool:
    """Interprets a boolean-like environment value.

    Args:
        value: The raw value, None when unset.

    Returns:
        True for C{1}, C{true}, C{yes}, C{y} or C{on}, in any case.
    """
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY
