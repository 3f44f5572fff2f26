"""Named tuples for configured and live deployments."""

from pathlib import Path
from typing import Any, NamedTuple

from ..messages import ConfigurationError


def _optional_path(value: Any) -> Path | None:
    return Path(value) if value else None


class DeploymentDescriptor(NamedTuple):
    """A deployment as listed in the CI configuration.

    Attributes:
        name: The deployment name, also the descriptor file stem.
        create_patch: Where C{bosh create deployment patch} writes to.
        apply_patch: The patch file C{bosh apply deployment patch} reads.
        errands: Errands run by the verify workflow, in order.
    """

    name: str
    create_patch: Path | None = None
    apply_patch: Path | None = None
    errands: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "DeploymentDescriptor":
        """Builds a descriptor from one entry of the C{deployments} list.

        Args:
            data: The mapping read from the configuration file.

        Raises:
            ConfigurationError: If the entry has no name or its errands
                are not a list.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"deployment entry {data!r} is not a mapping")

        name = data.get("name")
        if not name:
            raise ConfigurationError(f"deployment entry {dict(data)!r} has no name")

        errands = data.get("errands") or []
        if not isinstance(errands, list):
            raise ConfigurationError(f"errands of {name!r} must be a list")

        return cls(
            str(name),
            _optional_path(data.get("create_patch")),
            _optional_path(data.get("apply_patch")),
            tuple(str(x) for x in errands),
        )


class InventoryEntry(NamedTuple):
    """One row of the C{bosh deployments} table.

    Attributes:
        name: The live deployment name.
        releases: The release(s) cell, as printed.
        stemcells: The stemcell(s) cell, as printed.
    """

    name: str
    releases: str = ""
    stemcells: str = ""
