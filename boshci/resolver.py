"""Maps configured deployments to the names the director knows them by.

The live name of a deployment comes from the C{name} key of its
descriptor, C{deployments/<configured name>.yml}, and is often sharded
(C{foo} is deployed as C{foo-z1}). Only names resolved this way count as
in use; everything else in the live inventory is orphaned.
"""

from collections.abc import Callable, Iterable
from logging import getLogger
from pathlib import Path
from typing import Any

from ruamel.yaml.error import YAMLError

from .types import DeploymentDescriptor, InventoryEntry
from .utils import load_yaml

logger = getLogger("boshci.resolver")


class DeploymentResolver:
    """Resolves configured deployments through their descriptor files."""

    def __init__(
        self,
        deployments_dir: Path = Path("deployments"),
        loader: Callable[[Path], Any] = load_yaml,
    ) -> None:
        self.deployments_dir = deployments_dir
        self.loader = loader

    def descriptor_path(self, name: str) -> Path:
        return self.deployments_dir / f"{name}.yml"

    def resolve(self, descriptor: DeploymentDescriptor) -> str | None:
        """Reads the live name declared for a configured deployment.

        Args:
            descriptor: The configured deployment.

        Returns:
            The declared name, or None if the descriptor file is missing,
            unreadable or declares no name.
        """
        path = self.descriptor_path(descriptor.name)
        try:
            data = self.loader(path)
        except FileNotFoundError:
            logger.debug("no descriptor %s for %s", path, descriptor.name)
            return None
        except (OSError, YAMLError) as e:
            logger.warning("can't read descriptor %s: %s", path, e)
            return None

        name = data.get("name") if isinstance(data, dict) else None
        if not name:
            logger.warning("descriptor %s declares no name", path)
            return None

        logger.debug("%s resolves to %s", descriptor.name, name)
        return str(name)

    def resolved_names(self, descriptors: Iterable[DeploymentDescriptor]) -> set[str]:
        """Returns the live names of all configured deployments."""
        return {
            name for name in (self.resolve(x) for x in descriptors) if name is not None
        }

    @staticmethod
    def is_orphaned(entry: InventoryEntry, names: set[str]) -> bool:
        return entry.name not in names
