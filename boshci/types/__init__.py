"""This package contains the type classes for boshci.

Each module in this package defines value objects that live for a
single workflow run.
"""

from .deployment import DeploymentDescriptor, InventoryEntry
from .result import CommandResult, DeployOutcome, DeployStatus
from .target import TargetSpec, target_string

__all__ = [
    "CommandResult",
    "DeployOutcome",
    "DeployStatus",
    "DeploymentDescriptor",
    "InventoryEntry",
    "TargetSpec",
    "target_string",
]
