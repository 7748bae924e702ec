"""Data models for package-manager detection and the task catalog."""

from __future__ import annotations

from .catalog_source import CatalogSource, CommandSpec, FixedCommand, Script, SelectableItem
from .execution_request import ExecutionRequest
from .manifest_record import ManifestRecord
from .package_manager import LockfileRule, PackageManager

__all__ = [
    "CatalogSource",
    "CommandSpec",
    "ExecutionRequest",
    "FixedCommand",
    "LockfileRule",
    "ManifestRecord",
    "PackageManager",
    "Script",
    "SelectableItem",
]
