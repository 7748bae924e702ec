"""Selectable items and the per-manifest catalog source."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .package_manager import PackageManager


@dataclass(frozen=True)
class CommandSpec:
    """A configured manager subcommand offered for every manifest."""

    id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Command id must be non-empty")


@dataclass(frozen=True)
class FixedCommand:
    """Runs ``<manager> <id>``."""

    id: str
    description: str

    @classmethod
    def from_spec(cls, spec: CommandSpec) -> FixedCommand:
        return cls(id=spec.id, description=spec.description)

    @property
    def label(self) -> str:
        return self.id

    def subcommand(self) -> str:
        return self.id

    def to_dict(self) -> dict[str, str]:
        return {"kind": "command", "id": self.id, "description": self.description}


@dataclass(frozen=True)
class Script:
    """Runs ``<manager> run <name>``; the command text is only shown."""

    name: str
    command: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Script name must be non-empty")

    @property
    def label(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.command

    def subcommand(self) -> str:
        return f"run {shlex.quote(self.name)}"

    def to_dict(self) -> dict[str, str]:
        return {"kind": "script", "id": self.name, "description": self.command}


SelectableItem = Union[FixedCommand, Script]


@dataclass(frozen=True)
class CatalogSource:
    """One selectable list, built from a single located manifest."""

    title: str
    items: tuple[SelectableItem, ...]
    working_directory: Path
    manager: PackageManager

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "workingDirectory": str(self.working_directory),
            "manager": self.manager.id,
            "items": [item.to_dict() for item in self.items],
        }
