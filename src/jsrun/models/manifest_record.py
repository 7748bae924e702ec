"""Parsed manifest record model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .package_manager import PackageManager


@dataclass(frozen=True)
class ManifestRecord:
    """One located package.json, with the manager governing it."""

    filepath: Path
    manager: PackageManager
    is_root: bool
    project_name: str | None
    scripts: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        if not self.filepath.is_absolute():
            raise ValueError("Manifest filepath must be absolute")
        names = [name for name, _ in self.scripts]
        if len(set(names)) != len(names):
            raise ValueError("Script names must be unique")

    @property
    def directory(self) -> Path:
        return self.filepath.parent

    def scripts_map(self) -> dict[str, str]:
        return dict(self.scripts)

    def to_dict(self) -> dict[str, object]:
        return {
            "filepath": str(self.filepath),
            "manager": self.manager.id,
            "isRoot": self.is_root,
            "projectName": self.project_name,
            "scripts": self.scripts_map(),
        }
