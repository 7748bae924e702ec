"""Package manager identity and lockfile rule models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PackageManager:
    """A package manager identifier, used purely as a command prefix."""

    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Package manager id must be non-empty")
        if any(ch.isspace() for ch in self.id):
            raise ValueError(f"Package manager id must not contain whitespace: {self.id!r}")

    def __str__(self) -> str:
        return self.id

    def command(self, subcommand: str) -> str:
        """Return the shell command running ``subcommand`` through this manager."""
        return f"{self.id} {subcommand}"


@dataclass(frozen=True)
class LockfileRule:
    """Map a lockfile name to the package manager that owns it."""

    filename: str
    manager: PackageManager

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Lockfile name must be non-empty")
        if "/" in self.filename or "\\" in self.filename:
            raise ValueError(f"Lockfile name must be a bare file name: {self.filename!r}")
