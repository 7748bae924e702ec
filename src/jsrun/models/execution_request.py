"""Execution request handed to the executor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExecutionRequest:
    """Run ``command`` through the shell with ``directory`` as working directory."""

    directory: Path
    command: str

    def __post_init__(self) -> None:
        if not self.command:
            raise ValueError("Command must be non-empty")

    def to_dict(self) -> dict[str, str]:
        return {"directory": str(self.directory), "command": self.command}
