"""Parse package.json into its project name and scripts."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..logging import get_logger

logger = get_logger("parsers.package_json")


@dataclass(frozen=True)
class PackageJson:
    """The parts of package.json that matter for running tasks."""

    name: str | None
    scripts: tuple[tuple[str, str], ...]

    @classmethod
    def empty(cls) -> PackageJson:
        return cls(name=None, scripts=())


def read_document(path: Path) -> dict[str, Any] | None:
    """Return the decoded top-level object, or None if it cannot be read as one."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("Cannot decode %s: %s", path, exc)
        return None

    if not isinstance(data, dict):
        logger.debug("Ignoring %s: top level is %s, not an object", path, type(data).__name__)
        return None
    return data


def parse(path: Path) -> PackageJson:
    """Return name and scripts; missing or malformed files yield an empty record."""
    data = read_document(path)
    if data is None:
        return PackageJson.empty()

    name = data.get("name")
    if not isinstance(name, str):
        name = None

    scripts: list[tuple[str, str]] = []
    section = data.get("scripts")
    if isinstance(section, dict):
        for script, command in section.items():
            if script and isinstance(command, str):
                scripts.append((script, command))

    return PackageJson(name=name, scripts=tuple(scripts))
