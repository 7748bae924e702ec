"""Core catalog building entrypoints.

This module MUST NOT depend on any picker or process-launch mechanism so it
can be driven by the terminal CLI as well as by other front ends.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .discovery import locate
from .logging import get_logger
from .models import (
    CatalogSource,
    CommandSpec,
    ExecutionRequest,
    FixedCommand,
    ManifestRecord,
    PackageManager,
    Script,
    SelectableItem,
)
from .parsers.package_json import parse as parse_package_json
from .resolver import resolve
from .settings import MANIFEST_NAME, Settings

logger = get_logger("core")


@dataclass(frozen=True)
class Catalog:
    """All sources found for one invocation, sharing a single manager."""

    start: Path
    sources: tuple[CatalogSource, ...] = ()
    manager: PackageManager | None = None
    records: tuple[ManifestRecord, ...] = field(default=(), repr=False)

    def __bool__(self) -> bool:
        return bool(self.sources)

    @property
    def prompt_manager(self) -> PackageManager | None:
        """Manager of the nearest source, shown in the picker prompt."""
        return self.sources[0].manager if self.sources else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": str(self.start),
            "manager": self.manager.id if self.manager else None,
            "sources": [source.to_dict() for source in self.sources],
            "manifests": [record.to_dict() for record in self.records],
        }


def load_manifests(directories: Sequence[Path], manager: PackageManager) -> list[ManifestRecord]:
    """Parse the manifest of each located directory, nearest first.

    The last directory is the topmost one; its manifest is the root.
    """
    if not directories:
        return []

    root_filepath = directories[-1] / MANIFEST_NAME
    records: list[ManifestRecord] = []
    for directory in directories:
        filepath = directory / MANIFEST_NAME
        parsed = parse_package_json(filepath)
        records.append(
            ManifestRecord(
                filepath=filepath,
                manager=manager,
                is_root=filepath == root_filepath,
                project_name=parsed.name,
                scripts=parsed.scripts,
            )
        )
    return records


def build_items(
    record: ManifestRecord, commands: Sequence[CommandSpec]
) -> tuple[SelectableItem, ...]:
    """Fixed commands in configured order, then scripts in declared order."""
    items: list[SelectableItem] = [FixedCommand.from_spec(spec) for spec in commands]
    items.extend(Script(name=name, command=command) for name, command in record.scripts)
    return tuple(items)


def source_title(record: ManifestRecord, marker: str = " (root)") -> str:
    if not record.is_root:
        return record.project_name or ""
    if record.project_name:
        return f"{record.project_name}{marker}"
    return marker.strip()


def _to_source(record: ManifestRecord, settings: Settings) -> CatalogSource:
    return CatalogSource(
        title=source_title(record, settings.root_marker),
        items=build_items(record, settings.commands),
        working_directory=record.directory,
        manager=record.manager,
    )


def build_sources(
    directories: Sequence[Path],
    manager: PackageManager,
    settings: Settings | None = None,
) -> list[CatalogSource]:
    """Return one CatalogSource per located manifest directory."""
    settings = settings or Settings.default()
    return [_to_source(record, settings) for record in load_manifests(directories, manager)]


def build_catalog(
    start: Path,
    settings: Settings | None = None,
    *,
    home: Path | None = None,
) -> Catalog:
    """Locate manifests above ``start`` and build the task catalog.

    Params:
        start: directory to start the upward walk from
        settings: lockfile mapping, default manager and fixed commands;
            built-in defaults when None
        home: home directory used as the walk ceiling; ``Path.home()`` when None

    Returns: a Catalog with one source per located manifest, nearest first.
    The manager is resolved once, from the topmost manifest directory, and
    governs every source.
    """
    settings = settings or Settings.default()
    start = start.resolve()

    directories = locate(start, home=home)
    if not directories:
        logger.debug("No %s found above %s", MANIFEST_NAME, start)
        return Catalog(start=start)

    manager = resolve(directories[-1], settings)
    records = load_manifests(directories, manager)
    sources = tuple(_to_source(record, settings) for record in records)
    return Catalog(start=start, sources=sources, manager=manager, records=tuple(records))


def execution_request(source: CatalogSource, item: SelectableItem) -> ExecutionRequest:
    """Return the command that runs ``item`` in the directory of ``source``."""
    return ExecutionRequest(
        directory=source.working_directory,
        command=source.manager.command(item.subcommand()),
    )
