"""Upward manifest discovery, bounded by the home directory or filesystem root."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .settings import MANIFEST_NAME

logger = get_logger("discovery")

MAX_MANIFESTS = 2


def starting_directory(
    active_file: Path | str | None = None, fallback: Path | str | None = None
) -> Path:
    """Return the directory holding ``active_file``, or ``fallback`` (default: cwd)."""
    if active_file is not None:
        path = Path(active_file).expanduser().resolve()
        return path if path.is_dir() else path.parent
    if fallback is not None:
        return Path(fallback).expanduser().resolve()
    return Path.cwd().resolve()


def ceiling_for(start: Path, home: Path | None = None) -> Path:
    """Return ``home`` when ``start`` lies under it, otherwise the filesystem root."""
    home = (home or Path.home()).resolve()
    if start == home or home in start.parents:
        return home
    return Path(start.anchor)


def _has_manifest(directory: Path, manifest_name: str) -> bool:
    try:
        return (directory / manifest_name).is_file()
    except OSError:
        return False


def locate(
    start: Path,
    *,
    home: Path | None = None,
    limit: int = MAX_MANIFESTS,
    manifest_name: str = MANIFEST_NAME,
) -> list[Path]:
    """Walk upward from ``start`` collecting directories that hold a manifest.

    The walk stops at the ceiling (which is not itself examined), once
    ``limit`` directories were found, or when no parent is left. The result is
    nearest-first; its last entry is the topmost manifest directory.
    """
    start = start.resolve()
    ceiling = ceiling_for(start, home)
    found: list[Path] = []

    current = start
    while current != ceiling and len(found) < limit:
        if _has_manifest(current, manifest_name):
            found.append(current)
        parent = current.parent
        if parent == current:
            break
        current = parent

    logger.debug("Located %d manifest(s) from %s (ceiling %s): %s", len(found), start, ceiling, found)
    return found
