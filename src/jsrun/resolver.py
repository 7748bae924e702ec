"""Infer the package manager of a directory from its lockfiles."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .models import PackageManager
from .settings import Settings

logger = get_logger("resolver")


def _exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def resolve(directory: Path, settings: Settings | None = None) -> PackageManager:
    """Return the manager of the first configured lockfile present in ``directory``.

    Lockfiles are checked in configured order, so the first match wins when
    several coexist. Without any match the configured default is returned.
    """
    settings = settings or Settings.default()

    for rule in settings.lockfiles:
        if _exists(directory / rule.filename):
            logger.debug("Found %s in %s; using %s", rule.filename, directory, rule.manager)
            return rule.manager

    logger.debug("No lockfile in %s; defaulting to %s", directory, settings.default_manager)
    return settings.default_manager
