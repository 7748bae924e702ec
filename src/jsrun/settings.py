"""Configuration loader for package-manager detection and the task catalog.

Reads settings from a JSON or YAML file and validates the structure against
``SETTINGS_SCHEMA``. Every key is optional; omitted keys keep the built-in
defaults (the four common package managers, their lockfiles, and the
``install``/``outdated`` fixed commands).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from .models import CommandSpec, LockfileRule, PackageManager


CONFIG_PATH_ENV_VAR = "JSRUN_SETTINGS"
MANIFEST_NAME = "package.json"

DEFAULT_MANAGERS = ("npm", "yarn", "pnpm", "bun")
DEFAULT_LOCKFILES = (
    ("package-lock.json", "npm"),
    ("bun.lock", "bun"),
    ("bun.lockb", "bun"),
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
)
DEFAULT_MANAGER = "npm"
DEFAULT_COMMANDS = (
    ("install", "Install packages"),
    ("outdated", "Outdated packages"),
)
DEFAULT_ROOT_MARKER = " (root)"

_MANAGER_ID = {"type": "string", "pattern": r"^\S+$"}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "managers": {
            "type": "array",
            "items": _MANAGER_ID,
            "minItems": 1,
            "uniqueItems": True,
        },
        "lockfiles": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["filename", "manager"],
                "properties": {
                    "filename": {"type": "string", "pattern": r"^[^/\\]+$"},
                    "manager": _MANAGER_ID,
                },
            },
        },
        "defaultManager": _MANAGER_ID,
        "commands": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "required": ["id"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "description": {"type": "string"},
                },
            },
        },
        "rootMarker": {"type": "string"},
    },
}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Read-only configuration passed into catalog building."""

    managers: tuple[str, ...] = DEFAULT_MANAGERS
    lockfiles: tuple[LockfileRule, ...] = field(
        default_factory=lambda: tuple(
            LockfileRule(filename, PackageManager(manager))
            for filename, manager in DEFAULT_LOCKFILES
        )
    )
    default_manager: PackageManager = PackageManager(DEFAULT_MANAGER)
    commands: tuple[CommandSpec, ...] = field(
        default_factory=lambda: tuple(
            CommandSpec(command_id, description) for command_id, description in DEFAULT_COMMANDS
        )
    )
    root_marker: str = DEFAULT_ROOT_MARKER

    @classmethod
    def default(cls) -> Settings:
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Build settings from an already schema-validated mapping."""
        defaults = cls()

        managers = tuple(data.get("managers", defaults.managers))

        lockfiles = defaults.lockfiles
        if "lockfiles" in data:
            lockfiles = tuple(
                LockfileRule(entry["filename"], PackageManager(entry["manager"]))
                for entry in data["lockfiles"]
            )

        default_manager = defaults.default_manager
        if "defaultManager" in data:
            default_manager = PackageManager(data["defaultManager"])

        commands = defaults.commands
        if "commands" in data:
            commands = tuple(
                CommandSpec(entry["id"], entry.get("description", ""))
                for entry in data["commands"]
            )

        return cls(
            managers=managers,
            lockfiles=lockfiles,
            default_manager=default_manager,
            commands=commands,
            root_marker=data.get("rootMarker", defaults.root_marker),
        )


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "jsrun" / "settings.json"


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. JSRUN_SETTINGS environment variable
    3. Default path (settings.json under the user config directory)

    The second element tells whether the path was requested explicitly.
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return default_config_path(), False


def _decode(config_path: Path, content: str) -> Any:
    if config_path.suffix.lower() in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc


def _format_errors(errors: list[Any]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON or YAML file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            JSRUN_SETTINGS env var or falls back to the user config directory.

    Returns:
        A validated Settings object. When no file was requested and the
        default file does not exist, the built-in defaults are returned.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path, explicit = _resolve_config_path(path)

    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return Settings.default()

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    data = _decode(config_path, content)
    if data is None:
        data = {}

    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Invalid configuration file:\n" + _format_errors(errors))

    try:
        settings = Settings.from_dict(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid configuration file: {exc}") from exc
    validate_managers(settings)
    return settings


def validate_managers(settings: Settings) -> None:
    """Validate that every referenced manager is declared and lockfiles are unique.

    Raises:
        ConfigError: If a lockfile or the default manager names an unknown
            manager, or a lockfile name is listed twice.
    """
    known = set(settings.managers)

    referenced = [rule.manager.id for rule in settings.lockfiles]
    referenced.append(settings.default_manager.id)
    unknown = sorted({manager for manager in referenced if manager not in known})
    if unknown:
        raise ConfigError(
            f"Unknown package manager(s): {', '.join(unknown)}. "
            f"Declared managers: {', '.join(settings.managers)}"
        )

    seen: set[str] = set()
    for rule in settings.lockfiles:
        if rule.filename in seen:
            raise ConfigError(f"Duplicate lockfile name: '{rule.filename}'")
        seen.add(rule.filename)
