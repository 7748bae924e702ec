"""Tests for jsrun.models."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsrun.models import (
    CatalogSource,
    CommandSpec,
    ExecutionRequest,
    FixedCommand,
    LockfileRule,
    ManifestRecord,
    PackageManager,
    Script,
)


def test_package_manager_builds_commands() -> None:
    manager = PackageManager("pnpm")

    assert str(manager) == "pnpm"
    assert manager.command("install") == "pnpm install"


@pytest.mark.parametrize("value", ["", "npm run", "yarn\t"])
def test_package_manager_rejects_invalid_ids(value: str) -> None:
    with pytest.raises(ValueError):
        PackageManager(value)


def test_lockfile_rule_requires_bare_name() -> None:
    with pytest.raises(ValueError):
        LockfileRule("sub/yarn.lock", PackageManager("yarn"))
    with pytest.raises(ValueError):
        LockfileRule("", PackageManager("yarn"))


def test_manifest_record_requires_absolute_path() -> None:
    with pytest.raises(ValueError, match="absolute"):
        ManifestRecord(
            filepath=Path("package.json"),
            manager=PackageManager("npm"),
            is_root=True,
            project_name=None,
            scripts=(),
        )


def test_manifest_record_rejects_duplicate_scripts() -> None:
    with pytest.raises(ValueError, match="unique"):
        ManifestRecord(
            filepath=Path("/p/package.json"),
            manager=PackageManager("npm"),
            is_root=True,
            project_name=None,
            scripts=(("build", "a"), ("build", "b")),
        )


def test_manifest_record_views() -> None:
    record = ManifestRecord(
        filepath=Path("/p/package.json"),
        manager=PackageManager("bun"),
        is_root=False,
        project_name="p",
        scripts=(("dev", "vite"), ("build", "vite build")),
    )

    assert record.directory == Path("/p")
    assert list(record.scripts_map()) == ["dev", "build"]
    assert record.to_dict() == {
        "filepath": "/p/package.json",
        "manager": "bun",
        "isRoot": False,
        "projectName": "p",
        "scripts": {"dev": "vite", "build": "vite build"},
    }


def test_selectable_item_variants() -> None:
    fixed = FixedCommand.from_spec(CommandSpec("outdated", "Outdated packages"))
    script = Script("lint", "eslint .")

    assert (fixed.label, fixed.description, fixed.subcommand()) == (
        "outdated",
        "Outdated packages",
        "outdated",
    )
    assert (script.label, script.description, script.subcommand()) == ("lint", "eslint .", "run lint")


def test_command_spec_and_script_require_names() -> None:
    with pytest.raises(ValueError):
        CommandSpec("")
    with pytest.raises(ValueError):
        Script("", "x")


def test_catalog_source_to_dict() -> None:
    source = CatalogSource(
        title="web (root)",
        items=(FixedCommand("install", "Install packages"), Script("dev", "vite")),
        working_directory=Path("/w"),
        manager=PackageManager("yarn"),
    )

    assert source.to_dict() == {
        "title": "web (root)",
        "workingDirectory": "/w",
        "manager": "yarn",
        "items": [
            {"kind": "command", "id": "install", "description": "Install packages"},
            {"kind": "script", "id": "dev", "description": "vite"},
        ],
    }


def test_execution_request_requires_command() -> None:
    with pytest.raises(ValueError):
        ExecutionRequest(directory=Path("/w"), command="")
