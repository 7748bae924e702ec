"""Tests for jsrun.parsers.package_json."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsrun.parsers.package_json import PackageJson, parse, read_document


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_parse_extracts_name_and_ordered_scripts(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "package.json",
        '{"name":"pkg","scripts":{"build":"tsc","test":"jest"}}',
    )

    parsed = parse(path)

    assert parsed.name == "pkg"
    assert parsed.scripts == (("build", "tsc"), ("test", "jest"))


def test_parse_preserves_declared_script_order(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "package.json",
        '{"scripts":{"zeta":"z","alpha":"a","mid":"m"}}',
    )

    assert [name for name, _ in parse(path).scripts] == ["zeta", "alpha", "mid"]


def test_parse_missing_file_returns_empty(tmp_path: Path) -> None:
    assert parse(tmp_path / "package.json") == PackageJson.empty()


@pytest.mark.parametrize(
    "content",
    [
        "",
        "{not json",
        '{"name": "pkg",}',
        "[1, 2, 3]",
        '"just a string"',
        "null",
    ],
)
def test_parse_malformed_content_returns_empty(tmp_path: Path, content: str) -> None:
    path = _write(tmp_path / "package.json", content)

    parsed = parse(path)

    assert parsed.name is None
    assert parsed.scripts == ()


def test_parse_invalid_utf8_returns_empty(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')

    assert parse(path) == PackageJson.empty()


def test_parse_directory_returns_empty(tmp_path: Path) -> None:
    directory = tmp_path / "package.json"
    directory.mkdir()

    assert parse(directory) == PackageJson.empty()


def test_parse_ignores_non_string_name(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.json", '{"name": 42, "scripts": {"dev": "vite"}}')

    parsed = parse(path)

    assert parsed.name is None
    assert parsed.scripts == (("dev", "vite"),)


def test_parse_ignores_scripts_that_are_not_an_object(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.json", '{"name": "pkg", "scripts": ["build"]}')

    parsed = parse(path)

    assert parsed.name == "pkg"
    assert parsed.scripts == ()


def test_parse_skips_non_string_commands(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "package.json",
        '{"scripts": {"build": "tsc", "weird": {"nested": true}, "n": 1, "lint": "eslint ."}}',
    )

    assert parse(path).scripts == (("build", "tsc"), ("lint", "eslint ."))


def test_read_document_returns_none_for_non_object(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.json", "[]")

    assert read_document(path) is None
    assert read_document(tmp_path / "missing.json") is None


def test_parse_skips_empty_script_names(tmp_path: Path) -> None:
    path = _write(tmp_path / "package.json", '{"scripts": {"": "echo hi", "build": "tsc"}}')

    assert parse(path).scripts == (("build", "tsc"),)
