from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def projects(tmp_path: Path) -> ProjectBuilder:
    """Provide a project tree builder rooted at a fake home directory."""
    return ProjectBuilder(tmp_path)
