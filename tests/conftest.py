"""Shared fixtures for the new-component test suite."""

from pathlib import Path

import pytest

from new_component.core.config import Configuration
from new_component.core.formatter import BasicFormatter
from new_component.core.types import ComponentType


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty home directory so the real user config is never read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def project_dir(tmp_path: Path, home_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project with an existing ``src/components`` directory, used as cwd."""
    project = tmp_path / "project"
    (project / "src" / "components").mkdir(parents=True)
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        type=ComponentType.FUNCTIONAL,
        dir="src/components",
        extension="ts",
        formatter="basic",
    )


@pytest.fixture
def prettify() -> BasicFormatter:
    return BasicFormatter()
