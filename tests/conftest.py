"""
Pytest configuration for installer tests.

Provides shared fixtures for Source Bundles, target directories and a
reporter that records console output.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from ecc_installer.reporter import INSTALLER_THEME, InstallReporter
from ecc_installer.settings import InstallPaths
from tests.fixtures import create_bundle


@pytest.fixture
def bundle(tmp_path):
    """A complete Source Bundle with every supported language."""
    return create_bundle(tmp_path / "bundle")


@pytest.fixture
def paths(bundle, tmp_path):
    """InstallPaths pointing at the bundle and a not-yet-created target."""
    return InstallPaths(source_root=bundle, target_root=tmp_path / "home" / ".claude")


@pytest.fixture
def reporter():
    """InstallReporter writing to an in-memory console.

    Read the text with ``reporter.console.file.getvalue()``.
    """
    console = Console(file=io.StringIO(), theme=INSTALLER_THEME, width=200, highlight=False)
    return InstallReporter(console)


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point Path.home() at a temp directory and return it."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", staticmethod(lambda: home))
    return home
