"""Pytest configuration and shared fixtures for rpkgdev tests."""

import shutil
from pathlib import Path

import pytest
from rich.console import Console

from rpkgdev.api.deployer import TemplateDeployer
from rpkgdev.constants import ENV_CONFIG_PATH
from rpkgdev.core.ide import NullIdeBridge
from rpkgdev.core.vcs import NullVcsClient
from rpkgdev.templates import TEMPLATES_DIR


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the user's ~/.rpkgdev.yaml out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    return home


@pytest.fixture
def vcs():
    return NullVcsClient()


@pytest.fixture
def ide():
    return NullIdeBridge()


@pytest.fixture
def deployer(vcs, ide):
    """Deployer with recording capabilities and a silent console."""
    return TemplateDeployer(vcs=vcs, ide=ide, console=Console(quiet=True))


@pytest.fixture
def template_copy(tmp_path):
    """A writable copy of the bundled templates."""
    root = tmp_path / "templates"
    shutil.copytree(
        TEMPLATES_DIR,
        root,
        ignore=shutil.ignore_patterns("__init__.py", "__pycache__"),
    )
    return root


def snapshot(directory: Path) -> dict:
    """Map relative path to bytes for every file under directory."""
    return {
        path.relative_to(directory).as_posix(): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }
