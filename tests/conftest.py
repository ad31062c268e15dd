"""Shared fixtures for building plugin trees on disk."""

from __future__ import annotations

import json
from pathlib import Path
from textwrap import dedent

import pytest

from plugin_fixtures.settings import BASE_DIR_ENV, HOST_HOME_ENV


def write(path: Path, text: str) -> Path:
    """Write dedented ``text`` to ``path``, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(text).lstrip("\n"))
    return path


def write_package(directory: Path, entry: str, main: str | None = None) -> Path:
    """Create a package plugin in ``directory`` and return its manifest."""
    manifest = {"name": directory.name, "version": "1.0.0"}
    if main:
        manifest["main"] = main
    write(directory / (main or "index.py"), entry)
    return write(directory / "package.json", json.dumps(manifest))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep the developer's environment out of resolution and config."""
    monkeypatch.delenv(HOST_HOME_ENV, raising=False)
    monkeypatch.delenv(BASE_DIR_ENV, raising=False)


@pytest.fixture
def host(tmp_path) -> Path:
    """A host checkout: a directory with a plugins/ subdirectory."""
    root = tmp_path / "host"
    (root / "plugins").mkdir(parents=True)
    return root
