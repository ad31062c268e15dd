"""Configuration and source loading for resolved plugins."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from plugin_fixtures.config import ModuleConfig, module_config
from plugin_fixtures.errors import LoadError
from plugin_fixtures.sandbox.executor import STRICT_DIRECTIVE
from plugin_fixtures.settings import FixtureSettings

from .layout import DEFAULT_ENTRY, MANIFEST_NAME, PLUGIN_SUFFIX, InstallationStyle

if TYPE_CHECKING:
    from .plugin import Plugin

logger = logging.getLogger(__name__)

# Drops a leading BOM so prefixing the strict directive stays valid
SOURCE_ENCODING = "utf-8-sig"


def load_config(plugin: Plugin, settings: FixtureSettings | None = None) -> ModuleConfig:
    """Select config directories for ``plugin`` by installation style.

    Package plugins keep defaults in their own directory and take overrides
    from the host home. Flat-file plugins read the caller directory only.
    """
    settings = settings or FixtureSettings.from_env()
    if plugin.style == InstallationStyle.PACKAGE and plugin.plugin_path:
        override = settings.override_dir(plugin.base_dir)
        logger.debug(f"Config for {plugin.name}: {plugin.plugin_path.parent} (override {override})")
        return module_config(plugin.plugin_path.parent, override)

    return module_config(plugin.base_dir)


def entry_path(manifest_path: Path, manifest: dict) -> Path:
    """Entry file declared by ``manifest``, relative to its directory."""
    main = manifest.get("main") or DEFAULT_ENTRY
    entry = manifest_path.parent / main
    if not entry.suffix and not entry.exists():
        entry = entry.with_suffix(PLUGIN_SUFFIX)
    return entry


def _read_manifest(name: str, path: Path) -> dict:
    try:
        manifest = json.loads(path.read_text(encoding=SOURCE_ENCODING))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LoadError(name, e) from e
    if not isinstance(manifest, dict):
        raise LoadError(name, f"manifest {path} is not a JSON object")
    return manifest


def load_code(name: str, path: Path, style: InstallationStyle) -> str:
    """Return the source text of plugin ``name``.

    Package plugins are read from the manifest's entry file, or from the
    matched source file when it merely sits beside a manifest. Flat files
    get the strict directive prepended.
    """
    if style == InstallationStyle.PACKAGE:
        source = path
        if path.name == MANIFEST_NAME:
            source = entry_path(path, _read_manifest(name, path))
        try:
            return source.read_text(encoding=SOURCE_ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(name, e) from e

    try:
        return STRICT_DIRECTIVE + path.read_text(encoding=SOURCE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(name, e) from e
