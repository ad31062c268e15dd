"""List reachable plugins and suggest near misses for unknown names."""

from __future__ import annotations

import logging
from pathlib import Path

from thefuzz import fuzz, process

from .layout import (
    DEPENDENCY_DIR,
    MANIFEST_NAME,
    PLUGIN_SUFFIX,
    PLUGINS_DIR,
    LayoutKind,
    detect_layout,
    effective_base,
)

logger = logging.getLogger(__name__)


def _scan(directory: Path) -> set[str]:
    """Flat files and manifest directories directly inside ``directory``."""
    names: set[str] = set()
    if not directory.is_dir():
        return names
    for entry in directory.iterdir():
        if entry.is_file() and entry.suffix == PLUGIN_SUFFIX and entry.stem != "__init__":
            names.add(entry.stem)
        elif entry.is_dir() and (entry / MANIFEST_NAME).is_file():
            names.add(entry.name)
    return names


def available_plugins(base_dir: str | Path) -> list[str]:
    """Plugin names reachable from ``base_dir`` under its layout."""
    base = effective_base(base_dir)
    layout = detect_layout(base)

    if layout == LayoutKind.LIB:
        names = _scan(base.parent)
    elif layout == LayoutKind.PLUGINS:
        names = _scan(base)
    elif layout == LayoutKind.HOST:
        names = _scan(base / PLUGINS_DIR) | _scan(base / DEPENDENCY_DIR)
    else:
        names = _scan(base / DEPENDENCY_DIR) | _scan(base)

    return sorted(names)


def suggest_names(
    name: str,
    base_dir: str | Path,
    limit: int = 3,
    threshold: int = 60,
) -> list[str]:
    """Reachable plugin names that look like ``name``."""
    choices = available_plugins(base_dir)
    if not choices:
        return []

    matches = process.extract(name, choices, scorer=fuzz.ratio, limit=limit)
    suggestions = [match for match, score in matches if score >= threshold]
    logger.debug(f"Suggestions for {name}: {suggestions}")
    return suggestions
