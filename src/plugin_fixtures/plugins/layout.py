"""Plugin path resolution across the supported installation layouts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

PLUGIN_SUFFIX = ".py"
MANIFEST_NAME = "package.json"
DEFAULT_ENTRY = "index.py"
PLUGINS_DIR = "plugins"
LIB_DIR = "lib"
DEPENDENCY_DIR = "node_modules"
FIXTURES_PACKAGE = "plugin-fixtures"


class InstallationStyle(Enum):
    """How a plugin is laid out on disk."""

    PACKAGE = "package"  # directory with a manifest
    FLAT_FILE = "flat_file"


class LayoutKind(Enum):
    """Where the caller sits relative to the plugins it loads."""

    VENDORED = "vendored"  # <root>/node_modules/plugin-fixtures/lib
    LIB = "lib"
    PLUGINS = "plugins"
    HOST = "host"  # a checkout with a plugins/ directory
    INSTALLED = "installed"  # a published plugin package


@dataclass(frozen=True)
class Resolution:
    """A plugin path found on disk."""

    name: str
    path: Path
    style: InstallationStyle
    layout: LayoutKind


def is_vendored(base_dir: Path) -> bool:
    """Check whether ``base_dir`` is the lib/ of a vendored fixtures package."""
    return (
        base_dir.name == LIB_DIR
        and base_dir.parent.name == FIXTURES_PACKAGE
        and base_dir.parent.parent.name == DEPENDENCY_DIR
    )


def effective_base(base_dir: str | Path) -> Path:
    """Rebase a vendored fixtures directory to the project that vendors it."""
    base = Path(base_dir).resolve()
    if is_vendored(base):
        return base.parents[2]
    return base


def detect_layout(base_dir: str | Path) -> LayoutKind:
    """Classify the caller directory.

    ``VENDORED`` is reported for the raw directory. Candidate paths for it
    are computed from the rebased directory, whose own layout is returned by
    ``detect_layout(effective_base(base_dir))``.
    """
    base = Path(base_dir).resolve()
    if is_vendored(base):
        return LayoutKind.VENDORED
    if base.name == LIB_DIR:
        return LayoutKind.LIB
    if base.name == PLUGINS_DIR:
        return LayoutKind.PLUGINS
    if (base / PLUGINS_DIR).is_dir():
        return LayoutKind.HOST
    return LayoutKind.INSTALLED


def candidate_paths(name: str, base_dir: str | Path) -> list[Path]:
    """Ordered list of paths where plugin ``name`` may live."""
    if not name:
        raise ValueError("Plugin name must not be empty")

    base = effective_base(base_dir)
    layout = detect_layout(base)
    flat = f"{name}{PLUGIN_SUFFIX}"

    if layout == LayoutKind.LIB:
        return [
            base.parent / flat,
            base.parent / name / MANIFEST_NAME,
        ]
    if layout == LayoutKind.PLUGINS:
        return [
            base / flat,
            base / name / MANIFEST_NAME,
        ]
    if layout == LayoutKind.HOST:
        return [
            base / PLUGINS_DIR / flat,
            base / PLUGINS_DIR / name / MANIFEST_NAME,
            base / DEPENDENCY_DIR / name / MANIFEST_NAME,
        ]
    # Published plugin package, possibly inheriting another published plugin
    return [
        base / DEPENDENCY_DIR / name / MANIFEST_NAME,
        base / flat,
        base / MANIFEST_NAME,
    ]


def installation_style(path: Path) -> InstallationStyle:
    """Package style if ``path`` is a manifest or sits next to one."""
    if path.name == MANIFEST_NAME or (path.parent / MANIFEST_NAME).is_file():
        return InstallationStyle.PACKAGE
    return InstallationStyle.FLAT_FILE


def resolve_path(name: str, base_dir: str | Path) -> Resolution | None:
    """Find plugin ``name`` starting from ``base_dir``.

    Candidates are probed in order and the first existing one wins. Returns
    ``None`` when nothing matches so callers can resolve speculatively.
    """
    layout = detect_layout(base_dir)
    for path in candidate_paths(name, base_dir):
        if path.exists():
            resolution = Resolution(
                name=name,
                path=path,
                style=installation_style(path),
                layout=layout,
            )
            logger.debug(
                f"Resolved plugin {name} to {path} "
                f"({resolution.style.value}, {layout.value})"
            )
            return resolution

    logger.debug(f"No path found for plugin {name} under {base_dir}")
    return None
