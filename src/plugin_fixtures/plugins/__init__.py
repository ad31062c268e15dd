"""Plugin resolution, loading and inheritance."""

from .layout import InstallationStyle, LayoutKind, Resolution, candidate_paths, detect_layout, resolve_path
from .plugin import Plugin

__all__ = [
    "Plugin",
    "InstallationStyle",
    "LayoutKind",
    "Resolution",
    "candidate_paths",
    "detect_layout",
    "resolve_path",
]
