"""Per-plugin configuration with host-level overrides."""

from __future__ import annotations

import configparser
import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = "config"

KINDS = ("value", "list", "json", "ini", "data")

TRUE_VALUES = {"1", "true", "yes", "on", "ok", "enabled"}


def _guess_kind(name: str) -> str:
    suffix = Path(name).suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix == ".ini":
        return "ini"
    return "value"


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ModuleConfig:
    """Reads ``<root>/config/<file>``, with ``<override>/config/<file>`` on top.

    Missing files are never an error: ``get`` returns ``None`` for values,
    an empty list for lists and an empty dict for json and ini.
    """

    def __init__(self, root: str | Path, override: str | Path | None = None) -> None:
        self.root = Path(root) / CONFIG_DIR
        self.override = Path(override) / CONFIG_DIR if override else None
        if self.override == self.root:
            self.override = None
        self._cache: dict[tuple[str, str], Any] = {}

    def _paths(self, name: str) -> list[Path]:
        """Existing files for ``name``, defaults first."""
        paths = [self.root / name]
        if self.override:
            paths.append(self.override / name)
        return [p for p in paths if p.is_file()]

    def get(self, name: str, kind: str | None = None, default: Any = None) -> Any:
        """Read config file ``name`` as ``kind``."""
        kind = kind or _guess_kind(name)
        if kind not in KINDS:
            raise ValueError(f"Unknown config kind: {kind}")

        key = (name, kind)
        if key not in self._cache:
            self._cache[key] = self._load(name, kind)
        result = self._cache[key]
        if result is None:
            return default
        return result

    def _load(self, name: str, kind: str) -> Any:
        paths = self._paths(name)
        logger.debug(f"Config {name} ({kind}) from {[str(p) for p in paths]}")

        if kind in ("json", "ini"):
            merged: dict[str, Any] = {}
            for path in paths:
                loaded = self._read_json(path) if kind == "json" else self._read_ini(path)
                merged = _merge(merged, loaded)
            return merged

        if not paths:
            return [] if kind == "list" else None

        # Whole-file kinds: the override replaces the default
        text = paths[-1].read_text()
        if kind == "data":
            return text.splitlines()
        if kind == "list":
            return [
                line.strip() for line in text.splitlines()
                if line.strip() and not line.lstrip().startswith("#")
            ]
        for line in text.splitlines():
            if line.strip() and not line.lstrip().startswith("#"):
                return line.strip()
        return None

    @staticmethod
    def _read_json(path: Path) -> dict[str, Any]:
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must hold a JSON object")
        return data

    @staticmethod
    def _read_ini(path: Path) -> dict[str, Any]:
        # Keys above the first section header belong to [main]
        parser = configparser.ConfigParser(interpolation=None, strict=False)
        parser.optionxform = str
        parser.read_string("[main]\n" + path.read_text(), source=str(path))
        return {section: dict(parser.items(section)) for section in parser.sections()}

    def get_ini(self, name: str) -> dict[str, Any]:
        return self.get(name, "ini", {})

    def get_json(self, name: str) -> dict[str, Any]:
        return self.get(name, "json", {})

    def get_list(self, name: str) -> list[str]:
        return self.get(name, "list", [])

    def get_int(self, name: str, default: int = 0) -> int:
        value = self.get(name, "value")
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, name: str, default: bool = False) -> bool:
        value = self.get(name, "value")
        if value is None:
            return default
        return str(value).strip().lower() in TRUE_VALUES

    def clear(self) -> None:
        """Forget cached reads."""
        self._cache.clear()


def module_config(root: str | Path, override: str | Path | None = None) -> ModuleConfig:
    """Config object rooted at ``root`` with overrides from ``override``."""
    return ModuleConfig(root, override)
