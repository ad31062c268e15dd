"""Per-plugin result bookkeeping on a mock connection."""

from __future__ import annotations

import re
from typing import Any

# Keys whose values accumulate into lists
ARRAY_KEYS = ("pass", "fail", "skip", "err", "msg")

# Keys collate() leaves out of the summary
HIDDEN_KEYS = ("emit", "human", "human_html")


def _plugin_name(plugin: Any) -> str:
    if isinstance(plugin, str):
        return plugin
    name = getattr(plugin, "name", None)
    if not name:
        raise ValueError("Results need a plugin or a plugin name")
    return name


class ResultStore:
    """Results recorded by plugins, keyed by plugin name."""

    def __init__(self, conn: Any = None) -> None:
        self.conn = conn
        self.store: dict[str, dict[str, Any]] = {}

    def _entry(self, plugin: Any) -> dict[str, Any]:
        name = _plugin_name(plugin)
        if name not in self.store:
            self.store[name] = {key: [] for key in ARRAY_KEYS}
        return self.store[name]

    def add(self, plugin: Any, **results: Any) -> dict[str, Any]:
        """Record results; list keys append, other keys overwrite."""
        entry = self._entry(plugin)
        for key, value in results.items():
            if key in ARRAY_KEYS:
                if isinstance(value, (list, tuple)):
                    entry[key].extend(value)
                else:
                    entry[key].append(value)
            else:
                entry[key] = value
        return entry

    def push(self, plugin: Any, **results: Any) -> dict[str, Any]:
        """Append values to list keys, creating them as needed."""
        entry = self._entry(plugin)
        for key, value in results.items():
            target = entry.setdefault(key, [])
            if not isinstance(target, list):
                target = entry[key] = [target]
            target.append(value)
        return entry

    def incr(self, plugin: Any, **results: Any) -> dict[str, Any]:
        """Add numeric values to counters."""
        entry = self._entry(plugin)
        for key, value in results.items():
            try:
                entry[key] = float(entry.get(key) or 0) + float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Cannot increment {key} by {value!r}") from e
            if entry[key].is_integer():
                entry[key] = int(entry[key])
        return entry

    def get(self, plugin: Any) -> dict[str, Any] | None:
        return self.store.get(_plugin_name(plugin))

    def has(self, plugin: Any, key: str, search: str | re.Pattern) -> bool:
        """Check whether ``key`` of ``plugin`` holds or matches ``search``."""
        entry = self.get(plugin)
        if not entry or key not in entry:
            return False

        values = entry[key] if isinstance(entry[key], list) else [entry[key]]
        for value in values:
            if isinstance(search, re.Pattern):
                if search.search(str(value)):
                    return True
            elif value == search:
                return True
        return False

    def collate(self, plugin: Any) -> str:
        """One-line summary of the results of ``plugin``."""
        entry = self.get(plugin)
        if not entry:
            return ""

        parts = []
        for key, value in entry.items():
            if key in HIDDEN_KEYS:
                continue
            if isinstance(value, list):
                if not value:
                    continue
                value = ", ".join(str(v) for v in value)
            parts.append(f"{key}: {value}")
        return ", ".join(parts)
