"""Exceptions raised while loading plugins."""

from __future__ import annotations


class PluginError(Exception):
    """Base class for plugin loading failures."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class ResolutionError(PluginError):
    """No candidate path exists for the plugin."""

    def __init__(self, name: str, suggestions: list[str] | None = None) -> None:
        self.suggestions = list(suggestions or [])
        message = f"could not find path to plugin '{name}'"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(name, message)


class LoadError(PluginError):
    """Reading the plugin source or its manifest failed."""

    def __init__(self, name: str, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(name, f"Loading plugin {name} failed: {cause}")
