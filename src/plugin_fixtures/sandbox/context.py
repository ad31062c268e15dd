"""The fixed set of bindings visible to plugin code."""

from __future__ import annotations

import builtins
import math
import os
import platform
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from rich.console import Console

from plugin_fixtures import constants

from . import timers
from .require import SandboxRequire, restricted_import

if TYPE_CHECKING:
    from plugin_fixtures.plugins.plugin import Plugin

# Builtins a plugin may not reach
BLOCKED_BUILTINS = frozenset({
    "open", "eval", "exec", "compile", "input", "breakpoint",
    "globals", "locals", "vars", "exit", "quit", "help",
    "copyright", "credits", "license", "__import__", "__loader__",
    "__spec__", "__package__", "__name__", "__doc__",
})

SAFE_BUILTINS: dict[str, Any] = {
    name: value
    for name, value in vars(builtins).items()
    if name not in BLOCKED_BUILTINS
}
SAFE_BUILTINS["__import__"] = restricted_import

# Names every sandbox defines besides the constants
SANDBOX_GLOBALS = (
    "require", "__file__", "__dirname__", "exports", "console",
    "set_timeout", "clear_timeout", "set_interval", "clear_interval",
    "set_immediate", "process", "Buffer", "math", "server",
)

_console = Console()


class ProcessHandle:
    """Read-mostly view of the running process."""

    def __init__(self) -> None:
        self.env = os.environ
        self.argv = list(sys.argv)
        self.pid = os.getpid()
        self.platform = sys.platform
        self.version = platform.python_version()

    @staticmethod
    def cwd() -> str:
        return os.getcwd()

    @staticmethod
    def next_tick(callback, *args: Any) -> timers.Timeout:
        return timers.set_immediate(callback, *args)


class Exports:
    """Write target handed to plugin code as ``exports``.

    Attribute writes land in the plugin's exported surface. Reads fall
    through to the plugin, so ``exports.config`` and ``exports.inherits``
    work from top-level plugin code.
    """

    __slots__ = ("_plugin",)

    def __init__(self, plugin: Plugin) -> None:
        object.__setattr__(self, "_plugin", plugin)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._plugin, name)

    def __setattr__(self, name: str, value: Any) -> None:
        self._plugin.exported[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._plugin.exported[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"<exports of {self._plugin.name}>"


def build_bindings(plugin: Plugin, path: Path) -> dict[str, Any]:
    """Fresh namespace for one evaluation of ``plugin``'s source."""
    namespace: dict[str, Any] = {
        "__builtins__": dict(SAFE_BUILTINS),
        "__name__": plugin.name,
        "require": SandboxRequire(path.parent),
        "__file__": str(path),
        "__dirname__": str(path.parent),
        "exports": Exports(plugin),
        "console": _console,
        "set_timeout": timers.set_timeout,
        "clear_timeout": timers.clear_timeout,
        "set_interval": timers.set_interval,
        "clear_interval": timers.clear_interval,
        "set_immediate": timers.set_immediate,
        "process": ProcessHandle(),
        "Buffer": bytearray,
        "math": math,
        "server": plugin.server,
    }
    constants.import_into(namespace)
    return namespace
