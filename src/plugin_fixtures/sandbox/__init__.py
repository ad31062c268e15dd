"""Sandboxed evaluation of plugin source."""

from .context import SAFE_BUILTINS, SANDBOX_GLOBALS, Exports, ProcessHandle, build_bindings
from .executor import STRICT_DIRECTIVE, execute
from .require import SandboxRequire

__all__ = [
    "execute",
    "STRICT_DIRECTIVE",
    "build_bindings",
    "Exports",
    "ProcessHandle",
    "SandboxRequire",
    "SAFE_BUILTINS",
    "SANDBOX_GLOBALS",
]
