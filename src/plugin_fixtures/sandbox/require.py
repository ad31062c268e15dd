"""Scoped module loading for sandboxed plugins."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from pathlib import Path
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)


class SandboxRequire:
    """The ``require`` binding handed to plugin code.

    Relative ids (``./helper``, ``../shared/util``) load a single source file
    from the plugin's directory as an isolated module that never enters
    ``sys.modules``. Any other id is imported normally.
    """

    def __init__(self, plugin_dir: str | Path) -> None:
        self.plugin_dir = Path(plugin_dir)
        self._local: dict[Path, ModuleType] = {}

    def __call__(self, module_id: str) -> ModuleType:
        if not module_id:
            raise ImportError("require() needs a module id")
        if module_id.startswith(("./", "../")):
            return self._load_local(module_id)
        return importlib.import_module(module_id)

    def _load_local(self, module_id: str) -> ModuleType:
        target = (self.plugin_dir / module_id).resolve()
        if target.is_dir():
            target = target / "__init__.py"
        elif not target.suffix:
            target = target.with_suffix(".py")

        if target in self._local:
            return self._local[target]
        if not target.is_file():
            raise ImportError(f"Cannot find module '{module_id}' from {self.plugin_dir}")

        spec = importlib.util.spec_from_file_location(target.stem, target)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load module '{module_id}' from {target}")

        module = importlib.util.module_from_spec(spec)
        self._local[target] = module
        logger.debug(f"require({module_id!r}) -> {target}")
        try:
            spec.loader.exec_module(module)
        except BaseException:
            del self._local[target]
            raise
        return module


def restricted_import(
    name: str,
    globals: dict[str, Any] | None = None,
    locals: dict[str, Any] | None = None,
    fromlist: tuple[str, ...] = (),
    level: int = 0,
) -> ModuleType:
    """``__import__`` replacement that only allows absolute imports."""
    if level != 0:
        raise ImportError(
            "relative imports are not available inside plugins, use require('./name')"
        )
    return importlib.__import__(name, None, None, fromlist, 0)
