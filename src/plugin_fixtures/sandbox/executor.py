"""Single-shot evaluation of plugin source in an isolated namespace."""

from __future__ import annotations

import logging
import types
import warnings
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .context import build_bindings

if TYPE_CHECKING:
    from plugin_fixtures.plugins.plugin import Plugin

logger = logging.getLogger(__name__)

# Leading line marking a source for strict evaluation
STRICT_DIRECTIVE = "# use strict\n"


def _defined_functions(namespace: dict[str, Any]) -> dict[str, Any]:
    """Public top-level functions the plugin itself defined."""
    exported_names = namespace.get("__all__")
    if exported_names is not None:
        return {name: namespace[name] for name in exported_names if name in namespace}

    return {
        name: value
        for name, value in namespace.items()
        if not name.startswith("_")
        and isinstance(value, types.FunctionType)
        and value.__globals__ is namespace
    }


def execute(source: str, path: str | Path, plugin: Plugin) -> Plugin:
    """Evaluate ``source`` once and capture its exports onto ``plugin``.

    Anything the plugin raises propagates unchanged.
    """
    path = Path(path)
    namespace = build_bindings(plugin, path)

    strict = source.startswith(STRICT_DIRECTIVE)
    if strict:
        # The directive is a whole line, so dropping it keeps line numbers
        source = source[len(STRICT_DIRECTIVE):]

    logger.debug(f"Evaluating plugin {plugin.name} from {path} (strict={strict})")
    if strict:
        # Compile inside the filter so SyntaxWarnings escalate too
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            code = compile(source, str(path), "exec", dont_inherit=True)
            exec(code, namespace)
    else:
        code = compile(source, str(path), "exec", dont_inherit=True)
        exec(code, namespace)

    for name, value in _defined_functions(namespace).items():
        plugin.exported.setdefault(name, value)

    return plugin
