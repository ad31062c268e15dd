"""Plugin Fixtures - load and sandbox mail server plugins for unit tests."""

import importlib

__version__ = "0.1.0"

# Public name -> defining module, imported on first access
_LAZY = {
    "Plugin": "plugin_fixtures.plugins.plugin",
    "InstallationStyle": "plugin_fixtures.plugins.layout",
    "create_connection": "plugin_fixtures.connection",
    "ResultStore": "plugin_fixtures.results",
    "ReturnCode": "plugin_fixtures.constants",
    "module_config": "plugin_fixtures.config",
}


def __getattr__(name: str):
    """Lazy import of the public API so the CLI starts fast."""
    module = _LAZY.get(name)
    if module is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
    return getattr(importlib.import_module(module), name)


__all__ = list(_LAZY)
