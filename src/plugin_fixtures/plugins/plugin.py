"""The plugin instance under test."""

from __future__ import annotations

import logging
import types
from pathlib import Path
from typing import Any
from unittest.mock import Mock

from plugin_fixtures.errors import ResolutionError
from plugin_fixtures.logger import add_log_methods
from plugin_fixtures.sandbox import execute
from plugin_fixtures.settings import FixtureSettings

from .discovery import suggest_names
from .inheritance import inherit
from .layout import InstallationStyle, effective_base, resolve_path
from .loader import load_code, load_config

logger = logging.getLogger(__name__)


def _takes_self(member: Any) -> bool:
    """True for plain functions whose first positional parameter is ``self``."""
    if not isinstance(member, types.FunctionType):
        return False
    code = member.__code__
    return code.co_argcount > 0 and code.co_varnames[0] == "self"


class Plugin:
    """A plugin loaded from disk and evaluated in a sandbox.

    Construction resolves the plugin path, loads its config and source and
    evaluates it. Members the plugin exports live in ``exported``; attribute
    lookups that miss the instance fall through to them, and functions taking
    ``self`` come back bound to the plugin like methods.

    Example:
        plugin = Plugin("rcpt_to.in_host_list")
        plugin.register()
        plugin.hook_rcpt(next_, connection, params)
    """

    def __init__(
        self,
        name: str,
        base_dir: str | Path | None = None,
        server: Any = None,
        settings: FixtureSettings | None = None,
    ) -> None:
        """Resolve, configure and evaluate plugin ``name``.

        Args:
            name: Plugin name
            base_dir: Caller directory the search starts from
            server: Host server object exposed to plugin code
            settings: Harness settings, read from the environment by default

        Raises:
            ResolutionError: No candidate path exists
            LoadError: The source or manifest could not be read
        """
        if not name:
            raise ValueError("Plugin name must not be empty")

        self.settings = settings or FixtureSettings.from_env()
        self.name = name
        self.base_dir = effective_base(base_dir or self.settings.base_dir)
        self.exported: dict[str, Any] = {}
        self.parents: dict[str, Plugin] = {}
        self.last_err = ""
        self.register_hook = Mock(name=f"{name}.register_hook")

        # Replaced by tests that need a richer server
        self.server = server if server is not None else types.SimpleNamespace(notes={})

        resolution = resolve_path(name, self.base_dir)
        self.plugin_path: Path | None = resolution.path if resolution else None
        self.style = resolution.style if resolution else InstallationStyle.FLAT_FILE
        self.config = load_config(self, self.settings)

        add_log_methods(self, name)
        self.load_plugin()

    def __getattr__(self, name: str) -> Any:
        exported = self.__dict__.get("exported")
        if exported is None or name not in exported:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        member = exported[name]
        if _takes_self(member):
            return types.MethodType(member, self)
        return member

    def __repr__(self) -> str:
        return f"Plugin(name={self.name!r}, path={str(self.plugin_path)!r}, style={self.style.value})"

    @property
    def has_package_json(self) -> bool:
        return self.style == InstallationStyle.PACKAGE

    def load_plugin(self) -> Plugin:
        """Read and evaluate the plugin source once."""
        try:
            if self.plugin_path is None:
                raise ResolutionError(self.name, suggest_names(self.name, self.base_dir))
            code = load_code(self.name, self.plugin_path, self.style)
            return execute(code, self.plugin_path, self)
        except Exception as e:
            self.last_err = str(e)
            raise

    def inherits(self, parent_name: str) -> Plugin:
        """Copy members this plugin lacks from plugin ``parent_name``.

        Returns the loaded parent, also kept in ``parents[parent_name]``.
        """
        return inherit(self, parent_name)
