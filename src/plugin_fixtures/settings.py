"""Harness settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# Host-level configuration root for package plugins
HOST_HOME_ENV = "MAILHOST_HOME"

# Default caller base directory
BASE_DIR_ENV = "PLUGIN_FIXTURES_DIR"


@dataclass
class FixtureSettings:
    """Settings shared by the loader and the CLI."""

    base_dir: Path = field(default_factory=Path.cwd)
    host_dir: Path | None = None

    @classmethod
    def from_env(cls) -> FixtureSettings:
        """Build settings from ``PLUGIN_FIXTURES_DIR`` and ``MAILHOST_HOME``."""
        base = os.getenv(BASE_DIR_ENV)
        host = os.getenv(HOST_HOME_ENV)
        return cls(
            base_dir=Path(base).resolve() if base else Path.cwd(),
            host_dir=Path(host).resolve() if host else None,
        )

    def override_dir(self, base_dir: Path | None = None) -> Path:
        """Directory holding host-level config overrides.

        The host home wins, then the caller directory ``base_dir``, then the
        configured base directory.
        """
        return self.host_dir or base_dir or self.base_dir
