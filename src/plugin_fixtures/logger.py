"""Leveled log methods for plugins and mock connections."""

from __future__ import annotations

import logging
from typing import Any

DATA = 5
PROTOCOL = 7
NOTICE = 25
ALERT = 55
EMERG = 60

# Host severity names, mapped onto stdlib levels (lowest first)
LEVELS: dict[str, int] = {
    "data": DATA,
    "protocol": PROTOCOL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": NOTICE,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "crit": logging.CRITICAL,
    "alert": ALERT,
    "emerg": EMERG,
}

for _name, _level in (("DATA", DATA), ("PROTOCOL", PROTOCOL), ("NOTICE", NOTICE),
                      ("ALERT", ALERT), ("EMERG", EMERG)):
    logging.addLevelName(_level, _name)


def get_logger(name: str) -> logging.Logger:
    """Logger used for messages emitted on behalf of ``name``."""
    return logging.getLogger(f"plugin_fixtures.{name}")


def _make_method(log: logging.Logger, name: str, severity: str, level: int):
    prefix = f"[{severity.upper()}] [{name}]"

    def log_method(*args: Any) -> None:
        if not log.isEnabledFor(level):
            return
        log.log(level, "%s %s", prefix, " ".join(str(a) for a in args))

    log_method.__name__ = f"log{severity}"
    return log_method


def add_log_methods(target: Any, name: str) -> None:
    """Attach ``logdebug``, ``loginfo`` and friends to ``target``.

    Methods are stored straight into the instance ``__dict__`` so objects
    that route attribute writes elsewhere (like plugins) keep them private.
    """
    log = get_logger(name)
    for severity, level in LEVELS.items():
        method = _make_method(log, name, severity, level)
        try:
            vars(target)[method.__name__] = method
        except TypeError:
            setattr(target, method.__name__, method)
