"""Timer primitives exposed to plugin code."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

# Floor for repeating timers so a zero interval cannot spin
MIN_INTERVAL_MS = 1.0


class Timeout:
    """Handle for a pending one-shot or repeating callback."""

    def __init__(
        self,
        callback: Callable[..., Any],
        delay_ms: float,
        args: tuple[Any, ...],
        repeat: bool = False,
    ) -> None:
        self.callback = callback
        floor = MIN_INTERVAL_MS if repeat else 0.0
        self.delay = max(float(delay_ms), floor) / 1000.0
        self.args = args
        self.repeat = repeat
        self._cancelled = threading.Event()
        self._timer: threading.Timer | None = None
        self._schedule()

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.delay, self._fire)
        self._timer.daemon = True
        self._timer.start()

    def _fire(self) -> None:
        if self._cancelled.is_set():
            return
        if self.repeat:
            self._schedule()
        self.callback(*self.args)

    @property
    def active(self) -> bool:
        return not self._cancelled.is_set() and self._timer is not None and (
            self.repeat or self._timer.is_alive()
        )

    def cancel(self) -> None:
        self._cancelled.set()
        if self._timer is not None:
            self._timer.cancel()


def set_timeout(callback: Callable[..., Any], delay_ms: float = 0, *args: Any) -> Timeout:
    """Run ``callback(*args)`` once after ``delay_ms`` milliseconds."""
    return Timeout(callback, delay_ms, args)


def set_interval(callback: Callable[..., Any], delay_ms: float = 0, *args: Any) -> Timeout:
    """Run ``callback(*args)`` every ``delay_ms`` milliseconds until cleared."""
    return Timeout(callback, delay_ms, args, repeat=True)


def set_immediate(callback: Callable[..., Any], *args: Any) -> Timeout:
    """Run ``callback(*args)`` as soon as possible."""
    return Timeout(callback, 0, args)


def clear_timeout(handle: Timeout | None) -> None:
    if handle is not None:
        handle.cancel()


clear_interval = clear_timeout
