"""Mock connection for exercising plugin hooks without a live server."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from plugin_fixtures.logger import add_log_methods
from plugin_fixtures.results import ResultStore

if TYPE_CHECKING:
    from collections.abc import Callable


class Connection:
    """A client session as plugins see it."""

    def __init__(self, client: Any, server: Any) -> None:
        self.client = client
        self.server = server
        self.relaying = False
        self.notes: dict[str, Any] = {}
        self.transaction: Any = None
        self.results = ResultStore(self)
        add_log_methods(self, "mock-connection")

    def respond(self, code: int, msg: str, func: Callable[[], Any]) -> Any:
        return func()

    def reset_transaction(self, done: Callable[[], Any] | None = None) -> None:
        """Flag a live transaction as resetting, or drop it if already flagged."""
        if self.transaction is not None and getattr(self.transaction, "resetting", None) is False:
            self.transaction.resetting = True
        else:
            self.transaction = None
        if done:
            done()

    def auth_results(self, message: str | None = None) -> None:
        pass


def create_connection(client: Any = None, server: Any = None) -> Connection:
    """Build a mock connection; missing client or server become empty dicts."""
    return Connection(
        client if client is not None else {},
        server if server is not None else {},
    )
