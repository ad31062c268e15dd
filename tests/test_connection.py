"""Tests for the mock connection and its result store."""

import re
import types

import pytest

from plugin_fixtures.connection import Connection, create_connection
from plugin_fixtures.results import ResultStore


class TestConnection:
    """Test mock connection behaviour."""

    def test_defaults(self) -> None:
        conn = create_connection()

        assert isinstance(conn, Connection)
        assert conn.client == {}
        assert conn.server == {}
        assert conn.relaying is False
        assert conn.notes == {}
        assert conn.transaction is None
        assert isinstance(conn.results, ResultStore)
        assert conn.results.conn is conn

    def test_client_and_server_kept(self) -> None:
        client = {"remote_ip": "192.0.2.1"}
        server = {"notes": {}}

        conn = create_connection(client, server)

        assert conn.client is client
        assert conn.server is server

    def test_respond_calls_through(self) -> None:
        conn = create_connection()
        assert conn.respond(250, "ok", lambda: "done") == "done"

    def test_reset_transaction_marks_resetting(self) -> None:
        conn = create_connection()
        conn.transaction = types.SimpleNamespace(resetting=False)
        done = []

        conn.reset_transaction(lambda: done.append(True))

        assert conn.transaction.resetting is True
        assert done == [True]

    def test_reset_transaction_clears(self) -> None:
        conn = create_connection()
        conn.transaction = types.SimpleNamespace(resetting=True)

        conn.reset_transaction()

        assert conn.transaction is None

    def test_log_methods(self, caplog) -> None:
        conn = create_connection()

        with caplog.at_level("WARNING"):
            conn.logwarn("slow client", 3)

        assert "[WARN] [mock-connection] slow client 3" in caplog.text

    def test_auth_results_is_noop(self) -> None:
        assert create_connection().auth_results("spf=pass") is None


class TestResultStore:
    """Test per-plugin result bookkeeping."""

    @pytest.fixture
    def results(self) -> ResultStore:
        return create_connection().results

    def test_add_lists_and_values(self, results) -> None:
        results.add("spf", **{"pass": "helo"})
        results.add("spf", **{"pass": "mfrom", "result": "Pass"})

        entry = results.get("spf")
        assert entry["pass"] == ["helo", "mfrom"]
        assert entry["result"] == "Pass"

    def test_plugin_object_key(self, results) -> None:
        plugin = types.SimpleNamespace(name="dnsbl")

        results.add(plugin, fail="zen.example.org")

        assert results.get("dnsbl")["fail"] == ["zen.example.org"]

    def test_nameless_plugin(self, results) -> None:
        with pytest.raises(ValueError):
            results.add(object(), fail="x")

    def test_has(self, results) -> None:
        results.add("spf", **{"pass": "helo", "result": "Pass"})

        assert results.has("spf", "pass", "helo")
        assert results.has("spf", "result", re.compile("^pa", re.I))
        assert not results.has("spf", "fail", "helo")
        assert not results.has("dkim", "pass", "helo")

    def test_push(self, results) -> None:
        results.push("karma", neighbors="good")
        results.push("karma", neighbors="bad")

        assert results.get("karma")["neighbors"] == ["good", "bad"]

    def test_incr(self, results) -> None:
        results.incr("karma", score=2)
        results.incr("karma", score=-0.5)

        assert results.get("karma")["score"] == 1.5

    def test_incr_non_numeric(self, results) -> None:
        with pytest.raises(ValueError):
            results.incr("karma", score="lots")

    def test_collate(self, results) -> None:
        results.add("spf", **{"pass": ["helo", "mfrom"], "result": "Pass", "emit": True})

        assert results.collate("spf") == "pass: helo, mfrom, result: Pass"
        assert results.collate("unknown") == ""
