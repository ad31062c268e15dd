"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from conftest import write
from plugin_fixtures.cli import cli


class TestCli:
    """Test CLI commands against a host checkout."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    @pytest.fixture
    def tree(self, host):
        write(host / "plugins" / "base.py", """
            def hook_disconnect(self, next_, connection):
                next_()
        """)
        write(host / "plugins" / "child.py", """
            def hook_connect(self, next_, connection):
                next_(OK)
        """)
        return host

    def test_resolve(self, runner, tree) -> None:
        result = runner.invoke(cli, ["--base-dir", str(tree), "resolve", "child"])

        assert result.exit_code == 0
        assert "flat_file" in result.output
        assert "host" in result.output

    def test_resolve_missing(self, runner, tree) -> None:
        result = runner.invoke(cli, ["--base-dir", str(tree), "resolve", "chld"])

        assert result.exit_code == 1
        assert "could not find path to plugin" in result.output
        assert "child" in result.output

    def test_load(self, runner, tree) -> None:
        result = runner.invoke(cli, ["--base-dir", str(tree), "load", "child", "--inherit", "base"])

        assert result.exit_code == 0
        assert "hook_connect" in result.output
        assert "hook_disconnect" in result.output

    def test_load_missing(self, runner, tree) -> None:
        result = runner.invoke(cli, ["--base-dir", str(tree), "load", "nothing"])

        assert result.exit_code == 1
        assert "could not find path to plugin" in result.output

    def test_list(self, runner, tree) -> None:
        result = runner.invoke(cli, ["--base-dir", str(tree), "list"])

        assert result.exit_code == 0
        assert "base" in result.output
        assert "child" in result.output

    def test_list_empty(self, runner, tmp_path) -> None:
        result = runner.invoke(cli, ["--base-dir", str(tmp_path), "list"])

        assert result.exit_code == 0
        assert "No plugins found" in result.output

    def test_constants(self, runner) -> None:
        result = runner.invoke(cli, ["constants"])

        assert result.exit_code == 0
        assert "DENYSOFTDISCONNECT" in result.output
        assert "906" in result.output
