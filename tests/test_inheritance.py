"""Tests for plugin inheritance."""

import pytest

from conftest import write, write_package
from plugin_fixtures.errors import ResolutionError
from plugin_fixtures.plugins import Plugin
from plugin_fixtures.plugins.inheritance import merge_surfaces


class TestMergeSurfaces:
    """Test the child-wins merge rule."""

    def test_child_wins(self) -> None:
        child = {"hook_connect": "child"}
        parent = {"hook_connect": "parent", "hook_disconnect": "parent"}

        merged = merge_surfaces(child, parent)

        assert merged == {"hook_connect": "child", "hook_disconnect": "parent"}

    def test_inputs_untouched(self) -> None:
        child = {"a": 1}
        parent = {"b": 2}

        merged = merge_surfaces(child, parent)

        assert merged is not child
        assert child == {"a": 1}
        assert parent == {"b": 2}

    def test_falsy_child_members_are_kept(self) -> None:
        assert merge_surfaces({"limit": 0}, {"limit": 10}) == {"limit": 0}


class TestInherits:
    """Test inheriting from loaded parent plugins."""

    @pytest.fixture
    def child(self, host) -> Plugin:
        write(host / "plugins" / "base.py", """
            def hook_connect(self, next_, connection):
                return "base connect"

            def hook_disconnect(self, next_, connection):
                return "base disconnect"
        """)
        write(host / "plugins" / "child.py", """
            def register(self):
                self.inherits("base")

            def hook_connect(self, next_, connection):
                return "child connect"
        """)
        return Plugin("child", base_dir=host)

    def test_child_keeps_own_members(self, child) -> None:
        own = child.exported["hook_connect"]

        child.register()

        assert child.exported["hook_connect"] is own
        assert child.hook_connect(None, None) == "child connect"

    def test_missing_members_copied(self, child) -> None:
        child.register()

        base = child.parents["base"]
        assert child.exported["hook_disconnect"] is base.exported["hook_disconnect"]
        assert child.hook_disconnect(None, None) == "base disconnect"

    def test_parent_is_separate_instance(self, child) -> None:
        child.register()

        base = child.parents["base"]
        assert base is not child
        assert base.name == "base"
        assert base.hook_connect(None, None) == "base connect"
        assert base.server is child.server

    def test_copies_are_not_live(self, child) -> None:
        child.register()

        base = child.parents["base"]
        base.exported["hook_data"] = lambda self: "late"

        assert "hook_data" not in child.exported

    def test_multiple_parents(self, host, child) -> None:
        write_package(host / "node_modules" / "auth-base", """
            def hook_auth(self, next_, connection, params):
                return "auth"

            def hook_disconnect(self, next_, connection):
                return "auth disconnect"
        """)

        child.inherits("base")
        child.inherits("auth-base")

        assert set(child.parents) == {"base", "auth-base"}
        assert child.hook_auth(None, None, None) == "auth"
        # base was first, so its hook_disconnect stays
        assert child.hook_disconnect(None, None) == "base disconnect"
        assert child.exported["hook_auth"] is child.parents["auth-base"].exported["hook_auth"]

    def test_missing_parent_propagates(self, child) -> None:
        before = dict(child.exported)

        with pytest.raises(ResolutionError, match="could not find path to plugin 'nowhere'"):
            child.inherits("nowhere")

        assert child.exported == before
        assert child.parents == {}
        assert "nowhere" in child.last_err

    def test_parent_evaluation_error_propagates(self, host, child) -> None:
        write(host / "plugins" / "broken.py", "raise KeyError('bad config')\n")

        with pytest.raises(KeyError):
            child.inherits("broken")

    def test_self_inheritance_loads_fresh_copy(self, host) -> None:
        write(host / "plugins" / "loop.py", """
            def register(self):
                self.inherits("loop")
        """)
        plugin = Plugin("loop", base_dir=host)

        plugin.register()

        assert plugin.parents["loop"] is not plugin
        assert plugin.parents["loop"].parents == {}

    def test_inherits_returns_parent(self, child) -> None:
        parent = child.inherits("base")

        assert parent is child.parents["base"]
