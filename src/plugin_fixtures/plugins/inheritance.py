"""Single-level method inheritance between plugins."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .plugin import Plugin

logger = logging.getLogger(__name__)


def merge_surfaces(child: Mapping[str, Any], parent: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new surface with every child member plus the parent members
    the child lacks. The child always wins."""
    merged = dict(child)
    for name, member in parent.items():
        if name not in merged:
            merged[name] = member
    return merged


def inherit(plugin: Plugin, parent_name: str) -> Plugin:
    """Load ``parent_name`` and copy the members ``plugin`` does not define.

    The parent is resolved from the child's base directory and fully loaded
    as its own instance. No cycle detection is done: each call loads a fresh
    parent. Any failure while loading the parent propagates unchanged.
    """
    from .plugin import Plugin

    try:
        parent = Plugin(
            parent_name,
            base_dir=plugin.base_dir,
            server=plugin.server,
            settings=plugin.settings,
        )
    except Exception as e:
        plugin.last_err = str(e)
        raise

    inherited = sorted(set(parent.exported) - set(plugin.exported))
    plugin.exported = merge_surfaces(plugin.exported, parent.exported)
    plugin.parents[parent_name] = parent

    logger.debug(f"Plugin {plugin.name} inherited {inherited} from {parent_name}")
    return parent
