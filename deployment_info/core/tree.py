"""Pure helpers for walking a parsed deployment tree.

Nothing here touches the filesystem or raises on missing data; callers get
plain values back and decide what a miss means.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

KEY_SEPARATOR = "."

_MISSING = object()


def is_container(node: Any) -> bool:
    """True for mapping/sequence nodes (dict or list after JSON parsing)."""
    return isinstance(node, (Mapping, list))


def count_leaves(tree: Any) -> int:
    """Count terminal values reachable from `tree`.

    Containers are never counted themselves; an empty dict or list adds 0.
    A bare scalar counts as one leaf.
    """
    count = 0
    stack: list[Any] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Mapping):
            stack.extend(node.values())
        elif isinstance(node, list):
            stack.extend(node)
        else:
            count += 1
    return count


def resolve(tree: Any, key: str, default: Any = None) -> Any:
    """Return value for dotted `key`, or `default` if not present.

    Only mappings are traversed; a list or scalar met before the last
    segment ends the walk with `default`.
    """
    node: Any = tree
    for part in key.split(KEY_SEPARATOR):
        if isinstance(node, Mapping) and part in node:
            node = node[part]
        else:
            return default
    return node


def has_path(tree: Any, key: str) -> bool:
    """True iff dotted `key` fully resolves, even to a JSON null."""
    return resolve(tree, key, _MISSING) is not _MISSING
