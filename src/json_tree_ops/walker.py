"""Lazy depth-first enumeration of a tree's leaves.

``walk_through`` is a generator function: every call starts a fresh
traversal, the caller pulls one ``(path, value)`` pair at a time, and
abandoning the generator early has no side effects.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from json_tree_ops.config import FlattenConfig
from json_tree_ops.paths import join_path
from json_tree_ops.tree.kinds import Path, TreeKind, classify

__all__ = ["flatten_object", "walk_through"]


def _children(value: Any, kind: TreeKind) -> Iterator[tuple[str, Any]]:
    if kind is TreeKind.MAPPING:
        for key, child in value.items():
            yield str(key), child
    else:
        for index, child in enumerate(value):
            yield str(index), child


def _walk(value: Any, previous: Path) -> Iterator[tuple[Path, Any]]:
    for key, child in _children(value, classify(value)):
        path = (*previous, key)
        if classify(child) is TreeKind.SCALAR:
            # None is a leaf; it is never enumerated as a container
            yield path, child
        else:
            yield from _walk(child, path)


def walk_through(tree: Any) -> Iterator[tuple[Path, Any]]:
    """Yield ``(path, value)`` for every leaf of ``tree``, depth first.

    Mapping keys and Sequence indices both become string segments, and
    children are visited in insertion / index order.  Empty containers
    contribute no pairs.  A scalar (or None) root yields nothing.

    Example::

        list(walk_through({"a": 10, "g": [{"h": 10}, 40]}))
        # [(("a",), 10), (("g", "0", "h"), 10), (("g", "1"), 40)]
    """
    if classify(tree) is TreeKind.SCALAR:
        return
    yield from _walk(tree, ())


def flatten_object(tree: Any, config: FlattenConfig | None = None) -> dict[str, Any]:
    """Flatten ``tree`` into a dict of separator-joined paths to leaf values.

    This is the inverse of ``unflatten_object`` for trees without empty
    containers.

    Example::

        flatten_object({"a": {"b": [8]}, "d": 3})
        # {"a.b.0": 8, "d": 3}
    """
    config = config if config is not None else FlattenConfig()
    return {
        join_path(path, config.separator): value for path, value in walk_through(tree)
    }
