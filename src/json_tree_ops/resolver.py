"""Selector-based value lookup.

``get`` resolves any number of selector strings against one tree.  Missing
paths are data, not failures: a selector that cannot be followed to the
end resolves to ``default`` instead of raising.
"""

from __future__ import annotations

from typing import Any

from json_tree_ops.paths import is_numeric_segment, parse_selector
from json_tree_ops.tree.kinds import Path, TreeKind, classify

__all__ = ["get", "resolve_path"]

# Distinguishes "no value here" from a stored None during the walk
_MISSING = object()


def _step(current: Any, segment: str) -> Any:
    kind = classify(current)
    if kind is TreeKind.MAPPING:
        return current.get(segment, _MISSING)
    if kind is TreeKind.SEQUENCE:
        if not is_numeric_segment(segment):
            return _MISSING
        index = int(segment)
        return current[index] if index < len(current) else _MISSING
    # Scalars (None and strings included) have no children
    return _MISSING


def resolve_path(tree: Any, path: Path, default: Any = None) -> Any:
    """Follow ``path`` from ``tree`` and return the value found there.

    Args:
        tree:    Root of the tree to read.
        path:    Segments to follow; numeric segments index Sequences.
        default: Returned when any segment cannot be followed.

    Returns:
        The value at ``path``, or ``default``.  An empty path returns
        ``tree`` itself.
    """
    current = tree
    for segment in path:
        current = _step(current, segment)
        if current is _MISSING:
            return default
    return current


def get(tree: Any, *selectors: str, default: Any = None) -> list[Any]:
    """Retrieve the values indicated by ``selectors``, in selector order.

    Selectors may use dot notation, bracket notation, or both::

        tree = {"selector": {"to": {"val": "x"}}, "target": [1, 2, {"a": "t"}]}
        get(tree, "selector.to.val", "target[0]", "target[2].a")
        # ["x", 1, "t"]

    Args:
        tree:      Root of the tree to read.
        selectors: One selector string per requested value.
        default:   Value used for selectors whose path does not exist.

    Returns:
        A list with one entry per selector.
    """
    return [resolve_path(tree, parse_selector(s), default) for s in selectors]
