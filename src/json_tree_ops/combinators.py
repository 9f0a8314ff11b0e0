"""Shallow combinators over mappings: deep_merge, transform and to_pairs.

None of these recurse on their own.  Deep behaviour comes from the
caller, e.g. a ``deep_merge`` combiner that calls ``deep_merge`` again on
nested mappings.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Set
from functools import reduce
from typing import Any, TypeVar

from json_tree_ops.protocols import SupportsEntries
from json_tree_ops.tree.kinds import TreeKind, classify

__all__ = ["deep_merge", "to_pairs", "transform"]

T = TypeVar("T")


def deep_merge(
    a: Mapping[str, Any],
    b: Mapping[str, Any],
    combine: Callable[[str, Any, Any], Any],
) -> dict[str, Any]:
    """Merge two mappings, letting ``combine`` decide every key's value.

    The result holds the union of both key sets: ``a``'s keys first, then the
    keys found only in ``b``.  For each key the value is
    ``combine(key, a.get(key), b.get(key))``; a side that lacks the key
    contributes None.

    Example::

        deep_merge(
            {"a": True, "b": {"c": [1, 2, 3]}},
            {"a": False, "b": {"d": [1, 2, 3]}},
            lambda k, x, y: x and y if k == "a" else {**x, **y},
        )
        # {"a": False, "b": {"c": [1, 2, 3], "d": [1, 2, 3]}}
    """
    keys = dict.fromkeys([*a.keys(), *b.keys()])
    return {key: combine(key, a.get(key), b.get(key)) for key in keys}


def transform(
    obj: Mapping[str, Any],
    fn: Callable[[T, Any, str, Mapping[str, Any]], T],
    acc: T,
) -> T:
    """Fold ``fn(acc, value, key, obj)`` over ``obj``'s keys, left to right.

    Example::

        def invert(r, v, k, _obj):
            r.setdefault(v, []).append(k)
            return r

        transform({"a": 1, "b": 2, "c": 1}, invert, {})
        # {1: ["a", "c"], 2: ["b"]}
    """
    return reduce(lambda a, k: fn(a, obj[k], k, obj), obj.keys(), acc)


def to_pairs(obj: Any) -> list[tuple[Any, Any]]:
    """Return ``obj``'s entries as a list of ``(key, value)`` pairs.

    Capabilities are checked in this order:

    1. Mappings: ``items()`` in insertion order.
    2. ``SupportsEntries`` objects: their own ``entries()`` enumeration.
    3. Sets: ``(element, element)`` per element.
    4. Sequences and strings: ``(str(index), element)``.
    5. Anything else: its own attributes, or ``[]`` when it has none.
    """
    if isinstance(obj, Mapping):
        return list(obj.items())
    if isinstance(obj, SupportsEntries):
        return [(key, value) for key, value in obj.entries()]
    if isinstance(obj, Set):
        return [(item, item) for item in obj]
    if isinstance(obj, str) or classify(obj) is TreeKind.SEQUENCE:
        return [(str(index), item) for index, item in enumerate(obj)]
    return list(getattr(obj, "__dict__", {}).items())
