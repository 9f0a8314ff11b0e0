"""Recursive falsy-value pruning."""

from __future__ import annotations

from typing import Any

from json_tree_ops.tree.kinds import TreeKind, classify, is_falsy

__all__ = ["compact_object"]


def compact_object(tree: Any) -> dict[str, Any] | list[Any]:
    """Deeply remove every falsy value from a Mapping or Sequence.

    Falsy values are None, False, numeric zero, NaN and ``""``.  Containers
    are always kept, including ones that end up empty after pruning.
    Sequences are re-indexed contiguously; the result is always a new
    ``dict`` or ``list`` and the input is never modified.

    Example::

        compact_object({"a": None, "b": False, "c": True, "h": [None, False, 1]})
        # {"c": True, "h": [1]}

    Raises:
        TypeError: If ``tree`` is a scalar.
    """
    kind = classify(tree)
    if kind is TreeKind.MAPPING:
        return {
            key: _compact_value(value)
            for key, value in tree.items()
            if not is_falsy(value)
        }
    if kind is TreeKind.SEQUENCE:
        return [_compact_value(item) for item in tree if not is_falsy(item)]
    raise TypeError(f"compact_object expects a mapping or sequence, got {type(tree)!r}")


def _compact_value(value: Any) -> Any:
    if classify(value) is TreeKind.SCALAR:
        return value
    return compact_object(value)
