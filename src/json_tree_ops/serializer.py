"""Cycle-safe JSON serialization.

``stringify_circular_json`` serializes trees that may contain cycles or
shared sub-trees.  Containers are tracked by identity (``id()``), never by
value, in a set that lives for one call only.  The first occurrence of a
container is serialized; every later occurrence, including the one that
closes a cycle, is omitted from its parent entirely.

A shared sub-tree therefore appears once, wherever the depth-first walk
meets it first; its later references are lost.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

import numpy as np

from json_tree_ops.config import SerializerConfig
from json_tree_ops.tree.kinds import TreeKind, classify

__all__ = ["stringify_circular_json"]

logger = logging.getLogger(__name__)


class _CycleEliminator:
    """Copies a tree into plain dicts/lists, dropping repeated containers.

    One instance per serialization call; ``_seen`` holds the ids of every
    container met so far in that call.
    """

    def __init__(self) -> None:
        self._seen: set[int] = set()
        # Lists produced by ndarray.tolist() stay referenced until the call
        # ends, so their ids cannot be recycled by later containers.
        self._converted: list[list[Any]] = []

    def _is_repeat(self, value: Any) -> bool:
        return classify(value) is not TreeKind.SCALAR and id(value) in self._seen

    def copy(self, value: Any) -> Any:
        kind = classify(value)
        if kind is TreeKind.SCALAR:
            return _plain_scalar(value)

        self._seen.add(id(value))
        if isinstance(value, np.ndarray):
            value = value.tolist()
            self._converted.append(value)
            self._seen.add(id(value))
        if kind is TreeKind.MAPPING:
            out: dict[Any, Any] = {}
            for key, child in value.items():
                if self._is_repeat(child):
                    logger.debug("Omitting repeated reference at key %r", key)
                    continue
                out[key] = self.copy(child)
            return out

        items: list[Any] = []
        for index, child in enumerate(value):
            if self._is_repeat(child):
                logger.debug("Omitting repeated reference at index %d", index)
                continue
            items.append(self.copy(child))
        return items


def _plain_scalar(value: Any) -> Any:
    # numpy scalars and zero-dimensional arrays
    if isinstance(value, (np.generic, np.ndarray)):
        value = value.item()
    # Non-finite floats have no JSON spelling
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def stringify_circular_json(tree: Any, config: SerializerConfig | None = None) -> str:
    """Serialize ``tree`` to JSON text, omitting cyclic and repeated references.

    Example::

        o = {"n": 42}
        o["self"] = o
        stringify_circular_json(o)
        # '{"n":42}'

    Args:
        tree:   Any tree, possibly cyclic.
        config: Output formatting.  Defaults to ``SerializerConfig()``
                (compact, insertion order, non-ASCII kept as-is).

    Returns:
        JSON text.  Member order follows insertion / index order.

    Raises:
        TypeError: If the tree holds a value with no JSON representation.
    """
    config = config if config is not None else SerializerConfig()
    plain = _CycleEliminator().copy(tree)
    separators = (",", ":") if config.indent is None else (",", ": ")
    return json.dumps(
        plain,
        indent=config.indent,
        separators=separators,
        ensure_ascii=config.ensure_ascii,
        sort_keys=config.sort_keys,
        allow_nan=False,
    )
