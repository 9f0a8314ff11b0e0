"""Rebuild a nested tree from a flat mapping of path keys to leaf values.

Container kinds are decided by looking one segment ahead: the container
created for a segment is meant to be a list when the *next* segment is
numeric, and a dict otherwise.  The root is always a dict.

Every container is assembled as a dict keyed by segment.  Once all keys are
in, a container meant to be a list becomes one only if its indices are
dense (``0..n-1``); otherwise it stays a dict keyed by the index strings, so
a huge or sparse index costs one entry rather than a padded list.

Conflicts resolve as "first writer wins": a container created by an earlier
key is reused as-is, even when a later key would have chosen the other
kind.  A slot holding a falsy value (``None``, ``0``, ``""``, ``False``)
counts as free.  A later key that cannot be written into what is already
there is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from json_tree_ops.config import FlattenConfig
from json_tree_ops.paths import is_numeric_segment, split_flat_key
from json_tree_ops.tree.kinds import Path, is_falsy

__all__ = ["unflatten_object"]

logger = logging.getLogger(__name__)


class _TreeAssembler:
    """Accumulates flat keys into one nested tree.

    Only containers created by this assembler are ever descended into or
    written to; a container supplied as a leaf value is stored as-is and
    treated like any other occupied slot.  ``_owned`` maps the id of every
    created container to the container itself, which keeps ids stable
    until ``build`` runs.
    """

    def __init__(self) -> None:
        self.root: dict[str, Any] = {}
        self._owned: dict[int, dict[str, Any]] = {id(self.root): self.root}
        self._indexed: set[int] = set()

    def _create(self, next_segment: str) -> dict[str, Any]:
        container: dict[str, Any] = {}
        self._owned[id(container)] = container
        if is_numeric_segment(next_segment):
            self._indexed.add(id(container))
        return container

    def insert(self, key: str, path: Path, value: Any) -> None:
        container = self.root
        last = len(path) - 1
        for i, segment in enumerate(path):
            if id(container) in self._indexed and not is_numeric_segment(segment):
                logger.debug(
                    "Skipping flat key %r: segment %r cannot index a list", key, segment
                )
                return

            existing = container.get(segment)
            if not is_falsy(existing):
                if i < last and id(existing) in self._owned:
                    container = existing
                    continue
                # First writer wins: the slot is already taken
                logger.debug(
                    "Skipping flat key %r: segment %r is already occupied", key, segment
                )
                return

            if i == last:
                container[segment] = value
                return
            child = self._create(path[i + 1])
            container[segment] = child
            container = child

    def build(self) -> dict[str, Any]:
        self._finish(self.root)
        return self.root

    def _finish(self, container: dict[str, Any]) -> None:
        for segment, child in container.items():
            if id(child) not in self._owned:
                continue
            self._finish(child)
            if id(child) in self._indexed:
                container[segment] = _dense_list(child)


def _dense_list(container: dict[str, Any]) -> dict[str, Any] | list[Any]:
    """Return the values as a list if the keys are exactly 0..n-1."""
    indices = sorted(int(segment) for segment in container)
    if indices != list(range(len(indices))):
        return container
    return [container[str(index)] for index in indices]


def unflatten_object(
    flat: Mapping[str, Any],
    config: FlattenConfig | None = None,
) -> dict[str, Any]:
    """Unflatten a mapping whose keys are separator-joined paths.

    Keys are processed in iteration order.  Examples::

        unflatten_object({"a.b.c": 1, "d": 1})
        # {"a": {"b": {"c": 1}}, "d": 1}

        unflatten_object({"a.b.0": 8, "d": 3})
        # {"a": {"b": [8]}, "d": 3}

        unflatten_object({"a.1": "x"})
        # {"a": {"1": "x"}}

    Args:
        flat:   Mapping of flat keys to leaf values.
        config: Separator configuration.  Defaults to ``FlattenConfig()``.

    Returns:
        A new nested dict.  Empty input returns ``{}``.  Leaf values are
        stored without copying.
    """
    config = config if config is not None else FlattenConfig()

    assembler = _TreeAssembler()
    for key, value in flat.items():
        assembler.insert(key, split_flat_key(key, config.separator), value)

    return assembler.build()
