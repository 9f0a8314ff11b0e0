"""SupportsEntries Protocol: the entry-enumeration capability used by to_pairs.

Any class with an ``entries()`` method returning an iterable of
``(key, value)`` pairs passes ``isinstance`` checks; no inheritance
required.

Example::

    from json_tree_ops.protocols import SupportsEntries

    class Registry:
        def __init__(self) -> None:
            self._items = {"a": 1}

        def entries(self):
            return iter(self._items.items())

    assert isinstance(Registry(), SupportsEntries)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

__all__ = ["SupportsEntries"]


@runtime_checkable
class SupportsEntries(Protocol):
    """Structural protocol for containers that enumerate their own entries.

    ``entries()`` must return the entries in the container's natural order.
    """

    def entries(self) -> Iterable[tuple[Any, Any]]: ...
