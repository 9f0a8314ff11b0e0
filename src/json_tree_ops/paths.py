"""Path grammar: selector strings and flat keys <-> Path tuples.

Two textual encodings of a Path are supported:

- Selectors, as used by ``get``: ``.`` separates segments and ``[x]`` wraps
  a segment, e.g. ``"a.b[0].c"`` -> ``("a", "b", "0", "c")``.  Each ``[x]``
  is rewritten to ``.x.`` before splitting and empty segments are dropped.
- Flat keys, as used by flatten/unflatten: segments joined by a separator
  (``"."`` by default) with no bracket handling.

There is no escaping: a key containing a ``.`` or a bracket cannot be
addressed.  A segment that looks numeric is always numeric.
"""

from __future__ import annotations

import re
import threading

from cachetools import LRUCache

from json_tree_ops.tree.kinds import Path

__all__ = [
    "PathGrammar",
    "is_numeric_segment",
    "join_path",
    "parse_selector",
    "render_selector",
    "split_flat_key",
]

# "0", or a positive integer without leading zeros
_NUMERIC = re.compile(r"0|[1-9][0-9]*")

# A bracketed segment; brackets do not nest
_BRACKET = re.compile(r"\[([^\[\]]*)\]")


def is_numeric_segment(segment: str) -> bool:
    """Return True if ``segment`` addresses a Sequence index."""
    return _NUMERIC.fullmatch(segment) is not None


class PathGrammar:
    """Parses selector strings into Paths, memoising the results.

    Each instance owns a bounded ``LRUCache``; the least-recently-used
    selector is evicted silently once ``max_size`` is exceeded.  Cache
    reads and writes hold the instance lock, so one grammar can serve
    several threads.  Paths are tuples, so cached values can be shared
    safely between callers.

    Example::

        grammar = PathGrammar()
        grammar.parse("target[2].a")   # ("target", "2", "a")
    """

    def __init__(self, max_size: int = 256) -> None:
        self._cache: LRUCache[str, Path] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        return int(self._cache.currsize)

    def parse(self, selector: str) -> Path:
        """Split a selector string into its Path segments."""
        with self._lock:
            path = self._cache.get(selector)
        if path is None:
            normalized = _BRACKET.sub(r".\1.", selector)
            path = tuple(seg for seg in normalized.split(".") if seg != "")
            with self._lock:
                self._cache[selector] = path
        return path


# Module-level grammar shared by every caller; its cache is locked
_grammar = PathGrammar()


def parse_selector(selector: str) -> Path:
    return _grammar.parse(selector)


def split_flat_key(key: str, separator: str = ".") -> Path:
    """Split a flattened key into segments.

    Unlike ``parse_selector`` nothing is dropped: ``"a..b"`` has an empty
    middle segment, which is a valid Mapping key.
    """
    return tuple(key.split(separator))


def join_path(path: Path, separator: str = ".") -> str:
    return separator.join(path)


def render_selector(path: Path) -> str:
    """Render a Path as a selector, using brackets for numeric segments.

    ``("a", "b", "0", "c")`` -> ``"a.b[0].c"``
    """
    parts: list[str] = []
    for segment in path:
        if is_numeric_segment(segment):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)
