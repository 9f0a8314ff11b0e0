"""Single-pass helpers over flat records.

rename_keys, count_by, group_by and query_string_to_object each take or
return one level of mapping and never recurse.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any
from urllib.parse import parse_qsl

__all__ = ["count_by", "group_by", "query_string_to_object", "rename_keys"]

KeyFunc = Callable[[Any], Hashable]


def rename_keys(keys_map: Mapping[str, str], obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``obj`` with keys renamed through ``keys_map``.

    Keys missing from ``keys_map`` (or mapped to an empty name) keep their
    name.  Order follows ``obj``.
    """
    return {keys_map.get(key) or key: value for key, value in obj.items()}


def _key_func(key: KeyFunc | str) -> KeyFunc:
    if callable(key):
        return key

    def lookup(item: Any) -> Hashable:
        if isinstance(item, Mapping):
            return item[key]
        return getattr(item, key)

    return lookup


def count_by(items: Iterable[Any], key: KeyFunc | str) -> dict[Hashable, int]:
    """Count ``items`` per derived key.

    ``key`` is a callable, or the name of a mapping key / attribute.

    Example::

        count_by([6.1, 4.2, 6.3], math.floor)   # {6: 2, 4: 1}
    """
    fn = _key_func(key)
    counts: dict[Hashable, int] = {}
    for item in items:
        derived = fn(item)
        counts[derived] = counts.get(derived, 0) + 1
    return counts


def group_by(items: Iterable[Any], key: KeyFunc | str) -> dict[Hashable, list[Any]]:
    """Group ``items`` into lists per derived key, keeping item order."""
    fn = _key_func(key)
    groups: dict[Hashable, list[Any]] = {}
    for item in items:
        groups.setdefault(fn(item), []).append(item)
    return groups


def query_string_to_object(url: str) -> dict[str, str]:
    """Decode the query string of ``url`` into a flat dict.

    Everything after the first ``?`` is parsed, up to an optional ``#``
    fragment.  Repeated keys keep their last value.

    Example::

        query_string_to_object("https://google.com?page=1&count=10")
        # {"page": "1", "count": "10"}
    """
    _, _, query = url.partition("?")
    query, _, _ = query.partition("#")
    return dict(parse_qsl(query, keep_blank_values=True))
