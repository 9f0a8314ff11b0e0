"""FlattenConfig and SerializerConfig for json-tree-ops.

Both are frozen (immutable) dataclasses validated on construction.
Every operation that accepts a config treats ``None`` as "use the defaults".
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FlattenConfig", "SerializerConfig"]


@dataclass(frozen=True, slots=True)
class FlattenConfig:
    """Immutable configuration for flatten_object / unflatten_object.

    Attributes:
        separator: String joining path segments in a flat key.  Must be
            non-empty and must not contain ``[`` or ``]`` (reserved by the
            selector grammar).  Default ``"."``.
    """

    separator: str = "."

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "separator must be a non-empty string"
            raise ValueError(msg)
        if "[" in self.separator or "]" in self.separator:
            msg = f"separator must not contain brackets, got {self.separator!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class SerializerConfig:
    """Immutable configuration for stringify_circular_json.

    Attributes:
        indent: None for compact single-line output, otherwise the number of
            spaces per nesting level (>= 0).
        ensure_ascii: Escape every non-ASCII character.  Default False.
        sort_keys: Emit mapping members sorted by key instead of insertion
            order.  Default False.
    """

    indent: int | None = None
    ensure_ascii: bool = False
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be None or >= 0, got {self.indent}"
            raise ValueError(msg)
