"""TreeKind StrEnum and container-kind dispatch for JSON-like trees.

Every value handled by json-tree-ops is one of three kinds:

- MAPPING  -> "mapping"  : keyed container (dict and other Mapping types)
- SEQUENCE -> "sequence" : ordered, index-addressed container (list, tuple, ndarray)
- SCALAR   -> "scalar"   : anything else (str, number, bool, None, numpy scalar)

All recursive operations decide what to do with a value by calling
``classify`` once, instead of probing its shape at each call site.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

import numpy as np

__all__ = ["Path", "TreeKind", "classify", "is_container", "is_falsy"]

# A location inside a tree: one string segment per level.
Path = tuple[str, ...]


class TreeKind(StrEnum):
    """Enumeration of the three structural kinds of a tree value."""

    MAPPING = auto()
    SEQUENCE = auto()
    SCALAR = auto()


def classify(value: Any) -> TreeKind:
    """Return the TreeKind of ``value``.

    Strings and bytes are scalars even though Python treats them as
    sequences. Zero-dimensional numpy arrays behave like numpy scalars.
    """
    if isinstance(value, Mapping):
        return TreeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return TreeKind.SEQUENCE
    if isinstance(value, np.ndarray) and value.ndim > 0:
        return TreeKind.SEQUENCE
    return TreeKind.SCALAR


def is_container(value: Any) -> bool:
    return classify(value) is not TreeKind.SCALAR


def is_falsy(value: Any) -> bool:
    """Return True for None, False, numeric zero, NaN and the empty string.

    Containers are never falsy, even when empty.
    """
    if value is None:
        return True
    if is_container(value):
        return False
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, (bool, np.bool_)):
        return not value
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float):
        return value == 0.0 or math.isnan(value)
    if isinstance(value, (int, complex)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False
