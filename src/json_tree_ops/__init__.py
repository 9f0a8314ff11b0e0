"""json-tree-ops - structural operations over nested JSON-like data."""

from __future__ import annotations

from json_tree_ops.combinators import deep_merge, to_pairs, transform
from json_tree_ops.config import FlattenConfig, SerializerConfig
from json_tree_ops.pruner import compact_object
from json_tree_ops.records import (
    count_by,
    group_by,
    query_string_to_object,
    rename_keys,
)
from json_tree_ops.resolver import get
from json_tree_ops.serializer import stringify_circular_json
from json_tree_ops.tabular import csv_to_json, json_to_csv
from json_tree_ops.tree import TreeKind
from json_tree_ops.unflatten import unflatten_object
from json_tree_ops.walker import flatten_object, walk_through

__version__: str = "0.1.0"
__all__: list[str] = [
    "FlattenConfig",
    "SerializerConfig",
    "TreeKind",
    "compact_object",
    "count_by",
    "csv_to_json",
    "deep_merge",
    "flatten_object",
    "get",
    "group_by",
    "json_to_csv",
    "query_string_to_object",
    "rename_keys",
    "stringify_circular_json",
    "to_pairs",
    "transform",
    "unflatten_object",
    "walk_through",
]
