"""Tree subpackage for the shared JSON-like data model.

Re-exports the public API for the tree module:
- TreeKind: StrEnum of the three value kinds (MAPPING, SEQUENCE, SCALAR)
- classify: maps any value to its TreeKind
- is_container / is_falsy: predicates built on classify
- Path: tuple of string segments addressing a location in a tree
"""

from json_tree_ops.tree.kinds import Path, TreeKind, classify, is_container, is_falsy

__all__ = ["Path", "TreeKind", "classify", "is_container", "is_falsy"]
