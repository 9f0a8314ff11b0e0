"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible trees. No random values.
Two tiers: ~100 leaves nested three levels, ~1000 leaves nested five levels.
Each tier provides a plain tree and its flattened form.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_ops import flatten_object


def generate_tree(sections: int, groups: int, leaves: int) -> dict[str, Any]:
    """Generate sections x groups x leaves, each group also holding a list."""
    tree: dict[str, Any] = {}
    for i in range(sections):
        section: dict[str, Any] = {}
        for j in range(groups):
            group: dict[str, Any] = {
                f"field_{k}": (k if k % 3 else "") for k in range(leaves)
            }
            group["items"] = [{"id": k, "tag": None} for k in range(3)]
            section[f"group_{j}"] = group
        tree[f"section_{i}"] = section
    return tree


def _make_cyclic(tree: dict[str, Any]) -> dict[str, Any]:
    """Point every group back at the root, producing one cycle per group."""
    for section in tree.values():
        for group in section.values():
            group["root"] = tree
    return tree


@pytest.fixture
def tree_100() -> dict[str, Any]:
    """~100 leaves: 2 sections x 5 groups x (4 fields + 6 list leaves)."""
    return generate_tree(2, 5, 4)


@pytest.fixture
def tree_1000() -> dict[str, Any]:
    """~1000 leaves: 5 sections x 10 groups x (14 fields + 6 list leaves)."""
    return generate_tree(5, 10, 14)


@pytest.fixture
def flat_1000(tree_1000: dict[str, Any]) -> dict[str, Any]:
    return flatten_object(tree_1000)


@pytest.fixture
def cyclic_1000() -> dict[str, Any]:
    return _make_cyclic(generate_tree(5, 10, 14))
