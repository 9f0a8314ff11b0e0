"""Leaf-path tree assertions for pytest.

Registered under the ``pytest11`` entry point, so any project that installs
json-tree-ops gets the ``assert_paths_equal`` fixture in its own test runs.
The fixture compares trees through ``flatten_object`` and reports each
differing dot-path on its own line.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_ops import flatten_object


@pytest.fixture(scope="session")
def assert_paths_equal() -> Any:
    """Fixture that returns a callable tree asserter keyed by leaf paths.

    Both trees are flattened to ``{"a.b.0": leaf}`` form and compared; on
    mismatch every differing path is listed, which is far easier to read
    than a nested-dict diff.

    Usage in tests::

        def test_config(assert_paths_equal):
            assert_paths_equal(load(), {"db": {"hosts": ["a", "b"]}})

    Returns:
        A callable ``_assert(actual, expected) -> None`` raising
        ``AssertionError`` when the flattened views differ.
    """

    def _assert(actual: Any, expected: Any) -> None:
        left = flatten_object(actual)
        right = flatten_object(expected)
        if left == right:
            return

        missing = sorted(right.keys() - left.keys())
        unexpected = sorted(left.keys() - right.keys())
        changed = sorted(
            path for path in left.keys() & right.keys() if left[path] != right[path]
        )
        lines = ["Trees differ by path:"]
        lines += [f"  missing:    {p} (expected {right[p]!r})" for p in missing]
        lines += [f"  unexpected: {p} = {left[p]!r}" for p in unexpected]
        lines += [
            f"  changed:    {p}: {left[p]!r} != {right[p]!r}" for p in changed
        ]
        raise AssertionError("\n".join(lines))

    return _assert
