"""Integrations subpackage for json-tree-ops.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
It is not imported here, so the base package never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
