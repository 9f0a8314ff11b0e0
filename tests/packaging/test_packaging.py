"""Packaging correctness verification for json-tree-ops.

Tests validate that:
- The base install imports without pulling in pytest
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    def test_import_json_tree_ops(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds and exposes the core operations."""
        import json_tree_ops

        for name in (
            "get",
            "deep_merge",
            "compact_object",
            "unflatten_object",
            "walk_through",
            "stringify_circular_json",
            "transform",
            "to_pairs",
        ):
            assert hasattr(json_tree_ops, name)

    def test_base_import_does_not_import_pytest(self):  # type: ignore[no-untyped-def]
        """Only the plugin module depends on pytest."""
        code = "import sys, json_tree_ops; print('pytest' in sys.modules)"
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True
        )
        assert result.stdout.strip() == "False"


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        if shutil.which("poetry") is None:
            pytest.skip("poetry is not installed")
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), names

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        expected_modules = [
            "json_tree_ops/__init__.py",
            "json_tree_ops/combinators.py",
            "json_tree_ops/config.py",
            "json_tree_ops/paths.py",
            "json_tree_ops/protocols.py",
            "json_tree_ops/pruner.py",
            "json_tree_ops/records.py",
            "json_tree_ops/resolver.py",
            "json_tree_ops/serializer.py",
            "json_tree_ops/tabular.py",
            "json_tree_ops/unflatten.py",
            "json_tree_ops/walker.py",
            "json_tree_ops/tree/__init__.py",
            "json_tree_ops/tree/kinds.py",
            "json_tree_ops/integrations/__init__.py",
            "json_tree_ops/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-tree-ops."""
        from importlib.metadata import entry_points

        eps = [
            ep
            for ep in entry_points(group="pytest11")
            if "json_tree_ops" in str(ep.value)
        ]
        assert eps, "No pytest11 entry point found for json-tree-ops"

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        import importlib

        mod = importlib.import_module("json_tree_ops.integrations._pytest_plugin")
        assert hasattr(mod, "assert_paths_equal")


class TestPackageMetadata:
    def test_version(self):  # type: ignore[no-untyped-def]
        import json_tree_ops

        assert json_tree_ops.__version__ == "0.1.0"

    def test_distribution_metadata(self):  # type: ignore[no-untyped-def]
        from importlib.metadata import version

        assert version("json-tree-ops") == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        import json_tree_ops

        expected = {
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
        }
        actual = set(json_tree_ops.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
