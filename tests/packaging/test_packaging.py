"""Packaging correctness verification for structural-compare.

Tests validate:
- Base install imports cleanly and the public functions work
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install exposes the public API."""

    def test_import_structural_compare(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import structural_compare

        assert hasattr(structural_compare, "compare")
        assert hasattr(structural_compare, "same")
        assert hasattr(structural_compare, "different")

    def test_compare_basic(self):  # type: ignore[no-untyped-def]
        from structural_compare import compare

        assert compare({"a": [1, 2]}, {"a": [1, 2]}) is True

    def test_different_basic(self):  # type: ignore[no-untyped-def]
        from structural_compare import different

        assert different({"a": 1}, {"a": 2}) is True

    def test_subpackages_import(self):  # type: ignore[no-untyped-def]
        """algorithm and values subpackages import successfully."""
        from structural_compare.algorithm import CircularReferenceTracker, reconcile_keys
        from structural_compare.values import Category, classify

        assert classify([]) is Category.SEQUENCE
        assert reconcile_keys(["a"], ["a"]) == ["a"]
        assert len(CircularReferenceTracker()) == 0


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "structural_compare/__init__.py",
            "structural_compare/api.py",
            "structural_compare/comparator.py",
            "structural_compare/protocols.py",
            "structural_compare/algorithm/__init__.py",
            "structural_compare/algorithm/circular.py",
            "structural_compare/algorithm/config.py",
            "structural_compare/algorithm/keys.py",
            "structural_compare/algorithm/scalars.py",
            "structural_compare/values/__init__.py",
            "structural_compare/values/category.py",
            "structural_compare/values/classifier.py",
            "structural_compare/integrations/__init__.py",
            "structural_compare/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), f"Module {module} not found in wheel"

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "structural-compare" in metadata.lower() or "structural_compare" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for structural-compare."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        sc_eps = [ep for ep in pytest11_eps if "structural_compare" in str(ep.value)]
        assert sc_eps, (
            f"No pytest11 entry point found for structural-compare. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_same fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("structural_compare.integrations._pytest_plugin")
        assert hasattr(mod, "assert_same")
        assert callable(mod.assert_same)


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import structural_compare

        assert structural_compare.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import structural_compare

        expected = {
            "MISSING",
            "Comparable",
            "CompareOptions",
            "DeepComparator",
            "compare",
            "different",
            "same",
        }
        actual = set(structural_compare.__all__)
        assert expected == actual, f"Missing: {expected - actual}, Extra: {actual - expected}"
