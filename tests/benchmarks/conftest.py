"""Deterministic object generators for performance benchmarks.

All generators produce fixed, reproducible objects. No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested.
Each tier provides both an "equal" pair (distinct but identical objects, so
the whole structure is walked) and a "late difference" pair whose only
difference sits in the last leaf visited.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic mixed values."""
    return {
        f"{prefix}_{i}": (f"value_{i}" if i % 3 == 0 else i * 1.5 if i % 3 == 1 else None)
        for i in range(num_keys)
    }


def _make_nested_100() -> dict[str, Any]:
    """Generate a 100-key nested object: 10 sections x (9 leaf keys + list)."""
    doc: dict[str, Any] = {}
    for i in range(10):
        section: dict[str, Any] = generate_flat_object(8, prefix=f"field_{i}")
        section["items"] = [i, i + 1, float("nan"), f"tag_{i}"]
        doc[f"section_{i}"] = section
    return doc


def _make_nested_500() -> dict[str, Any]:
    """Generate a ~500-key deeply nested object.

    Structure: 5 sections x 5 groups x (8 leaf keys + 6-key details object).
    """
    doc: dict[str, Any] = {}
    for i in range(5):
        mid: dict[str, Any] = {}
        for j in range(5):
            leaf: dict[str, Any] = generate_flat_object(8, prefix=f"field_{i}_{j}")
            leaf["details"] = {f"detail_{k}": [k, f"d_{i}_{j}_{k}"] for k in range(6)}
            mid[f"group_{j}"] = leaf
        doc[f"section_{i}"] = mid
    return doc


def _equal_pair(doc: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    return doc, copy.deepcopy(doc)


def _late_difference_pair(doc: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Change the value that sorts last at every level, so it is reached last."""
    right = copy.deepcopy(doc)
    node: Any = right
    while True:
        last_key = max(node)
        if not isinstance(node[last_key], dict):
            node[last_key] = "changed"
            return doc, right
        node = node[last_key]


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-key flat equal pair."""
    return _equal_pair(generate_flat_object(10))


@pytest.fixture
def pair_10key_different() -> tuple[dict[str, Any], dict[str, Any]]:
    """10-key flat pair differing in its last key."""
    return _late_difference_pair(generate_flat_object(10))


@pytest.fixture
def pair_100key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested equal pair (10 sections x 9 keys)."""
    return _equal_pair(_make_nested_100())


@pytest.fixture
def pair_100key_different() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair differing in its last leaf."""
    return _late_difference_pair(_make_nested_100())


@pytest.fixture
def pair_500key_equal() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-key deeply nested equal pair (5 sections x 5 groups x ~15 leaves)."""
    return _equal_pair(_make_nested_500())


@pytest.fixture
def pair_500key_different() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-key deeply nested pair differing in its last leaf."""
    return _late_difference_pair(_make_nested_500())
