"""Structural compare - deep structural equality for Python values."""

from __future__ import annotations

import logging

from structural_compare.algorithm.config import CompareOptions
from structural_compare.api import compare, different, same
from structural_compare.comparator import DeepComparator
from structural_compare.protocols import Comparable
from structural_compare.values import MISSING

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "Comparable",
    "CompareOptions",
    "DeepComparator",
    "compare",
    "different",
    "same",
]
