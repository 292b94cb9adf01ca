"""algorithm subpackage: building blocks of the deep comparison.

Provides the comparison options, the NaN-aware scalar comparator, the
key-set reconciler and the circular-reference tracker.  Import from this
module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from structural_compare.algorithm import CompareOptions, reconcile_keys

    opts = CompareOptions(top_level_include={"id"})
    reconcile_keys(["id", "name"], ["name", "id"], opts.top_level_include)
    # ['id']
"""

from __future__ import annotations

from structural_compare.algorithm.circular import CircularReferenceTracker
from structural_compare.algorithm.config import CompareOptions
from structural_compare.algorithm.keys import filter_keys, reconcile_keys, sort_keys
from structural_compare.algorithm.scalars import compare_numbers, compare_scalars, is_nan

__all__ = [
    "CircularReferenceTracker",
    "CompareOptions",
    "compare_numbers",
    "compare_scalars",
    "filter_keys",
    "is_nan",
    "reconcile_keys",
    "sort_keys",
]
