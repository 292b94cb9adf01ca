"""Public API functions for structural-compare.

This module provides the three user-facing functions: compare, same and
different.  Each call creates a fresh DeepComparator (and, inside it, a fresh
circular-reference registry) so that no state is shared between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from structural_compare.algorithm.config import CompareOptions
from structural_compare.comparator import DeepComparator

__all__ = ["compare", "different", "same"]

OptionsArg = CompareOptions | Mapping[str, Any] | None


def compare(a: Any, b: Any, options: OptionsArg = None) -> bool:
    """Return True if the two values are deeply, structurally equal.

    Args:
        a:       First value.
        b:       Second value.
        options: A ``CompareOptions``, a mapping of option names (snake_case
                 or camelCase), or None for the defaults.

    Returns:
        True when both values hold the same data under the given options.

    Raises:
        RecursionError: If a circular structure is compared without
            ``detect_circular=True``.
        TypeError / ValueError: If ``options`` is malformed.

    Example::

        compare({"a": 1, "b": 2}, {"b": 2, "a": 1})                        # True
        compare({"id": 1, "v": 2}, {"id": 2, "v": 2},
                {"top_level_ignore": ["id"]})                               # True
        compare(float("nan"), float("nan"))                                 # True
    """
    comparator = DeepComparator(CompareOptions.resolve(options))
    return comparator.compare(a, b)


def same(a: Any, b: Any, options: OptionsArg = None) -> bool:
    """Alias of ``compare`` that reads naturally at call sites.

    Example::

        if same(user_before, user_after, {"topLevelIgnore": ["last_login"]}):
            ...
    """
    return compare(a, b, options=options)


def different(a: Any, b: Any, options: OptionsArg = None) -> bool:
    """Return True if the two values are NOT structurally equal.

    Always the exact negation of ``compare(a, b, options)``.
    """
    return not compare(a, b, options=options)
