"""Scalar and numeric equality with NaN-aware semantics.

Both NaN operands compare equal here, unlike IEEE 754 ``==``.  The question
being answered is "do these two records hold the same data", and a NaN in the
same position on both sides is the same data.
"""

from __future__ import annotations

import cmath
import math
from decimal import Decimal
from typing import Any

import numpy as np

__all__ = ["compare_numbers", "compare_scalars", "is_nan"]


def is_nan(value: Any) -> bool:
    """Return True if ``value`` is a NaN of any supported numeric type.

    Covers ``float``, ``complex`` (NaN in either component), numpy floating
    and complex scalars, and ``Decimal`` (quiet or signalling NaN, without
    raising ``InvalidOperation``).  Integers and fractions are never NaN.
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, (np.floating, np.complexfloating)):
        return bool(np.isnan(value))
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, float):
        return math.isnan(value)
    return False


def compare_numbers(a: Any, b: Any) -> bool:
    """Compare two NUMBER values.

    Returns:
        True if both are NaN; False if exactly one is NaN; otherwise the
        result of ``a == b`` (so ``1 == 1.0`` holds across numeric types).
    """
    a_nan = is_nan(a)
    b_nan = is_nan(b)
    if a_nan or b_nan:
        return a_nan and b_nan
    return bool(a == b)


def compare_scalars(a: Any, b: Any) -> bool:
    """Compare two NULL, ABSENT or SCALAR values by value."""
    if a is b:
        return True
    return bool(a == b)
