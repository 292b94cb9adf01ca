"""Comparable Protocol: the custom-equality extension point.

Defines the structural interface for values that decide their own equality.
No inheritance is required; any class with a conformant ``equals`` method
passes ``isinstance`` checks.

Example::

    from structural_compare import compare
    from structural_compare.protocols import Comparable

    class Vector2D:
        def __init__(self, x: float, y: float) -> None:
            self.x, self.y = x, y

        def equals(self, other: "Vector2D") -> bool:
            # same line through the origin, regardless of magnitude or sign
            return self.x * other.y == self.y * other.x

    assert isinstance(Vector2D(1, 0), Comparable)        # True
    assert compare(Vector2D(1, 0), Vector2D(-1, 0))      # True, via equals()
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Comparable"]


@runtime_checkable
class Comparable(Protocol):
    """Structural protocol for values with their own equality rule.

    The comparator calls ``equals`` only when BOTH operands expose it, and
    always as ``left.equals(right)``.  It never retries with the operands
    swapped.  The method is not required to be symmetric.  When only one
    operand exposes it, ordinary structural comparison is used instead.
    """

    def equals(self, other: Any) -> bool: ...
