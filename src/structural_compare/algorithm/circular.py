"""CircularReferenceTracker: per-call visited registry for container pairs.

One tracker is created for each top-level comparison and passed explicitly
down the recursion; it is never shared between calls.  Identity is by
``id()``, and the tracker holds a strong reference to every object it has
seen so that no id can be recycled while the call is running (numpy
sub-array views, for example, are created and dropped during traversal).
"""

from __future__ import annotations

from typing import Any

__all__ = ["CircularReferenceTracker"]


class CircularReferenceTracker:
    """Visited registry for the left and right sides of one comparison.

    Example::

        tracker = CircularReferenceTracker()
        node = {"a": 1}
        node["self"] = node
        tracker.enter(node, node)   # False: first visit, now recorded
        tracker.enter(node, node)   # True: both sides seen, cycle closed
    """

    __slots__ = ("_left", "_right")

    def __init__(self) -> None:
        self._left: dict[int, Any] = {}
        self._right: dict[int, Any] = {}

    def __len__(self) -> int:
        """Number of distinct containers recorded across both sides."""
        return len(self._left) + len(self._right)

    def seen(self, a: Any, b: Any) -> bool:
        """Return True if ``a`` was visited on the left AND ``b`` on the right."""
        return id(a) in self._left and id(b) in self._right

    def enter(self, a: Any, b: Any) -> bool:
        """Register a container pair before descending into it.

        Args:
            a: Container on the left side.
            b: Container on the right side.

        Returns:
            True if both containers were already visited on their respective
            sides (the cycle is closed and the pair is taken as equal);
            otherwise records both and returns False.
        """
        if self.seen(a, b):
            return True
        self._left[id(a)] = a
        self._right[id(b)] = b
        return False
