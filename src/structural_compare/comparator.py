"""DeepComparator: recursive orchestrator for structural equality.

This is the central wiring layer between the classifier, the scalar
comparator, the key reconciler and the circular-reference tracker.

Architecture:
- compare() allocates a fresh CircularReferenceTracker (only when
  ``detect_circular`` is on) and starts the recursion at the top level with
  the configured include/ignore filters.
- Every level classifies both operands; a category mismatch is an immediate
  False.  Scalars, numbers and wrapped scalars are decided without
  descending.
- Containers (SEQUENCE / KEYED) go through, in order: cycle check, shallow
  identity check, custom ``equals`` delegation, structural descent.
- Opaque values use custom ``equals`` when both expose it, else ``==``.
- Include/ignore filters travel through sequence elements and are dropped
  as soon as the recursion enters the values of a KEYED structure.
- Every negative decision is logged at DEBUG with a JSON Pointer style path
  ("" for the root, "/key" and "/0" per level) and the reason.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Hashable
from typing import Any

from structural_compare.algorithm.circular import CircularReferenceTracker
from structural_compare.algorithm.config import CompareOptions
from structural_compare.algorithm.keys import reconcile_keys
from structural_compare.algorithm.scalars import compare_numbers, compare_scalars
from structural_compare.values import (
    Category,
    classify_pair,
    exposes_equals,
    field_names,
    field_value,
    unwrap,
)

__all__ = ["DeepComparator"]

logger = logging.getLogger(__name__)

_KeyFilter = Collection[Hashable] | None


class DeepComparator:
    """Orchestrator for deep structural comparison.

    A comparator holds only its immutable ``CompareOptions``; all per-call
    state (the visited registry) is created inside ``compare()``.  One
    instance can therefore be reused, and shared between threads.

    Example::

        from structural_compare.comparator import DeepComparator
        from structural_compare.algorithm.config import CompareOptions

        cmp = DeepComparator(CompareOptions(top_level_ignore={"updated_at"}))
        cmp.compare({"id": 1, "updated_at": 10}, {"id": 1, "updated_at": 99})  # True
    """

    def __init__(self, options: CompareOptions | None = None) -> None:
        """Initialise the comparator.

        Args:
            options: Comparison options.  Defaults to ``CompareOptions()``.
        """
        self._options: CompareOptions = options if options is not None else CompareOptions()

    @property
    def options(self) -> CompareOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, a: Any, b: Any) -> bool:
        """Return True if ``a`` and ``b`` hold the same data.

        Raises:
            RecursionError: If the inputs are circular and ``detect_circular``
                is off, or if they are nested deeper than the interpreter's
                recursion limit.
        """
        tracker = CircularReferenceTracker() if self._options.detect_circular else None
        return self._compare(
            a,
            b,
            self._options.top_level_include,
            self._options.top_level_ignore,
            tracker,
            top_level=True,
            path="",
        )

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _compare(
        self,
        a: Any,
        b: Any,
        include: _KeyFilter,
        ignore: _KeyFilter,
        tracker: CircularReferenceTracker | None,
        top_level: bool,
        path: str,
    ) -> bool:
        category = classify_pair(a, b)
        if category is None:
            logger.debug(
                "%r: category mismatch (%s vs %s)",
                path,
                type(a).__name__,
                type(b).__name__,
            )
            return False

        if category in (Category.NULL, Category.ABSENT, Category.SCALAR):
            return self._verdict(compare_scalars(a, b), path, "scalar values differ")

        if category is Category.NUMBER:
            return self._verdict(compare_numbers(a, b), path, "numbers differ")

        if category is Category.WRAPPED:
            return self._compare(
                unwrap(a), unwrap(b), include, ignore, tracker, top_level=False, path=path
            )

        if category is Category.OPAQUE:
            if exposes_equals(a) and exposes_equals(b):
                return self._verdict(bool(a.equals(b)), path, "custom equals() returned False")
            return self._verdict(bool(a == b), path, "opaque values differ")

        # SEQUENCE or KEYED from here on
        if tracker is not None and tracker.enter(a, b):
            logger.debug("%r: circular reference closed, treating pair as equal", path)
            return True

        if not top_level and self._options.shallow:
            return self._verdict(a is b, path, "shallow mode, different references")

        if exposes_equals(a) and exposes_equals(b):
            return self._verdict(bool(a.equals(b)), path, "custom equals() returned False")

        if category is Category.SEQUENCE:
            return self._compare_sequences(a, b, include, ignore, tracker, path)

        return self._compare_keyed(a, b, include, ignore, tracker, path)

    def _compare_sequences(
        self,
        a: Any,
        b: Any,
        include: _KeyFilter,
        ignore: _KeyFilter,
        tracker: CircularReferenceTracker | None,
        path: str,
    ) -> bool:
        """Compare two SEQUENCE values by length, then position by position.

        The include/ignore filters are handed to every element so that a
        list of records is filtered per record.
        """
        if len(a) != len(b):
            logger.debug("%r: length mismatch (%d vs %d)", path, len(a), len(b))
            return False

        for idx in range(len(a)):
            if not self._compare(
                a[idx],
                b[idx],
                include,
                ignore,
                tracker,
                top_level=False,
                path=f"{path}/{idx}",
            ):
                return False
        return True

    def _compare_keyed(
        self,
        a: Any,
        b: Any,
        include: _KeyFilter,
        ignore: _KeyFilter,
        tracker: CircularReferenceTracker | None,
        path: str,
    ) -> bool:
        """Compare two KEYED values: reconcile key sets, then recurse per key.

        Nested values are always compared on all of their keys; the filters
        stop here.
        """
        keys = reconcile_keys(field_names(a), field_names(b), include, ignore)
        if keys is None:
            logger.debug("%r: key sets differ", path)
            return False

        for key in keys:
            if not self._compare(
                field_value(a, key),
                field_value(b, key),
                None,
                None,
                tracker,
                top_level=False,
                path=f"{path}/{key}",
            ):
                return False
        return True

    @staticmethod
    def _verdict(equal: bool, path: str, reason: str) -> bool:
        if not equal:
            logger.debug("%r: %s", path, reason)
        return equal
