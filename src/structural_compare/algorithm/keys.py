"""Key-set reconciliation for KEYED values under include/ignore filters.

Include takes precedence over ignore: "only these keys matter" is a more
specific instruction than "skip these keys", so when both are supplied the
ignore set is not consulted at all.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterable
from typing import Any

__all__ = ["filter_keys", "key_sort_key", "reconcile_keys", "sort_keys"]


def key_sort_key(key: Hashable) -> tuple[str, Any]:
    """Sort key grouping keys by type name, then by the key itself."""
    return (type(key).__name__, key)


def sort_keys(keys: Iterable[Hashable]) -> list[Hashable]:
    """Sort keys into a deterministic total order.

    Keys of one type are ordered natively when they support ``<``; keys that
    do not (e.g. tuples mixing types, arbitrary hashable objects) are ordered
    by ``repr`` within their type group instead.
    """
    keys = list(keys)
    try:
        return sorted(keys, key=key_sort_key)
    except TypeError:
        return sorted(keys, key=lambda k: (type(k).__name__, repr(k)))


def filter_keys(
    keys: Iterable[Hashable],
    include: Collection[Hashable] | None = None,
    ignore: Collection[Hashable] | None = None,
) -> list[Hashable]:
    """Apply the include/ignore filters to one side's keys.

    Args:
        keys:    The keys of a single KEYED value.
        include: When non-empty, only these keys are kept.
        ignore:  When non-empty and ``include`` is empty or None, these keys
                 are dropped.

    Returns:
        The surviving keys, in their original order.
    """
    if include:
        return [k for k in keys if k in include]
    if ignore:
        return [k for k in keys if k not in ignore]
    return list(keys)


def reconcile_keys(
    left_keys: Iterable[Hashable],
    right_keys: Iterable[Hashable],
    include: Collection[Hashable] | None = None,
    ignore: Collection[Hashable] | None = None,
) -> list[Hashable] | None:
    """Compute the comparable keys shared by two KEYED values.

    An include collection that is provided but empty selects zero keys, so
    the two values are vacuously equal and ``[]`` is returned without
    looking at either key list.

    Args:
        left_keys:  Own keys of the left value.
        right_keys: Own keys of the right value.
        include:    Optional whitelist (None means "not provided").
        ignore:     Optional blacklist; ignored when ``include`` is non-empty.

    Returns:
        The filtered key list common to both sides, sorted with
        ``sort_keys``, or None when the filtered key sets differ in length or
        in any name.
    """
    if include is not None and len(include) == 0:
        return []

    left = filter_keys(left_keys, include, ignore)
    right = filter_keys(right_keys, include, ignore)

    # Membership rather than sorted-list equality: some key types (frozenset)
    # are only partially ordered and would sort differently on each side.
    if len(left) != len(right) or set(left) != set(right):
        return None
    return sort_keys(left)
