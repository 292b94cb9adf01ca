"""Type classifier: maps arbitrary Python values onto a Category.

Uses ordered isinstance dispatch.  The dispatch order is significant:
- bool before numbers.Number (bool subclasses int).
- Enum before numbers.Number (IntEnum members are ints).
- numpy.ndarray before Sequence so 0-d arrays are treated as wrapped scalars.
- Wrapper types before Sequence (UserString is a Sequence).
- Mapping before the generic attribute view.

Per-type facts (declared ``__slots__``, a custom ``__eq__`` and the ``equals``
capability) are memoised in bounded LRU caches.  They depend on the type
alone, never on a particular comparison call.
"""

from __future__ import annotations

import ctypes
import dataclasses
import inspect
import numbers
import threading
from collections import UserString
from collections.abc import Hashable, Mapping, Sequence
from enum import Enum
from typing import Any

import numpy as np
from cachetools import LRUCache, cached

from structural_compare.values.category import MISSING, Category

__all__ = [
    "classify",
    "classify_pair",
    "exposes_equals",
    "field_names",
    "field_value",
    "unwrap",
]

_SCALAR_TYPES = (str, bool, np.bool_, bytes, bytearray, memoryview)

# ctypes._SimpleCData is the common base of c_int, c_double, c_bool, c_char_p, ...
_WRAPPER_TYPES = (ctypes._SimpleCData, UserString)

_PROBE_CACHE_SIZE = 512


def classify(value: Any) -> Category:
    """Return the structural category of ``value``.

    Args:
        value: Any Python value.

    Returns:
        The Category the comparator dispatches on.
    """
    if value is None:
        return Category.NULL

    if value is MISSING:
        return Category.ABSENT

    # bool MUST be checked before numbers.Number
    if isinstance(value, _SCALAR_TYPES):
        return Category.SCALAR

    if isinstance(value, Enum):
        return Category.OPAQUE

    if isinstance(value, numbers.Number):
        return Category.NUMBER

    if isinstance(value, np.ndarray):
        return Category.WRAPPED if value.ndim == 0 else Category.SEQUENCE

    if isinstance(value, _WRAPPER_TYPES):
        return Category.WRAPPED

    if isinstance(value, Mapping):
        return Category.KEYED

    if isinstance(value, Sequence):
        return Category.SEQUENCE

    if isinstance(value, type) or inspect.isroutine(value) or inspect.ismodule(value):
        return Category.OPAQUE

    if hasattr(value, "__dict__"):
        return Category.KEYED

    # slotted value types with their own __eq__ (PurePath, ...) may fill
    # cache slots lazily, so their slot layout is not their value
    if _slot_names(type(value)) and not _type_overrides_eq(type(value)):
        return Category.KEYED

    return Category.OPAQUE


def classify_pair(a: Any, b: Any) -> Category | None:
    """Return the category shared by ``a`` and ``b``, or None when they differ."""
    category = classify(a)
    if classify(b) is not category:
        return None
    return category


def field_names(value: Any) -> list[Hashable]:
    """Return the own reflected keys of a KEYED value.

    Mappings contribute their keys.  Other objects contribute their instance
    ``__dict__`` names followed by every declared ``__slots__`` entry that
    currently holds a value.  Methods, properties and class attributes are
    never included.

    Args:
        value: A value classified as ``Category.KEYED``.

    Returns:
        Keys in discovery order (unsorted).
    """
    if isinstance(value, Mapping):
        return list(value.keys())

    names: list[Hashable] = list(vars(value)) if hasattr(value, "__dict__") else []
    seen = set(names)
    for name in _slot_names(type(value)):
        if name not in seen and hasattr(value, name):
            names.append(name)
            seen.add(name)
    return names


def field_value(value: Any, key: Hashable) -> Any:
    """Look up ``key`` on a KEYED value (item access for mappings, attribute otherwise)."""
    if isinstance(value, Mapping):
        return value[key]
    return getattr(value, key)  # type: ignore[arg-type]


def unwrap(value: Any) -> Any:
    """Return the primitive held by a WRAPPED value."""
    if isinstance(value, np.ndarray):
        return value.item()
    if isinstance(value, UserString):
        return value.data
    return value.value


def exposes_equals(value: Any) -> bool:
    """Return True if ``value`` has a callable ``equals`` (see ``Comparable``)."""
    return _type_exposes_equals(type(value))


@cached(cache=LRUCache(maxsize=_PROBE_CACHE_SIZE), lock=threading.Lock())
def _type_exposes_equals(tp: type) -> bool:
    return callable(getattr(tp, "equals", None))


@cached(cache=LRUCache(maxsize=_PROBE_CACHE_SIZE), lock=threading.Lock())
def _type_overrides_eq(tp: type) -> bool:
    # dataclass-generated __eq__ compares fields, which the slot view mirrors
    return getattr(tp, "__eq__", None) is not object.__eq__ and not dataclasses.is_dataclass(tp)


@cached(cache=LRUCache(maxsize=_PROBE_CACHE_SIZE), lock=threading.Lock())
def _slot_names(tp: type) -> tuple[str, ...]:
    """Collect the declared ``__slots__`` names across the MRO of ``tp``.

    Private (double-underscore) slot names are returned in their mangled
    form so that ``getattr`` can resolve them.
    """
    names: list[str] = []
    for klass in tp.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return tuple(names)
