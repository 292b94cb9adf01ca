"""Category StrEnum and the MISSING sentinel for value classification.

Every value handed to the comparator is mapped onto exactly one Category
before any equality decision is made.  MISSING is the explicit "no value"
marker; it is distinct from None.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Final

__all__ = ["MISSING", "REFERENCE_CATEGORIES", "Category"]


class Category(StrEnum):
    """Enumeration of the structural value categories.

    StrEnum values are the lowercased member names:
    - NULL     -> "null"     : None
    - ABSENT   -> "absent"   : the MISSING sentinel
    - SCALAR   -> "scalar"   : str, bool, bytes-like
    - NUMBER   -> "number"   : numbers.Number except bool (numpy scalars included)
    - WRAPPED  -> "wrapped"  : a boxed scalar (ctypes simple data, UserString, 0-d ndarray)
    - SEQUENCE -> "sequence" : an ordered, index-addressed container
    - KEYED    -> "keyed"    : a Mapping, or an object with reflected fields
    - OPAQUE   -> "opaque"   : anything else, compared with its own ``==``
    """

    NULL = auto()
    ABSENT = auto()
    SCALAR = auto()
    NUMBER = auto()
    WRAPPED = auto()
    SEQUENCE = auto()
    KEYED = auto()
    OPAQUE = auto()


REFERENCE_CATEGORIES: Final = frozenset({Category.SEQUENCE, Category.KEYED})


class _MissingType:
    """Type of the MISSING sentinel.  There is exactly one instance."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()
