"""Values subpackage: value categories and the type classifier.

Re-exports the public API for the values module:
- Category: StrEnum of the structural categories a value can fall into
- MISSING: the explicit "no value" sentinel (distinct from None)
- classify / classify_pair: category dispatch for one value or a pair
- field_names / field_value: reflected key view of KEYED values
- unwrap: primitive held by a WRAPPED value
- exposes_equals: probe for the ``equals`` capability
"""

from structural_compare.values.category import MISSING, REFERENCE_CATEGORIES, Category
from structural_compare.values.classifier import (
    classify,
    classify_pair,
    exposes_equals,
    field_names,
    field_value,
    unwrap,
)

__all__ = [
    "MISSING",
    "REFERENCE_CATEGORIES",
    "Category",
    "classify",
    "classify_pair",
    "exposes_equals",
    "field_names",
    "field_value",
    "unwrap",
]
