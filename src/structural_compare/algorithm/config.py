"""CompareOptions: immutable configuration for a deep comparison.

CompareOptions is a frozen (immutable) dataclass.  Include/ignore key
collections are normalised to frozensets at construction time so a single
options object can be shared freely between calls and threads.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any

__all__ = ["CompareOptions"]

# camelCase spellings accepted by from_mapping(), alongside the field names.
_OPTION_ALIASES: dict[str, str] = {
    "topLevelInclude": "top_level_include",
    "topLevelIgnore": "top_level_ignore",
    "shallow": "shallow",
    "detectCircular": "detect_circular",
}


def _normalise_keys(name: str, value: Any) -> frozenset[Hashable] | None:
    if value is None:
        return None
    if isinstance(value, (str, bytes)):
        msg = f"{name} must be a collection of keys, not a bare {type(value).__name__}"
        raise TypeError(msg)
    if not isinstance(value, Iterable):
        msg = f"{name} must be a collection of keys, got {type(value).__name__}"
        raise TypeError(msg)
    return frozenset(value)


@dataclass(frozen=True, slots=True)
class CompareOptions:
    """Immutable configuration for ``compare`` / ``same`` / ``different``.

    Attributes:
        top_level_include: Keys to compare at the top level.  None means "not
            provided".  An empty collection means "compare no keys", which
            makes any two KEYED values vacuously equal.
        top_level_ignore: Keys to skip at the top level.  Not consulted when
            ``top_level_include`` is non-empty.
        shallow: When True, only the first level is compared by content;
            deeper containers are compared by identity.
        detect_circular: When True, self-referential structures are handled
            safely.  When False (default) a cycle raises ``RecursionError``.
    """

    top_level_include: frozenset[Hashable] | None = None
    top_level_ignore: frozenset[Hashable] | None = None
    shallow: bool = False
    detect_circular: bool = False

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(
            self,
            "top_level_include",
            _normalise_keys("top_level_include", self.top_level_include),
        )
        object.__setattr__(
            self,
            "top_level_ignore",
            _normalise_keys("top_level_ignore", self.top_level_ignore),
        )
        if not isinstance(self.shallow, bool):
            msg = f"shallow must be a bool, got {type(self.shallow).__name__}"
            raise TypeError(msg)
        if not isinstance(self.detect_circular, bool):
            msg = f"detect_circular must be a bool, got {type(self.detect_circular).__name__}"
            raise TypeError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CompareOptions:
        """Build options from a mapping of option names.

        Both the field names (``top_level_include``) and their camelCase
        spellings (``topLevelInclude``) are accepted.

        Raises:
            ValueError: If a name is not a recognised option, or if the same
                option is given under both spellings.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name, value in mapping.items():
            field_name = name if name in known else _OPTION_ALIASES.get(name)
            if field_name is None:
                msg = f"Unknown comparison option: {name!r}"
                raise ValueError(msg)
            if field_name in kwargs:
                msg = f"Comparison option {field_name!r} given more than once"
                raise ValueError(msg)
            kwargs[field_name] = value
        return cls(**kwargs)

    @classmethod
    def resolve(cls, options: CompareOptions | Mapping[str, Any] | None) -> CompareOptions:
        """Coerce the ``options`` argument of the public API into CompareOptions."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        msg = f"options must be CompareOptions, a mapping or None, got {type(options).__name__}"
        raise TypeError(msg)
