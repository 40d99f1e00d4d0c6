"""Raw filter values: the closed set of shapes a request value can take."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Scalar:
    """A single request value, e.g. ``filter[status]=active``."""

    value: Any


@dataclass(frozen=True)
class ValueList:
    """Ordered values, from ``a,b,c`` or repeated ``filter[p][]=``."""

    values: tuple[Any, ...]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Bounds:
    """
    Named sub-values, e.g. ``filter[price][min]=10``.

    Only ``start``, ``end``, ``min`` and ``max`` drive predicates; other keys
    are kept so they can still be looked up and rendered back.
    """

    entries: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, key: str, default: Any = None) -> Any:
        return self.entries.get(key, default)

    def has(self, key: str) -> bool:
        """True when the key is present and not ``None``."""
        return self.entries.get(key) is not None

    @property
    def has_range(self) -> bool:
        return self.has("min") or self.has("max")


RawValue = Scalar | ValueList | Bounds

FilterSpec = Mapping[str, RawValue]
"""Immutable mapping of property path -> RawValue."""


def is_empty_bound(value: Any) -> bool:
    """Missing bounds and the raw strings ``""`` and ``"0"`` impose no constraint."""
    if value is None:
        return True
    return isinstance(value, str) and value in ("", "0")
