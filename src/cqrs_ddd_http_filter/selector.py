"""PredicateSelector: choose one predicate per property from type and value shape."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from .predicates import (
    BooleanEquals,
    DateRangeInclusive,
    MembershipIn,
    NumericEquals,
    Predicate,
    RangeInclusive,
    SubstringMatch,
)
from .sanitizer import sanitize
from .schema import PropertyType, property_type
from .values import Bounds, Scalar, ValueList, is_empty_bound

if TYPE_CHECKING:
    from .query import IEntitySchema
    from .values import RawValue

logger = logging.getLogger(__name__)

_NUMERIC_LITERAL = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII
)
_INTEGER_LITERAL = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_FALSE_STRINGS = frozenset({"", "0", "false", "off", "no"})


def to_number(value: Any) -> int | float | None:
    """Parse a numeric literal (``"12"``, ``"-1.5"``, ``"2e3"``) or return None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return value
    if not isinstance(value, str) or not _NUMERIC_LITERAL.fullmatch(value):
        return None
    if _INTEGER_LITERAL.fullmatch(value):
        return int(value)
    return float(value)


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


class PredicateSelector:
    """Pick exactly one predicate for a whitelisted property.

    Dispatch order matters because value shapes overlap:

    1. date cast or timestamp column -> ``DateRangeInclusive`` (start/end)
    2. bounds with ``min``/``max``   -> ``RangeInclusive``
    3. list                          -> ``MembershipIn``
    4. boolean cast                  -> ``BooleanEquals``
    5. numeric literal, not string   -> ``NumericEquals``
    6. anything else                 -> ``SubstringMatch``
    """

    def select(
        self, schema: IEntitySchema, property: str, value: RawValue
    ) -> Predicate:
        property = sanitize(property)
        info = property_type(schema, property)

        if info.type is PropertyType.TEMPORAL:
            return self._date_range(property, value)

        if isinstance(value, Bounds):
            if not value.has_range:
                logger.debug(
                    "Bounds without min/max on %r impose no constraint", property
                )
            return RangeInclusive(
                property,
                min=self._bound(value.get("min"), info.type),
                max=self._bound(value.get("max"), info.type),
            )

        if isinstance(value, ValueList):
            return MembershipIn(property, tuple(value.values))

        scalar = value.value if isinstance(value, Scalar) else value

        if info.type is PropertyType.BOOLEAN:
            return BooleanEquals(property, to_bool(scalar))

        number = to_number(scalar)
        if number is not None and info.type is not PropertyType.STRING:
            return NumericEquals(property, number)

        return SubstringMatch(property, scalar)

    def _date_range(self, property: str, value: RawValue) -> DateRangeInclusive:
        if not isinstance(value, Bounds):
            logger.debug("Date filter on %r without start/end is inert", property)
            return DateRangeInclusive(property)
        return DateRangeInclusive(
            property, start=value.get("start"), end=value.get("end")
        )

    def _bound(self, raw: Any, kind: PropertyType) -> Any:
        # Emptiness is decided on the raw value; "0.0" is a real bound.
        if is_empty_bound(raw):
            return None
        if kind is PropertyType.STRING:
            return raw
        number = to_number(raw)
        return raw if number is None else number
