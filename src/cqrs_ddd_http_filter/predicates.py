"""
Predicates and ordering clauses applied to an ``IQuery``.

Each predicate is an immutable value bound to one sanitized property path.
``apply`` mutates the query through the ``IQuery`` contract only, so the
core never builds storage expressions itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .operators import ComparisonOperator, SortDirection
from .values import is_empty_bound

if TYPE_CHECKING:
    from .query import IQuery


@dataclass(frozen=True)
class Predicate(ABC):
    """A single constraint on one property."""

    property: str

    @abstractmethod
    def apply(self, query: IQuery) -> IQuery:
        ...


@dataclass(frozen=True)
class ExactMatch(Predicate):
    value: Any

    def apply(self, query: IQuery) -> IQuery:
        return query.where(self.property, ComparisonOperator.EQ, self.value)


@dataclass(frozen=True)
class NumericEquals(Predicate):
    value: int | float

    def apply(self, query: IQuery) -> IQuery:
        return query.where(self.property, ComparisonOperator.EQ, self.value)


@dataclass(frozen=True)
class BooleanEquals(Predicate):
    value: bool

    def apply(self, query: IQuery) -> IQuery:
        return query.where(self.property, ComparisonOperator.EQ, self.value)


@dataclass(frozen=True)
class RangeInclusive(Predicate):
    """``min <= property <= max``; each side only when present."""

    min: Any = None
    max: Any = None

    @property
    def is_inert(self) -> bool:
        return is_empty_bound(self.min) and is_empty_bound(self.max)

    def apply(self, query: IQuery) -> IQuery:
        if not is_empty_bound(self.min):
            query = query.where(self.property, ComparisonOperator.GE, self.min)
        if not is_empty_bound(self.max):
            query = query.where(self.property, ComparisonOperator.LE, self.max)
        return query


@dataclass(frozen=True)
class DateRangeInclusive(Predicate):
    """``start <= DATE(property) <= end``; each side only when present."""

    start: Any = None
    end: Any = None

    @property
    def is_inert(self) -> bool:
        return is_empty_bound(self.start) and is_empty_bound(self.end)

    def apply(self, query: IQuery) -> IQuery:
        if not is_empty_bound(self.start):
            query = query.where_date(self.property, ComparisonOperator.GE, self.start)
        if not is_empty_bound(self.end):
            query = query.where_date(self.property, ComparisonOperator.LE, self.end)
        return query


@dataclass(frozen=True)
class MembershipIn(Predicate):
    values: tuple[Any, ...]

    def apply(self, query: IQuery) -> IQuery:
        return query.where_in(self.property, self.values)


@dataclass(frozen=True)
class SubstringMatch(Predicate):
    """Case-insensitive "contains"."""

    value: Any

    @property
    def pattern(self) -> str:
        return f"%{self.value}%"

    def apply(self, query: IQuery) -> IQuery:
        return query.where_ilike(self.property, self.pattern)


@dataclass(frozen=True)
class OrderingClause:
    property: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def apply(self, query: IQuery) -> IQuery:
        return query.order_by(self.property, self.direction)
