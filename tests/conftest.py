"""Shared fixtures: an in-memory entity schema and a recording query."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import pytest

from cqrs_ddd_http_filter import FilterOptions


@dataclass
class FakeSchema:
    allowed_filters: set[str] = field(default_factory=set)
    allowed_sorts: set[str] = field(default_factory=set)
    casts: dict[str, str] = field(default_factory=dict)
    created_at: str | None = "created_at"
    updated_at: str | None = "updated_at"

    def get_options_filter(self) -> FilterOptions:
        return FilterOptions(
            allowed_filters=frozenset(self.allowed_filters),
            allowed_sorts=frozenset(self.allowed_sorts),
        )

    def has_cast(self, property: str, kinds: Iterable[str]) -> bool:
        return self.casts.get(property) in set(kinds)

    def created_at_column(self) -> str | None:
        return self.created_at

    def updated_at_column(self) -> str | None:
        return self.updated_at


class RecordingQuery:
    """IQuery double that records every call as a tuple."""

    def __init__(self, schema: FakeSchema | None = None) -> None:
        self.schema = schema
        self.calls: list[tuple[Any, ...]] = []

    def where(self, property: str, operator: Any, value: Any) -> RecordingQuery:
        self.calls.append(("where", property, operator, value))
        return self

    def where_date(self, property: str, operator: Any, value: Any) -> RecordingQuery:
        self.calls.append(("where_date", property, operator, value))
        return self

    def where_in(self, property: str, values: Iterable[Any]) -> RecordingQuery:
        self.calls.append(("where_in", property, tuple(values)))
        return self

    def where_ilike(self, property: str, pattern: str) -> RecordingQuery:
        self.calls.append(("where_ilike", property, pattern))
        return self

    def order_by(self, property: str, direction: Any) -> RecordingQuery:
        self.calls.append(("order_by", property, direction))
        return self


@pytest.fixture
def make_schema():
    """Factory for FakeSchema instances."""

    def factory(**kwargs: Any) -> FakeSchema:
        return FakeSchema(**kwargs)

    return factory


@pytest.fixture
def make_query():
    """Factory for RecordingQuery instances."""

    def factory(schema: FakeSchema | None = None) -> RecordingQuery:
        return RecordingQuery(schema)

    return factory
