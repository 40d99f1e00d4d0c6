"""IQuery and IEntitySchema: the collaborators the core consumes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .operators import ComparisonOperator, SortDirection
    from .whitelist import FilterOptions


@runtime_checkable
class IQuery(Protocol):
    """Mutable predicate/ordering builder.

    Every method receives an already sanitized property path (nested
    segments joined with ``->``) and returns the query (itself or an
    equivalent) so calls can be chained.
    """

    def where(self, property: str, operator: ComparisonOperator, value: Any) -> IQuery:
        """Add ``property <operator> value``."""
        ...

    def where_date(
        self, property: str, operator: ComparisonOperator, value: Any
    ) -> IQuery:
        """Compare the calendar-date truncation of ``property`` to ``value``."""
        ...

    def where_in(self, property: str, values: Iterable[Any]) -> IQuery:
        ...

    def where_ilike(self, property: str, pattern: str) -> IQuery:
        """Case-insensitive pattern match (``%`` wildcards)."""
        ...

    def order_by(self, property: str, direction: SortDirection) -> IQuery:
        ...


@runtime_checkable
class IEntitySchema(Protocol):
    """Per-entity metadata: allow-lists, casts and timestamp columns."""

    def get_options_filter(self) -> FilterOptions:
        ...

    def has_cast(self, property: str, kinds: Iterable[str]) -> bool:
        """True when ``property`` is declared with one of the cast ``kinds``."""
        ...

    def created_at_column(self) -> str | None:
        ...

    def updated_at_column(self) -> str | None:
        ...
