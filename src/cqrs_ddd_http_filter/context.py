"""
FilterContext: request-scoped façade over parsed filters and sorts.

Built once per request from ``RequestParams``; ``build()`` applies the
whitelisted, sanitized predicates and ordering clauses to any ``IQuery``
and can be repeated on another query with the same result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NamedTuple

from .config import DEFAULT_CONFIG, FilterConfig
from .operators import SortDirection
from .parser import ParamParser
from .query_string import parse_query_string
from .selector import PredicateSelector
from .sorting import SortPlanner
from .values import Bounds, ValueList
from .whitelist import is_filterable, top_level_segment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .predicates import OrderingClause, Predicate
    from .query import IEntitySchema, IQuery
    from .values import FilterSpec

logger = logging.getLogger(__name__)


class QueryPlan(NamedTuple):
    """Predicates and ordering clauses ready to apply, in order."""

    predicates: list[Predicate]
    ordering: list[OrderingClause]


class FilterContext:
    """Parsed ``filter[...]`` / ``sort[]`` parameters for one request."""

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        *,
        config: FilterConfig | None = None,
        selector: PredicateSelector | None = None,
    ) -> None:
        """
        Initialize FilterContext.

        Args:
            params: Decoded request parameters (``RequestParams``); the
                ``filter`` entry is a mapping, ``sort`` an ordered list.
            config: Optional request keys and separators.
            selector: Optional predicate selector.
        """
        self._config = config or DEFAULT_CONFIG
        self._selector = selector or PredicateSelector()
        self._planner = SortPlanner(self._config)
        params = params or {}
        raw_filters = params.get(self._config.filter_key)
        if not isinstance(raw_filters, Mapping):
            raw_filters = None
        self._filters, self._sorts = ParamParser(self._config).parse(
            raw_filters, params.get(self._config.sort_key)
        )

    @classmethod
    def from_query_string(
        cls, query: str | Iterable[tuple[str, str]], **kwargs: Any
    ) -> FilterContext:
        """Build from ``filter[status]=active&sort[]=-name`` style input."""
        return cls(parse_query_string(query), **kwargs)

    @property
    def filters(self) -> FilterSpec:
        return self._filters

    @property
    def sorts(self) -> tuple[str, ...]:
        return self._sorts

    # -- query application -------------------------------------------------

    def plan(self, schema: IEntitySchema) -> QueryPlan:
        """Select every predicate and clause without touching a query.

        Raises:
            InvalidPropertyNameError: On the first path failing sanitization.
        """
        options = schema.get_options_filter()
        predicates: list[Predicate] = []
        for path, value in self._filters.items():
            segment = top_level_segment(path, self._config.path_separator)
            if not is_filterable(options, segment):
                logger.debug("Skipping non-filterable property %r", path)
                continue
            storage_path = self._config.to_storage_path(path)
            predicate = self._selector.select(schema, storage_path, value)
            logger.debug("Selected %s for %r", type(predicate).__name__, path)
            predicates.append(predicate)
        ordering = self._planner.plan(options, self._sorts)
        return QueryPlan(predicates, ordering)

    def build(self, query: IQuery, schema: IEntitySchema | None = None) -> IQuery:
        """Apply filters then sorts to ``query`` and return it.

        Everything is planned before the query is touched, so a rejected
        property name leaves ``query`` unchanged.

        Args:
            query: The query to mutate.
            schema: Entity metadata; defaults to ``query.schema``.
        """
        if schema is None:
            schema = getattr(query, "schema", None)
            if schema is None:
                raise TypeError("build() needs a schema or a query exposing .schema")
        plan = self.plan(schema)
        for predicate in plan.predicates:
            query = predicate.apply(query)
        for clause in plan.ordering:
            query = clause.apply(query)
        return query

    # -- view helpers ------------------------------------------------------

    def is_sort(self, property: str | None = None) -> bool:
        """No argument: True when no sort was requested at all.

        With a property: True when it is sorted in either direction.
        """
        if property is None:
            return not self._sorts
        prefix = self._config.descending_prefix
        return property in self._sorts or f"{prefix}{property}" in self._sorts

    def get_sort(self, property: str) -> str:
        """``"asc"`` if the bare property is a directive, ``"desc"`` otherwise.

        A property that is not sorted at all also reports ``"desc"``.
        """
        if property in self._sorts:
            return SortDirection.ASC.value
        return SortDirection.DESC.value

    def revert_sort(self, property: str) -> str:
        """Directive that toggles the current direction (for sort links)."""
        if self.get_sort(property) == SortDirection.ASC.value:
            return f"{self._config.descending_prefix}{property}"
        return property

    def get_filter(self, property: str, default: Any = None) -> Any:
        """Dotted lookup into the parsed filters.

        A literal key wins over nested lookup, so ``meta.color`` returns the
        value of ``filter[meta.color]`` when present.
        """
        if property in self._filters:
            return self._filters[property]
        current: Any = self._filters
        for segment in property.split(self._config.path_separator):
            if isinstance(current, Bounds):
                current = current.entries
            if isinstance(current, ValueList):
                current = current.values
            if isinstance(current, Mapping) and segment in current:
                current = current[segment]
            elif isinstance(current, tuple | list) and segment.isdigit():
                index = int(segment)
                if index >= len(current):
                    return default
                current = current[index]
            else:
                return default
        return current
