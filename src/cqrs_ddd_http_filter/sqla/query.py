"""
SQLAlchemyQuery: ``IQuery`` over a SQLAlchemy 2.x ``Select``.

Sanitized paths are resolved against the model: ``status`` is a mapped
column, ``meta->color`` is the ``color`` element of the JSON column ``meta``
compared as text.
"""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Float, asc, cast, desc, func, select
from sqlalchemy import inspect as sa_inspect

from ..config import DEFAULT_CONFIG
from ..exceptions import UnknownPropertyError
from ..operators import ComparisonOperator, SortDirection
from .schema import SQLAlchemyEntitySchema

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from sqlalchemy import Select

    from ..query import IEntitySchema

_COMPARATORS: dict[ComparisonOperator, Callable[[Any, Any], Any]] = {
    ComparisonOperator.EQ: op_module.eq,
    ComparisonOperator.GE: op_module.ge,
    ComparisonOperator.LE: op_module.le,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class SQLAlchemyQuery:
    """Accumulates WHERE and ORDER BY clauses on ``stmt``."""

    def __init__(
        self,
        model: type[Any],
        stmt: Select[Any] | None = None,
        *,
        schema: IEntitySchema | None = None,
        storage_separator: str = DEFAULT_CONFIG.storage_separator,
    ) -> None:
        self.model = model
        self.stmt = stmt if stmt is not None else select(model)
        self.schema = schema or SQLAlchemyEntitySchema(model)
        self._separator = storage_separator

    def resolve(self, property: str) -> Any:
        """Return the column (or JSON element) expression for ``property``.

        Raises:
            UnknownPropertyError: If the path is not a mapped column, or a
                nested path targets a non-JSON column.
        """
        name, *path = property.split(self._separator)
        mapper = sa_inspect(self.model)
        if name not in mapper.all_orm_descriptors or name in mapper.relationships:
            raise UnknownPropertyError(property, self.model.__name__)
        column = getattr(self.model, name)
        if not path:
            return column
        mapped = mapper.columns.get(name)
        if mapped is None or not isinstance(mapped.type, JSON):
            raise UnknownPropertyError(property, self.model.__name__)
        keys = tuple(int(key) if key.isdigit() else key for key in path)
        element = column[keys[0]] if len(keys) == 1 else column[keys]
        return element.as_string()

    def where(
        self, property: str, operator: ComparisonOperator, value: Any
    ) -> SQLAlchemyQuery:
        compare = _COMPARATORS[ComparisonOperator(operator)]
        column = self.resolve(property)
        # JSON elements resolve to text; numbers compare against a numeric cast.
        if self._separator in property and _is_number(value):
            column = cast(column, Float)
        self.stmt = self.stmt.where(compare(column, value))
        return self

    def where_date(
        self, property: str, operator: ComparisonOperator, value: Any
    ) -> SQLAlchemyQuery:
        compare = _COMPARATORS[ComparisonOperator(operator)]
        column = func.date(self.resolve(property))
        self.stmt = self.stmt.where(compare(column, value))
        return self

    def where_in(self, property: str, values: Iterable[Any]) -> SQLAlchemyQuery:
        self.stmt = self.stmt.where(self.resolve(property).in_(list(values)))
        return self

    def where_ilike(self, property: str, pattern: str) -> SQLAlchemyQuery:
        self.stmt = self.stmt.where(self.resolve(property).ilike(pattern))
        return self

    def order_by(self, property: str, direction: SortDirection) -> SQLAlchemyQuery:
        column = self.resolve(property)
        if SortDirection(direction) is SortDirection.DESC:
            ordering = desc(column)
        else:
            ordering = asc(column)
        self.stmt = self.stmt.order_by(ordering)
        return self
