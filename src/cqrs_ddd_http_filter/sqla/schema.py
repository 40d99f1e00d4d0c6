"""SQLAlchemyEntitySchema: entity metadata read from a declarative model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, Numeric, String
from sqlalchemy import inspect as sa_inspect

from ..whitelist import FilterOptions

# Checked in order: Boolean before Integer, DateTime before Date, Float before
# Numeric.
_TYPE_CASTS: tuple[tuple[type[Any], str], ...] = (
    (Boolean, "bool"),
    (DateTime, "datetime"),
    (Date, "date"),
    (Integer, "integer"),
    (Float, "float"),
    (Numeric, "decimal"),
    (String, "string"),
)


class SQLAlchemyEntitySchema:
    """
    ``IEntitySchema`` for a SQLAlchemy declarative model.

    Casts are inferred from column types and can be overridden per
    property. Allow-lists come from the constructor or, when omitted, from
    the model's ``__allowed_filters__`` / ``__allowed_sorts__`` attributes.

    Example::

        class Article(Base):
            __tablename__ = "articles"
            __allowed_filters__ = ("status", "price", "created_at", "meta")
            __allowed_sorts__ = ("title", "price")
    """

    def __init__(
        self,
        model: type[Any],
        *,
        allowed_filters: Iterable[str] | None = None,
        allowed_sorts: Iterable[str] | None = None,
        casts: Mapping[str, str] | None = None,
        created_at: str | None = "created_at",
        updated_at: str | None = "updated_at",
    ) -> None:
        self.model = model
        if allowed_filters is None:
            allowed_filters = getattr(model, "__allowed_filters__", ())
        if allowed_sorts is None:
            allowed_sorts = getattr(model, "__allowed_sorts__", ())
        self._options = FilterOptions(
            allowed_filters=frozenset(allowed_filters),
            allowed_sorts=frozenset(allowed_sorts),
        )
        self._casts = dict(casts or {})
        self._created_at = created_at
        self._updated_at = updated_at

    def get_options_filter(self) -> FilterOptions:
        return self._options

    def get_cast(self, property: str) -> str | None:
        """Explicit cast for ``property``, else one inferred from its column."""
        if property in self._casts:
            return self._casts[property]
        column = sa_inspect(self.model).columns.get(property)
        if column is None:
            return None
        for sa_type, cast in _TYPE_CASTS:
            if isinstance(column.type, sa_type):
                return cast
        return None

    def has_cast(self, property: str, kinds: Iterable[str]) -> bool:
        cast = self.get_cast(property)
        return cast is not None and cast in set(kinds)

    def created_at_column(self) -> str | None:
        return self._created_at

    def updated_at_column(self) -> str | None:
        return self._updated_at
