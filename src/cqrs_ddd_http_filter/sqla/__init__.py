"""SQLAlchemy implementations of ``IQuery`` and ``IEntitySchema``."""

from __future__ import annotations

from .query import SQLAlchemyQuery
from .schema import SQLAlchemyEntitySchema

__all__ = [
    "SQLAlchemyEntitySchema",
    "SQLAlchemyQuery",
]
