"""Property type classification from entity metadata."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from .query import IEntitySchema

DATE_CASTS = frozenset({"date", "datetime", "immutable_date", "immutable_datetime"})
BOOLEAN_CASTS = frozenset({"bool", "boolean"})
STRING_CASTS = frozenset({"string"})
NUMERIC_CASTS = frozenset({"int", "integer", "float", "double", "real", "decimal"})


class PropertyType(str, Enum):
    TEMPORAL = "temporal"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMERIC = "numeric"
    UNKNOWN = "unknown"


class PropertyInfo(NamedTuple):
    type: PropertyType
    is_timestamp: bool


def is_timestamp_column(schema: IEntitySchema, property: str) -> bool:
    """True for the entity's created/updated timestamp columns."""
    columns = {schema.created_at_column(), schema.updated_at_column()}
    columns.discard(None)
    return property in columns


def property_type(schema: IEntitySchema, property: str) -> PropertyInfo:
    """Classify ``property``; date casts win over everything else."""
    is_timestamp = is_timestamp_column(schema, property)
    if is_timestamp or schema.has_cast(property, DATE_CASTS):
        kind = PropertyType.TEMPORAL
    elif schema.has_cast(property, BOOLEAN_CASTS):
        kind = PropertyType.BOOLEAN
    elif schema.has_cast(property, STRING_CASTS):
        kind = PropertyType.STRING
    elif schema.has_cast(property, NUMERIC_CASTS):
        kind = PropertyType.NUMERIC
    else:
        kind = PropertyType.UNKNOWN
    return PropertyInfo(kind, is_timestamp)
