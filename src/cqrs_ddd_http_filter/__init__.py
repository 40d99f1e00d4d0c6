"""HTTP filter and sort parameters -> whitelisted, sanitized query predicates."""

from __future__ import annotations

from .config import DEFAULT_CONFIG, FilterConfig
from .context import FilterContext, QueryPlan
from .exceptions import HttpFilterError, InvalidPropertyNameError, UnknownPropertyError
from .operators import ComparisonOperator, SortDirection
from .parser import ParamParser
from .predicates import (
    BooleanEquals,
    DateRangeInclusive,
    ExactMatch,
    MembershipIn,
    NumericEquals,
    OrderingClause,
    Predicate,
    RangeInclusive,
    SubstringMatch,
)
from .query import IEntitySchema, IQuery
from .query_string import QueryStringBuilder, parse_query_string
from .sanitizer import is_valid_property_name, sanitize
from .schema import PropertyInfo, PropertyType, property_type
from .selector import PredicateSelector
from .sorting import SortPlanner
from .values import Bounds, FilterSpec, RawValue, Scalar, ValueList
from .whitelist import FilterOptions, is_filterable, is_sortable, top_level_segment

__all__ = [
    "DEFAULT_CONFIG",
    "BooleanEquals",
    "Bounds",
    "ComparisonOperator",
    "DateRangeInclusive",
    "ExactMatch",
    "FilterConfig",
    "FilterContext",
    "FilterOptions",
    "FilterSpec",
    "HttpFilterError",
    "IEntitySchema",
    "IQuery",
    "InvalidPropertyNameError",
    "MembershipIn",
    "NumericEquals",
    "OrderingClause",
    "ParamParser",
    "Predicate",
    "PredicateSelector",
    "PropertyInfo",
    "PropertyType",
    "QueryPlan",
    "QueryStringBuilder",
    "RangeInclusive",
    "RawValue",
    "Scalar",
    "SortDirection",
    "SortPlanner",
    "SubstringMatch",
    "UnknownPropertyError",
    "ValueList",
    "is_filterable",
    "is_sortable",
    "is_valid_property_name",
    "parse_query_string",
    "property_type",
    "sanitize",
    "top_level_segment",
]
