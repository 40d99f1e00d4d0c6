from enum import Enum


class ComparisonOperator(str, Enum):
    """Comparisons the core is allowed to hand to a query."""

    EQ = "="
    GE = ">="
    LE = "<="


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
