"""FilterOptions and the top-level segment allow-list checks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PATH_SEPARATOR = "."


class FilterOptions(BaseModel):
    """Per-entity filterable and sortable property names.

    Membership is exact and case-sensitive; only the top-level segment of a
    property path (``meta`` in ``meta.color``) is checked.
    """

    model_config = ConfigDict(frozen=True)

    allowed_filters: frozenset[str] = Field(default_factory=frozenset)
    allowed_sorts: frozenset[str] = Field(default_factory=frozenset)


def top_level_segment(path: str, separator: str = PATH_SEPARATOR) -> str:
    """Return the part of ``path`` before the first separator."""
    head, _, _ = path.partition(separator)
    return head


def is_filterable(options: FilterOptions, segment: str) -> bool:
    return segment in options.allowed_filters


def is_sortable(options: FilterOptions, segment: str) -> bool:
    return segment in options.allowed_sorts
