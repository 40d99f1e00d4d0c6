"""FilterConfig: request keys and separators."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterConfig:
    """
    Immutable configuration shared by the parser, planner and context.

    Attributes:
        filter_key: Request namespace holding filters (``filter[...]``).
        sort_key: Request namespace holding sort directives (``sort[]``).
        list_delimiter: Splits scalar filter values into lists.
        path_separator: Nesting separator used in request paths.
        storage_separator: Nesting separator understood by the query layer.
        descending_prefix: Marks a descending sort directive.
    """

    filter_key: str = "filter"
    sort_key: str = "sort"
    list_delimiter: str = ","
    path_separator: str = "."
    storage_separator: str = "->"
    descending_prefix: str = "-"

    def to_storage_path(self, path: str) -> str:
        """Translate request nesting (``a.b``) to storage nesting (``a->b``)."""
        return path.replace(self.path_separator, self.storage_separator)


DEFAULT_CONFIG = FilterConfig()
