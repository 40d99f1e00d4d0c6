"""SortPlanner: ``[-]path`` directives -> ordered ``OrderingClause`` list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import DEFAULT_CONFIG, FilterConfig
from .operators import SortDirection
from .predicates import OrderingClause
from .sanitizer import sanitize
from .whitelist import is_sortable, top_level_segment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .whitelist import FilterOptions

logger = logging.getLogger(__name__)


class SortPlanner:
    """Plan ordering clauses, keeping left-to-right precedence."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def parse_directive(self, directive: str) -> tuple[str, SortDirection]:
        """Split ``-price`` into ``("price", DESC)``."""
        prefix = self._config.descending_prefix
        if directive.startswith(prefix):
            return directive.lstrip(prefix), SortDirection.DESC
        return directive, SortDirection.ASC

    def plan(
        self, options: FilterOptions, directives: Iterable[str]
    ) -> list[OrderingClause]:
        clauses: list[OrderingClause] = []
        for directive in directives:
            path, direction = self.parse_directive(directive)
            segment = top_level_segment(path, self._config.path_separator)
            if not is_sortable(options, segment):
                logger.debug("Skipping non-sortable directive %r", directive)
                continue
            storage_path = sanitize(self._config.to_storage_path(path))
            clauses.append(OrderingClause(storage_path, direction))
        return clauses
