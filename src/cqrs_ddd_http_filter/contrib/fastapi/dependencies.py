"""FastAPI dependencies building a ``FilterContext`` per request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from ...context import FilterContext

if TYPE_CHECKING:
    from collections.abc import Callable

    from ...config import FilterConfig


def get_filter_context(request: Request) -> FilterContext:
    """Decode ``filter[...]`` / ``sort[]`` from the query string.

    Example:
        ```python
        from fastapi import Depends

        @router.get("/articles")
        def list_articles(
            filters: FilterContext = Depends(get_filter_context),
            session: Session = Depends(get_session),
        ):
            query = filters.build(SQLAlchemyQuery(Article))
            return session.scalars(query.stmt).all()
        ```
    """
    return FilterContext.from_query_string(request.query_params.multi_items())


def filter_context_dependency(
    config: FilterConfig,
) -> Callable[[Request], FilterContext]:
    """Like ``get_filter_context`` but with custom request keys/separators."""

    def dependency(request: Request) -> FilterContext:
        return FilterContext.from_query_string(
            request.query_params.multi_items(), config=config
        )

    return dependency
