"""Map ``HttpFilterError`` to JSON client-error responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from ...exceptions import HttpFilterError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request


async def http_filter_error_handler(
    request: Request, exc: HttpFilterError
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Respond 400 with ``exc.to_dict()`` when filtering rejects a request."""
    app.add_exception_handler(HttpFilterError, http_filter_error_handler)
