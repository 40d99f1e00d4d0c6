"""FastAPI integration: request dependency and error handlers."""

from __future__ import annotations

from .dependencies import filter_context_dependency, get_filter_context
from .handlers import register_exception_handlers

__all__ = [
    "filter_context_dependency",
    "get_filter_context",
    "register_exception_handlers",
]
