"""Property path grammar check, the single injection checkpoint."""

from __future__ import annotations

import logging
import re

from .exceptions import InvalidPropertyNameError

logger = logging.getLogger(__name__)

# Alphanumerics, underscores and the ``->`` nesting marker; no leading digit.
_VALID_PROPERTY_NAME = re.compile(r"(?!\d)[A-Za-z0-9_>-]*", re.ASCII)


def is_valid_property_name(path: str) -> bool:
    return isinstance(path, str) and _VALID_PROPERTY_NAME.fullmatch(path) is not None


def sanitize(path: str) -> str:
    """Return ``path`` unchanged, or raise ``InvalidPropertyNameError``.

    Must run on every filter and sort path right before it reaches a query.
    """
    if not is_valid_property_name(path):
        logger.warning("Rejected property name %r", path)
        raise InvalidPropertyNameError(path)
    return path
