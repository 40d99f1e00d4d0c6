"""ParamParser: raw request values -> FilterSpec + ordered sort directives."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .config import DEFAULT_CONFIG, FilterConfig
from .values import Bounds, FilterSpec, RawValue, Scalar, ValueList


class ParamParser:
    """Normalise value shapes only; nothing is validated here."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def parse(
        self,
        raw_filters: Mapping[str, Any] | None,
        raw_sorts: Any = None,
    ) -> tuple[FilterSpec, tuple[str, ...]]:
        """Return (filter_spec, sort_directives)."""
        filters = {
            str(prop): self.parse_value(value)
            for prop, value in (raw_filters or {}).items()
        }
        return MappingProxyType(filters), self.parse_sorts(raw_sorts)

    def parse_value(self, raw: Any) -> RawValue:
        if isinstance(raw, Scalar | ValueList | Bounds):
            return raw
        if isinstance(raw, str):
            parts = raw.split(self._config.list_delimiter)
            if len(parts) > 1:
                return ValueList(tuple(parts))
            return Scalar(raw)
        if isinstance(raw, Mapping):
            return Bounds(raw)
        if isinstance(raw, list | tuple):
            return ValueList(tuple(raw))
        return Scalar(raw)

    def parse_sorts(self, raw: Any) -> tuple[str, ...]:
        if not raw:
            return ()
        if isinstance(raw, str):
            return (raw,)
        if isinstance(raw, list | tuple):
            return tuple(item for item in raw if isinstance(item, str))
        return ()
