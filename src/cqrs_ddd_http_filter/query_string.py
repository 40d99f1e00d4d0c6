"""
Bracket query strings <-> ``RequestParams``.

``parse_query_string`` decodes ``filter[price][min]=10&sort[]=-name`` into
``{"filter": {"price": {"min": "10"}}, "sort": ["-name"]}``;
``QueryStringBuilder`` renders parsed filters and sorts back (sort links).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, urlencode

from .config import DEFAULT_CONFIG, FilterConfig
from .values import Bounds, Scalar, ValueList

if TYPE_CHECKING:
    from .context import FilterContext

_KEY = re.compile(r"([^\[\]]+)((?:\[[^\[\]]*\])*)")
_SUBKEY = re.compile(r"\[([^\[\]]*)\]")

# Bracket levels beyond this drop the whole pair.
MAX_NESTING_DEPTH = 64


def split_key(key: str) -> list[str]:
    """``filter[price][min]`` -> ``["filter", "price", "min"]``; ``[]`` -> ``""``."""
    match = _KEY.fullmatch(key)
    if match is None:
        return [key]
    head, rest = match.groups()
    return [head, *_SUBKEY.findall(rest)]


def parse_query_string(
    query: str | Iterable[tuple[str, str]], *, max_depth: int = MAX_NESTING_DEPTH
) -> dict[str, Any]:
    """Decode bracket notation into nested dicts and lists.

    Repeated ``key[]`` values accumulate in order; for plain keys the last
    value wins. Sub-maps whose keys are exactly ``0..n-1`` become lists.
    Pairs with more than ``max_depth`` bracket levels are ignored.
    """
    pairs = (
        parse_qsl(query, keep_blank_values=True) if isinstance(query, str) else query
    )
    root: dict[Any, Any] = {}
    for key, value in pairs:
        parts = split_key(key)
        if len(parts) - 1 > max_depth:
            continue
        _insert(root, parts, value)
    result = _finalize(root)
    return result if isinstance(result, dict) else {}


def _insert(node: dict[Any, Any], parts: list[str], value: Any) -> None:
    key: Any = parts[0]
    rest = parts[1:]
    if key == "":
        key = _next_index(node)
    elif key.isdigit():
        key = int(key)
    if not rest:
        node[key] = value
        return
    child = node.get(key)
    if not isinstance(child, dict):
        child = {}
        node[key] = child
    _insert(child, rest, value)


def _next_index(node: dict[Any, Any]) -> int:
    indexes = [k for k in node if isinstance(k, int)]
    return max(indexes) + 1 if indexes else 0


def _finalize(node: Any) -> Any:
    if not isinstance(node, dict):
        return node
    items = {k: _finalize(v) for k, v in node.items()}
    if items and all(isinstance(k, int) for k in items):
        if sorted(items) == list(range(len(items))):
            return [items[i] for i in range(len(items))]
    return {str(k): v for k, v in items.items()}


class QueryStringBuilder:
    """Render filters and sort directives as a bracket query string."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def build(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        sorts: Iterable[str] = (),
    ) -> str:
        params: list[tuple[str, str]] = []
        for prop, value in (filters or {}).items():
            key = f"{self._config.filter_key}[{prop}]"
            params.extend(self._filter_pairs(key, value))
        params.extend((f"{self._config.sort_key}[]", sort) for sort in sorts)
        return urlencode(params) if params else ""

    def sort_link(self, context: FilterContext, property: str) -> str:
        """Query string keeping the filters and toggling the sort on ``property``."""
        return self.build(
            filters=context.filters, sorts=[context.revert_sort(property)]
        )

    def _filter_pairs(self, key: str, value: Any) -> list[tuple[str, str]]:
        if isinstance(value, Scalar):
            return [(key, _to_text(value.value))]
        if isinstance(value, ValueList):
            return [(key, self._config.list_delimiter.join(map(_to_text, value)))]
        if isinstance(value, Bounds):
            value = value.entries
        if isinstance(value, Mapping):
            pairs: list[tuple[str, str]] = []
            for sub, item in value.items():
                pairs.extend(self._filter_pairs(f"{key}[{sub}]", item))
            return pairs
        if isinstance(value, list | tuple):
            return [(f"{key}[]", _to_text(item)) for item in value]
        return [(key, _to_text(value))]


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
