"""Tests for the property name grammar."""

from __future__ import annotations

import pytest

from cqrs_ddd_http_filter import InvalidPropertyNameError, sanitize
from cqrs_ddd_http_filter.sanitizer import is_valid_property_name


@pytest.mark.parametrize(
    "path",
    [
        "name",
        "created_at",
        "_private",
        "a1",
        "meta->color",
        "meta->tags->0",
        "Status",
        "a-b",
    ],
)
def test_valid_paths_are_returned_unchanged(path: str) -> None:
    assert sanitize(path) == path
    assert is_valid_property_name(path)


@pytest.mark.parametrize(
    "path",
    [
        "1name",
        "9",
        "name;drop table users",
        "name ",
        "name\n",
        "meta.color",
        "na'me",
        "name)",
        "näme",
        "a/*b*/",
    ],
)
def test_invalid_paths_raise(path: str) -> None:
    with pytest.raises(InvalidPropertyNameError) as exc_info:
        sanitize(path)
    assert exc_info.value.property == path


def test_non_string_is_invalid() -> None:
    assert not is_valid_property_name(None)  # type: ignore[arg-type]
