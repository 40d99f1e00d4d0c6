"""Tests for the FilterContext façade."""

from __future__ import annotations

import pytest

from cqrs_ddd_http_filter import (
    FilterConfig,
    FilterContext,
    InvalidPropertyNameError,
    QueryPlan,
)
from cqrs_ddd_http_filter.values import Bounds, Scalar, ValueList


@pytest.fixture
def schema(make_schema):
    return make_schema(
        allowed_filters={"status", "created_at", "meta", "tags", "price"},
        allowed_sorts={"name", "price"},
    )


def test_end_to_end_example(schema, make_query) -> None:
    context = FilterContext.from_query_string(
        "filter[status]=active&filter[created_at][start]=2024-01-01&sort[]=-name"
    )
    query = make_query()
    assert context.build(query, schema) is query
    assert query.calls == [
        ("where_ilike", "status", "%active%"),
        ("where_date", "created_at", ">=", "2024-01-01"),
        ("order_by", "name", "desc"),
    ]


def test_filters_apply_before_sorts(schema, make_query) -> None:
    context = FilterContext({"sort": ["price"], "filter": {"price": "10"}})
    query = context.build(make_query(), schema)
    assert query.calls == [
        ("where", "price", "=", 10),
        ("order_by", "price", "asc"),
    ]


@pytest.mark.parametrize(
    "value", ["x", "a,b", {"min": "1"}, {"start": "2024-01-01"}, ["a"]]
)
def test_non_whitelisted_keys_are_ignored(schema, make_query, value) -> None:
    context = FilterContext({"filter": {"secret": value}, "sort": ["-secret"]})
    assert context.build(make_query(), schema).calls == []


def test_nested_path_uses_top_level_segment(schema, make_query) -> None:
    context = FilterContext({"filter": {"meta.color": "red", "other.color": "x"}})
    query = context.build(make_query(), schema)
    assert query.calls == [("where_ilike", "meta->color", "%red%")]


def test_invalid_name_aborts_without_touching_query(make_schema, make_query) -> None:
    schema = make_schema(allowed_filters={"status", "bad;name"})
    context = FilterContext({"filter": {"status": "ok", "bad;name": "x"}})
    query = make_query()
    with pytest.raises(InvalidPropertyNameError):
        context.build(query, schema)
    assert query.calls == []


def test_invalid_sort_aborts_without_touching_query(make_schema, make_query) -> None:
    schema = make_schema(allowed_filters={"status"}, allowed_sorts={"x y"})
    context = FilterContext({"filter": {"status": "ok"}, "sort": ["x y"]})
    query = make_query()
    with pytest.raises(InvalidPropertyNameError):
        context.build(query, schema)
    assert query.calls == []


def test_build_is_repeatable(schema, make_query) -> None:
    context = FilterContext({"filter": {"tags": "a,b"}, "sort": ["-price"]})
    first = context.build(make_query(), schema)
    second = context.build(make_query(), schema)
    assert first.calls == second.calls == [
        ("where_in", "tags", ("a", "b")),
        ("order_by", "price", "desc"),
    ]
    assert context.filters["tags"] == ValueList(("a", "b"))


def test_schema_defaults_to_query_schema(schema, make_query) -> None:
    context = FilterContext({"filter": {"status": "on"}})
    query = context.build(make_query(schema))
    assert query.calls == [("where_ilike", "status", "%on%")]


def test_build_without_schema_raises(make_query) -> None:
    with pytest.raises(TypeError):
        FilterContext().build(make_query())


def test_plan_does_not_need_a_query(schema) -> None:
    plan = FilterContext({"filter": {"status": "on"}, "sort": ["name"]}).plan(schema)
    assert isinstance(plan, QueryPlan)
    assert len(plan.predicates) == 1
    assert [c.property for c in plan.ordering] == ["name"]


def test_non_mapping_filter_param_is_ignored() -> None:
    context = FilterContext({"filter": "status:active"})
    assert dict(context.filters) == {}


def test_custom_request_keys(schema, make_query) -> None:
    config = FilterConfig(filter_key="f", sort_key="s")
    context = FilterContext({"f": {"status": "on"}, "s": ["name"]}, config=config)
    assert context.build(make_query(), schema).calls == [
        ("where_ilike", "status", "%on%"),
        ("order_by", "name", "asc"),
    ]


class TestSortHelpers:
    def test_is_sort_without_argument(self) -> None:
        assert FilterContext().is_sort()
        assert not FilterContext({"sort": ["-name"]}).is_sort()

    def test_is_sort_with_property(self) -> None:
        context = FilterContext({"sort": ["-name", "price"]})
        assert context.is_sort("name")
        assert context.is_sort("price")
        assert not context.is_sort("created_at")

    def test_get_sort(self) -> None:
        context = FilterContext({"sort": ["name", "-price"]})
        assert context.get_sort("name") == "asc"
        assert context.get_sort("price") == "desc"

    def test_get_sort_reports_desc_for_unsorted_property(self) -> None:
        # Absent and descending are indistinguishable here.
        assert FilterContext().get_sort("name") == "desc"
        assert FilterContext({"sort": ["-name"]}).get_sort("name") == "desc"

    def test_revert_sort(self) -> None:
        assert FilterContext({"sort": ["name"]}).revert_sort("name") == "-name"
        assert FilterContext({"sort": ["-name"]}).revert_sort("name") == "name"
        assert FilterContext().revert_sort("name") == "name"

    @pytest.mark.parametrize("sorts", [["name"], ["-name"], [], ["price"]])
    def test_revert_sort_toggles_direction(self, sorts) -> None:
        before = FilterContext({"sort": sorts})
        after = FilterContext({"sort": [before.revert_sort("name")]})
        assert after.get_sort("name") != before.get_sort("name")


class TestGetFilter:
    @pytest.fixture
    def context(self) -> FilterContext:
        return FilterContext(
            {
                "filter": {
                    "status": "active",
                    "created_at": {"start": "2024-01-01"},
                    "tags": "a,b",
                    "meta.color": "red",
                }
            }
        )

    def test_top_level_returns_raw_value(self, context) -> None:
        assert context.get_filter("status") == Scalar("active")
        assert isinstance(context.get_filter("created_at"), Bounds)

    def test_dotted_lookup(self, context) -> None:
        assert context.get_filter("created_at.start") == "2024-01-01"
        assert context.get_filter("tags.1") == "b"

    def test_literal_dotted_key(self, context) -> None:
        assert context.get_filter("meta.color") == Scalar("red")

    def test_missing_returns_default(self, context) -> None:
        assert context.get_filter("missing") is None
        assert context.get_filter("created_at.end", "n/a") == "n/a"
        assert context.get_filter("tags.5") is None
        assert context.get_filter("status.value") is None


def test_skipped_keys_are_logged(schema, make_query, caplog) -> None:
    caplog.set_level("DEBUG", logger="cqrs_ddd_http_filter")
    FilterContext({"filter": {"secret": "x"}}).build(make_query(), schema)
    assert "Skipping non-filterable property 'secret'" in caplog.text


def test_rejected_names_are_logged(make_schema, make_query, caplog) -> None:
    schema = make_schema(allowed_filters={"a b"})
    with pytest.raises(InvalidPropertyNameError):
        FilterContext({"filter": {"a b": "x"}}).build(make_query(), schema)
    assert any(r.levelname == "WARNING" for r in caplog.records)
