import pytest

from atriblog.selectors import (
    camel_to_kebab,
    compact_fields,
    extract_response_data,
    filter_fields,
    is_compact_scalar,
    unwrap_single_key_array,
)


def test_filter_fields_keeps_selected_keys():
    data = {"id": 1, "name": "a", "extra": 2}
    assert filter_fields(data, "id, name") == {"id": 1, "name": "a"}


def test_filter_fields_is_case_insensitive():
    assert filter_fields({"Name": "x", "other": 1}, "NAME") == {"Name": "x"}


def test_filter_fields_matches_kebab_selector_to_camel_key():
    data = {"orderDate": "d", "other": 1}
    assert filter_fields(data, "order-date") == {"orderDate": "d"}


def test_filter_fields_descends_into_arrays():
    data = {"events": [{"shortName": "a", "x": 1}, {"shortName": "b", "x": 2}], "y": 3}
    result = filter_fields(data, "events.shortName")
    assert result == {"events": [{"shortName": "a"}, {"shortName": "b"}]}


def test_filter_fields_top_level_array():
    data = [{"id": 1, "z": 0}, {"id": 2, "z": 0}]
    assert filter_fields(data, "id") == [{"id": 1}, {"id": 2}]


def test_filter_fields_envelope_fallback_keeps_metadata():
    data = {"total": 2, "items": [{"id": 1, "n": 2}, {"id": 2, "n": 3}]}
    assert filter_fields(data, "id") == {"total": 2, "items": [{"id": 1}, {"id": 2}]}


def test_filter_fields_flat_object_without_match_is_empty():
    assert filter_fields({"a": 1, "b": None}, "c") == {}


def test_filter_fields_null_is_not_an_envelope_array():
    assert filter_fields({"a": None, "b": "x"}, "c") == {}


def test_filter_fields_empty_selector_returns_input():
    data = {"a": 1}
    assert filter_fields(data, " , ") is data


def test_filter_fields_scalar_passes_through():
    assert filter_fields("plain", "a") == "plain"


def test_camel_to_kebab():
    assert camel_to_kebab("orderDate") == "order-date"
    assert camel_to_kebab("orderdate") == "orderdate"


def test_extract_response_data_unwraps_success():
    assert extract_response_data({"status": "success", "data": [1, 2]}) == [1, 2]
    assert extract_response_data({"status": "OK", "data": {"a": 1}}) == {"a": 1}


@pytest.mark.parametrize(
    "data",
    [
        {"status": "error", "data": [1]},
        {"data": [1], "has_more": True},
        {"status": "success"},
        {"status": 1, "data": [1]},
        [1, 2],
    ],
)
def test_extract_response_data_leaves_non_envelopes(data):
    assert extract_response_data(data) == data


@pytest.mark.parametrize("value", [None, True, 3, 2.5, "s"])
def test_is_compact_scalar_true(value):
    assert is_compact_scalar(value) is True


@pytest.mark.parametrize("value", [[], {}, [1], {"a": 1}])
def test_is_compact_scalar_false(value):
    assert is_compact_scalar(value) is False


def test_compact_list_drops_verbose_and_nested():
    items = [{"id": 1, "description": "long", "tags": ["a"]}]
    assert compact_fields(items) == [{"id": 1}]


def test_compact_list_keeps_frequent_novel_keys():
    items = [
        {"object_name": "a", "weird": {"x": 1}},
        {"object_name": "b", "weird": {}},
    ]
    assert compact_fields(items) == [{"object_name": "a"}, {"object_name": "b"}]


def test_compact_list_single_missing_row_does_not_veto():
    items = [{"id": 1, "snippet": "a"}, {"id": 2, "snippet": "b"}, {"id": 3}]
    assert compact_fields(items) == items


def test_compact_list_preserves_items_without_keep_keys():
    items = [{"x": {"a": 1}}]
    assert compact_fields(items) == items


def test_compact_object_strips_verbose_fields():
    obj = {"id": 1, "body": "b", "description": "d", "nested": {"a": 1}}
    assert compact_fields(obj) == {"id": 1, "nested": {"a": 1}}


def test_compact_scalar_passes_through():
    assert compact_fields(5) == 5


def test_unwrap_single_key_array():
    assert unwrap_single_key_array({"results": [1, 2]}) == [1, 2]
    assert unwrap_single_key_array({"entries": []}) == []


@pytest.mark.parametrize(
    "data",
    [
        {"results": [1], "next": None},
        {"other": [1]},
        {"data": {"a": 1}},
        [1],
    ],
)
def test_unwrap_single_key_array_leaves_others(data):
    assert unwrap_single_key_array(data) == data