from __future__ import annotations

import json

import pytest

from json_node_editor.accessors import get_value_at_path, set_value_at_path, update_json_at_path
from json_node_editor.errors import ParseError, UpdateFailure
from json_node_editor.nodes import list_node_paths


def test_root_update_replaces_the_document():
    assert update_json_at_path('{"a": 1}', [], [1, 2]) == "[\n  1,\n  2\n]"
    assert json.loads(update_json_at_path('{"a": 1}', None, {"b": 2})) == {"b": 2}


def test_root_round_trip(users_document):
    data = json.loads(users_document)
    assert json.loads(update_json_at_path(users_document, [], data)) == data


def test_noop_update_at_every_path(users_document):
    data = json.loads(users_document)
    for path in list_node_paths(data):
        current = get_value_at_path(data, path)
        assert json.loads(update_json_at_path(users_document, list(path), current)) == data


def test_replaces_leaf_value(users_document):
    out = json.loads(update_json_at_path(users_document, ["users", 1, "name"], "Robert"))
    assert out["users"][1]["name"] == "Robert"
    assert out["users"][0]["name"] == "Ann"


def test_replaces_containers_without_merging(users_document):
    out = json.loads(update_json_at_path(users_document, ["meta"], {"version": 4}))
    assert out["meta"] == {"version": 4}
    out = json.loads(update_json_at_path(users_document, ["users", 0, "tags"], ["x"]))
    assert out["users"][0]["tags"] == ["x"]


def test_auto_vivifies_array_for_index_segment():
    assert json.loads(update_json_at_path("{}", ["a", 0], "x")) == {"a": ["x"]}


def test_auto_vivifies_object_for_key_segment():
    assert json.loads(update_json_at_path("{}", ["a", "b", "c"], 1)) == {"a": {"b": {"c": 1}}}


def test_scalar_in_the_way_is_overwritten_by_container():
    assert json.loads(update_json_at_path('{"a": 1}', ["a", "b"], 2)) == {"a": {"b": 2}}
    assert json.loads(update_json_at_path('{"a": null}', ["a", 0], 2)) == {"a": [2]}


def test_key_segment_through_nested_list_fails():
    with pytest.raises(UpdateFailure):
        update_json_at_path('{"a": [1, 2, 3]}', ["a", "k", "z"], 2)


def test_index_past_the_end_pads_with_null():
    assert json.loads(update_json_at_path('{"a": [1]}', ["a", 1], 2)) == {"a": [1, 2]}
    assert json.loads(update_json_at_path('{"a": []}', ["a", 2], "z")) == {"a": [None, None, "z"]}


def test_index_segment_on_object_uses_string_key():
    assert json.loads(update_json_at_path('{"0": "old"}', [0], "new")) == {"0": "new"}


def test_adds_new_key_preserving_order():
    out = json.loads(update_json_at_path('{"b": 1, "a": 2}', ["c"], 3))
    assert list(out) == ["b", "a", "c"]


def test_invalid_document_raises_parse_error():
    with pytest.raises(ParseError) as info:
        update_json_at_path("not json", [], 1)
    assert info.value.line == 1
    assert info.value.column == 1


def test_scalar_root_cannot_be_descended():
    with pytest.raises(UpdateFailure):
        update_json_at_path("5", ["a"], 1)


def test_key_on_list_root_fails():
    with pytest.raises(UpdateFailure):
        update_json_at_path("[1, 2]", ["a"], 1)


def test_negative_index_fails():
    with pytest.raises(UpdateFailure):
        update_json_at_path('{"a": [1]}', ["a", -1], 1)


def test_output_uses_two_space_indent():
    assert update_json_at_path("{}", ["a"], 1) == '{\n  "a": 1\n}'


def test_set_value_mutates_in_place():
    data = {"a": {}}
    assert set_value_at_path(data, ["a", "b"], 1) is data
    assert data == {"a": {"b": 1}}


def test_get_value_at_path(users_document):
    data = json.loads(users_document)
    assert get_value_at_path(data, None) is data
    assert get_value_at_path(data, ["users", 2, "active"]) is True
    with pytest.raises(KeyError):
        get_value_at_path(data, ["missing"])
    with pytest.raises(IndexError):
        get_value_at_path(data, ["users", 9])
    with pytest.raises(TypeError):
        get_value_at_path(data, ["meta", "version", "x"])


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"a": NaN}', "[1, Infinity]"])
def test_non_json_constants_raise_parse_error(text):
    with pytest.raises(ParseError):
        update_json_at_path(text, [], 1)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_json_float_value_is_update_failure(value):
    with pytest.raises(UpdateFailure) as info:
        update_json_at_path('{"a": 1}', ["a"], value)
    assert isinstance(info.value.__cause__, ValueError)


def test_unserializable_value_is_update_failure_with_cause():
    with pytest.raises(UpdateFailure) as info:
        update_json_at_path("{}", ["a"], object())
    assert isinstance(info.value.__cause__, TypeError)


def test_update_failure_is_logged(caplog):
    with caplog.at_level("ERROR", logger="json_node_editor.accessors"):
        with pytest.raises(UpdateFailure):
            update_json_at_path("{}", ["a", "b"], {1j})
    assert "Failed to update JSON at path" in caplog.text
    assert '$["a"]["b"]' in caplog.text
