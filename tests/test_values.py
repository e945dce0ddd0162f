"""Tests for struct2json.values."""

from __future__ import annotations

from struct2json.values import ListValue, ObjectValue, StringValue, to_plain


def test_object_value_preserves_insertion_order() -> None:
    value = ObjectValue.of(("type", StringValue("map")), ("key", StringValue("string")))
    assert list(value.to_plain()) == ["type", "key"]
    assert "key" in value
    assert "value" not in value
    assert value.get("type") == StringValue("map")
    assert value.get("missing") is None


def test_with_entry_replaces_in_place() -> None:
    value = ObjectValue.of(("a", StringValue("1")), ("b", StringValue("2")))
    updated = value.with_entry("a", StringValue("3"))
    assert list(updated.to_plain()) == ["a", "b"]
    assert updated.get("a") == StringValue("3")
    # The original is untouched.
    assert value.get("a") == StringValue("1")


def test_merge_overrides_and_appends() -> None:
    left = ObjectValue.of(("a", StringValue("1")), ("b", StringValue("2")))
    right = ObjectValue.of(("b", StringValue("x")), ("c", StringValue("y")))
    merged = left.merge(right)
    assert merged.to_plain() == {"a": "1", "b": "x", "c": "y"}
    assert list(merged.to_plain()) == ["a", "b", "c"]


def test_to_plain_converts_nested_values() -> None:
    tree = ObjectValue.of(
        ("items", ListValue((StringValue("x"), ObjectValue.of(("star", StringValue("y")))))),
    )
    assert to_plain(tree) == {"items": ["x", {"star": "y"}]}
    assert to_plain("[]int") == "[]int"
    assert len(ListValue((StringValue("x"),))) == 1
