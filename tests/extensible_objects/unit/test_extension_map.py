"""Extension map tests."""

from __future__ import annotations

from apidoc_model.extensible_objects.extension_map import ExtensionMap, ExtensionPolicy


def test_merge_overwrites_existing_keys_in_place_and_appends_new_ones() -> None:
    extensions = ExtensionMap([("a", 1)]).merged([("a", 2), ("b", 3)])

    assert list(extensions.items()) == [("a", 2), ("b", 3)]


def test_merge_returns_new_map_and_leaves_original_untouched() -> None:
    original = ExtensionMap({"x-one": 1})

    merged = original.merged({"x-two": 2})

    assert dict(original) == {"x-one": 1}
    assert list(merged) == ["x-one", "x-two"]


def test_equality_is_order_sensitive() -> None:
    forward = ExtensionMap([("x-a", 1), ("x-b", 2)])
    backward = ExtensionMap([("x-b", 2), ("x-a", 1)])

    assert forward != backward
    assert forward == ExtensionMap([("x-a", 1), ("x-b", 2)])
    assert forward == {"x-a": 1, "x-b": 2}
    assert {"x-a": 1, "x-b": 2} == forward


def test_first_conflict_reports_reserved_key() -> None:
    extensions = ExtensionMap([("x-id", "0"), ("name", "shadow")])

    assert extensions.first_conflict({"name", "description"}) == "name"
    assert extensions.first_conflict({"description"}) is None


def test_vendor_prefixed_policy_only_admits_x_keys() -> None:
    assert ExtensionPolicy.VENDOR_PREFIXED.admits("x-internal-id")
    assert not ExtensionPolicy.VENDOR_PREFIXED.admits("internal-id")
    assert ExtensionPolicy.KEEP_ALL.admits("internal-id")
