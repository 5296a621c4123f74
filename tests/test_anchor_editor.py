import copy

import pytest

from solution_content.anchor_editor import (
    should_show_body_anchor_editor,
    toggle_list_item_body_anchor,
    update_list_item_body_anchor_key,
    update_list_item_body_anchor_value,
)
from solution_content.anchor_points import get_body_anchor_point_by_key


def test_should_show_body_anchor_editor_only_enables_for_essential_categories():
    assert should_show_body_anchor_editor("essential-categories") is True
    assert should_show_body_anchor_editor("recommended-ppe") is False
    assert should_show_body_anchor_editor("") is False
    assert should_show_body_anchor_editor(None) is False


def test_toggle_enables_and_disables_anchor_cleanly():
    base_item = {"title": "Helmet", "text": "Head protection"}

    enabled = toggle_list_item_body_anchor(base_item, True)
    assert enabled["bodyAnchorKey"] == "chest"
    assert enabled["bodyAnchor"] == {"x": 50, "y": 50}
    assert enabled["title"] == "Helmet"
    assert "bodyAnchor" not in base_item

    disabled = toggle_list_item_body_anchor({**base_item, "bodyAnchor": {"x": 40, "y": 20}}, False)
    assert "bodyAnchor" not in disabled
    assert "bodyAnchorKey" not in disabled
    assert disabled == base_item


def test_toggle_disable_drops_key_and_point_together():
    item = {"title": "Goggles", "bodyAnchorKey": "eyes", "bodyAnchor": {"x": 55, "y": 14}}
    snapshot = copy.deepcopy(item)

    disabled = toggle_list_item_body_anchor(item, False)

    assert disabled == {"title": "Goggles"}
    assert item == snapshot


def test_toggle_enable_keeps_existing_valid_values():
    item = {"title": "Boots", "bodyAnchorKey": "feet", "bodyAnchor": {"x": 120, "y": 90}}

    enabled = toggle_list_item_body_anchor(item, True)

    assert enabled["bodyAnchorKey"] == "feet"
    assert enabled["bodyAnchor"] == {"x": 100, "y": 90}


def test_toggle_enable_uses_key_point_when_only_key_is_stored():
    enabled = toggle_list_item_body_anchor({"title": "Earmuffs", "bodyAnchorKey": "ears"}, True)

    assert enabled["bodyAnchorKey"] == "ears"
    assert enabled["bodyAnchor"] == get_body_anchor_point_by_key("ears")


def test_toggle_enable_replaces_invalid_values():
    enabled = toggle_list_item_body_anchor(
        {"title": "Vest", "bodyAnchorKey": "elbow", "bodyAnchor": {"x": "a", "y": 1}},
        True,
    )

    assert enabled["bodyAnchorKey"] == "chest"
    assert enabled["bodyAnchor"] == {"x": 50, "y": 50}


def test_update_key_only_accepts_preset_key():
    item = {"title": "Helmet", "bodyAnchorKey": "head"}

    updated = update_list_item_body_anchor_key(item, "eyes")
    assert updated["bodyAnchorKey"] == "eyes"
    assert item["bodyAnchorKey"] == "head"

    unchanged = update_list_item_body_anchor_key(item, "random-key")
    assert unchanged is item
    assert unchanged["bodyAnchorKey"] == "head"

    assert update_list_item_body_anchor_key(item, None) is item


def test_update_value_updates_target_axis_and_keeps_sibling_value():
    item = {"title": "Boots", "bodyAnchor": {"x": 50, "y": 90}}

    assert update_list_item_body_anchor_value(item, "x", "33.4")["bodyAnchor"] == {"x": 33.4, "y": 90}
    assert update_list_item_body_anchor_value(item, "y", "12")["bodyAnchor"] == {"x": 50, "y": 12}
    assert item["bodyAnchor"] == {"x": 50, "y": 90}


def test_update_value_clamps_numbers_and_ignores_invalid_input():
    item = {"title": "Gloves", "bodyAnchor": {"x": 39, "y": 47}}

    assert update_list_item_body_anchor_value(item, "x", "120")["bodyAnchor"] == {"x": 100, "y": 47}
    assert update_list_item_body_anchor_value(item, "y", " -5 ")["bodyAnchor"] == {"x": 39, "y": 0}

    unchanged = update_list_item_body_anchor_value(item, "x", "abc")
    assert unchanged is item
    assert unchanged["bodyAnchor"] == {"x": 39, "y": 47}


@pytest.mark.parametrize("raw_value", ["", "   ", "abc", "nan", "inf", "-Infinity", "1e999", None])
def test_update_value_rejects_unparseable_or_non_finite_text(raw_value):
    item = {"title": "Mask", "bodyAnchor": {"x": 53, "y": 18}}
    assert update_list_item_body_anchor_value(item, "x", raw_value) is item


def test_update_value_rejects_unknown_axis():
    item = {"title": "Mask", "bodyAnchor": {"x": 53, "y": 18}}
    assert update_list_item_body_anchor_value(item, "z", "10") is item


def test_update_value_starts_from_default_point_and_keeps_key():
    fresh = update_list_item_body_anchor_value({"title": "Vest"}, "y", "30")
    assert fresh["bodyAnchor"] == {"x": 50, "y": 30}

    keyed = update_list_item_body_anchor_value({"title": "Helmet", "bodyAnchorKey": "head"}, "x", "20")
    assert keyed["bodyAnchorKey"] == "head"
    assert keyed["bodyAnchor"] == {"x": 20, "y": 9}


@pytest.mark.parametrize("raw_value", ["5_0", "0x10", "1,5", "5 0", "12px", "1e"])
def test_update_value_rejects_non_decimal_number_forms(raw_value):
    item = {"title": "Gloves", "bodyAnchor": {"x": 1, "y": 1}}
    assert update_list_item_body_anchor_value(item, "x", raw_value) is item


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [(".5", 0.5), ("+7", 7), ("1e1", 10), ("42.", 42), ("-0.25", 0)],
)
def test_update_value_accepts_plain_decimal_and_exponent_forms(raw_value, expected):
    item = {"title": "Gloves", "bodyAnchor": {"x": 1, "y": 1}}
    assert update_list_item_body_anchor_value(item, "x", raw_value)["bodyAnchor"] == {"x": expected, "y": 1}
