"""
Body Anchor Editor Operations

Stateless helpers the admin section editor calls on every anchor
interaction. Each returns a new item dict; rejected input returns the
item untouched, so a list item never ends up with half an anchor.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from solution_content.anchor_geometry import clamp_body_anchor, is_valid_body_anchor
from solution_content.anchor_points import (
    get_body_anchor_point_by_key,
    get_default_body_anchor_key,
    is_valid_body_anchor_key,
)
from solution_content.body_link_map import BODY_ANCHOR_SECTION_KEY
from solution_content.documents import BodyAnchorPoint, SectionListItem

DEFAULT_BODY_ANCHOR: BodyAnchorPoint = {"x": 50, "y": 50}

ANCHOR_AXES = ("x", "y")

# Plain decimal or exponent notation; no digit separators, hex or inf/nan words
_AXIS_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_axis_value(value: Any) -> Optional[float]:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not _AXIS_NUMBER.fullmatch(trimmed):
        return None
    parsed = float(trimmed)
    if not math.isfinite(parsed):
        return None
    # keep whole numbers as ints so stored documents stay stable
    return int(parsed) if parsed.is_integer() else parsed


def _existing_anchor(item: SectionListItem) -> BodyAnchorPoint:
    anchor = item.get("bodyAnchor")
    if is_valid_body_anchor(anchor):
        return clamp_body_anchor(anchor)
    preset_point = get_body_anchor_point_by_key(item.get("bodyAnchorKey"))
    if preset_point is not None:
        return preset_point
    return dict(DEFAULT_BODY_ANCHOR)


def should_show_body_anchor_editor(section_key: Any) -> bool:
    return section_key == BODY_ANCHOR_SECTION_KEY


def toggle_list_item_body_anchor(item: SectionListItem, enabled: bool) -> SectionListItem:
    """Enable or disable the anchor; disabling always drops the key and the point."""
    if not enabled:
        next_item = dict(item)
        next_item.pop("bodyAnchor", None)
        next_item.pop("bodyAnchorKey", None)
        return next_item

    key = item.get("bodyAnchorKey")
    return {
        **item,
        "bodyAnchorKey": key if is_valid_body_anchor_key(key) else get_default_body_anchor_key(),
        "bodyAnchor": _existing_anchor(item),
    }


def update_list_item_body_anchor_key(item: SectionListItem, key: Any) -> SectionListItem:
    if not is_valid_body_anchor_key(key):
        return item
    return {**item, "bodyAnchorKey": key}


def update_list_item_body_anchor_value(
    item: SectionListItem,
    axis: str,
    raw_value: Any,
) -> SectionListItem:
    """
    Set one axis of the manual anchor from text typed into the editor.

    Unparseable or non-finite text and unknown axes leave the item as is.
    A chosen bodyAnchorKey is kept; it still wins when the item is resolved.
    """
    if axis not in ANCHOR_AXES:
        return item
    value = _parse_axis_value(raw_value)
    if value is None:
        return item

    current = _existing_anchor(item)
    next_anchor = clamp_body_anchor({**current, axis: value})
    return {**item, "bodyAnchor": next_anchor}
