"""
Body Link Map

Helpers for the store page block that draws connector lines from list
cards to points on a body image.
"""

from __future__ import annotations

from typing import Any, Iterable

from solution_content.anchor_geometry import is_valid_body_anchor
from solution_content.anchor_points import LEGACY_MATCH_TOLERANCE, resolve_list_item_body_anchor
from solution_content.documents import BodyAnchorPoint

BODY_ANCHOR_SECTION_KEY = "essential-categories"


def _format_coordinate(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_body_linked_list(section_key: Any, items: Iterable[Any]) -> bool:
    """The body map is only used by the designated block, and only when an item has an anchor."""
    if section_key != BODY_ANCHOR_SECTION_KEY:
        return False
    return any(isinstance(item, dict) and is_valid_body_anchor(item.get("bodyAnchor")) for item in items)


def create_connector_path(start: BodyAnchorPoint, end: BodyAnchorPoint) -> str:
    """Straight SVG path from start to end."""
    return (
        f"M {_format_coordinate(start['x'])} {_format_coordinate(start['y'])} "
        f"L {_format_coordinate(end['x'])} {_format_coordinate(end['y'])}"
    )


def link_list_items(items: Any, tolerance: float = LEGACY_MATCH_TOLERANCE) -> list[dict]:
    """
    Items that can be drawn on the body map, with their resolved anchor.

    Each returned copy carries an itemKey built from its title and its
    position in the original list.
    """
    if not isinstance(items, list):
        return []

    linked: list[dict] = []
    for index, item in enumerate(items):
        resolved = resolve_list_item_body_anchor(item, tolerance)
        if resolved is None:
            continue
        title = item.get("title")
        linked.append(
            {
                **item,
                "itemKey": f"{title or 'item'}-{index}",
                "bodyAnchor": resolved,
            }
        )
    return linked
