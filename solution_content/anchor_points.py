"""
Body Anchor Points

Named body locations for the essential-categories body map, and the
resolver that turns a list item into the point a marker is drawn at.

Items written before named keys existed only carry a raw coordinate.
When that coordinate sits on one of the historical preset positions it
is upgraded to the current position of the matching key, so tuning a
preset moves old markers with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from solution_content.anchor_geometry import clamp_body_anchor, is_valid_body_anchor
from solution_content.documents import BodyAnchorPoint

logger = logging.getLogger(__name__)

LEGACY_MATCH_TOLERANCE = 0.5
DEFAULT_BODY_ANCHOR_KEY = "chest"


@dataclass(frozen=True)
class BodyAnchorPreset:
    key: str
    label: str
    x: float
    y: float

    @property
    def point(self) -> BodyAnchorPoint:
        return {"x": self.x, "y": self.y}


BODY_ANCHOR_POINTS: tuple[BodyAnchorPreset, ...] = (
    BodyAnchorPreset("head", "Head", 50, 9),
    BodyAnchorPreset("eyes", "Eyes", 55, 14),
    BodyAnchorPreset("ears", "Ears", 54, 22),
    BodyAnchorPreset("mouth", "Mouth", 53, 18),
    BodyAnchorPreset("chest", "Chest", 30, 52),
    BodyAnchorPreset("left-hand", "Left Hand", 50, 42),
    BodyAnchorPreset("waist", "Waist", 60, 48),
    BodyAnchorPreset("feet", "Feet", 40, 93),
)

BODY_ANCHOR_KEYS: tuple[str, ...] = tuple(preset.key for preset in BODY_ANCHOR_POINTS)

_BODY_ANCHOR_MAP = {preset.key: preset for preset in BODY_ANCHOR_POINTS}

# Raw coordinates the editor used to write for each preset.
LEGACY_PRESET_COORDINATES: tuple[tuple[str, BodyAnchorPoint], ...] = (
    ("head", {"x": 50, "y": 9}),
    ("eyes", {"x": 50, "y": 18}),
    ("chest", {"x": 50, "y": 35}),
    ("left-hand", {"x": 39, "y": 47}),
    ("waist", {"x": 50, "y": 53}),
    ("feet", {"x": 50, "y": 90}),
)


def is_valid_body_anchor_key(key: Any) -> bool:
    """The only check used for keys coming from stored or user input."""
    return isinstance(key, str) and key in _BODY_ANCHOR_MAP


def get_body_anchor_point_by_key(key: Any) -> Optional[BodyAnchorPoint]:
    if not is_valid_body_anchor_key(key):
        return None
    return clamp_body_anchor(_BODY_ANCHOR_MAP[key].point)


def get_default_body_anchor_key() -> str:
    return DEFAULT_BODY_ANCHOR_KEY


def _is_same_point(a: BodyAnchorPoint, b: BodyAnchorPoint, tolerance: float) -> bool:
    return abs(a["x"] - b["x"]) <= tolerance and abs(a["y"] - b["y"]) <= tolerance


def infer_legacy_anchor_key(
    anchor: BodyAnchorPoint,
    tolerance: float = LEGACY_MATCH_TOLERANCE,
) -> Optional[str]:
    """Key whose historical coordinate matches anchor, first match in table order."""
    for key, point in LEGACY_PRESET_COORDINATES:
        if _is_same_point(point, anchor, tolerance):
            return key
    return None


def resolve_list_item_body_anchor(
    item: Any,
    tolerance: float = LEGACY_MATCH_TOLERANCE,
) -> Optional[BodyAnchorPoint]:
    """
    Resolve the display point of a content-list item.

    Order:
    1. a valid bodyAnchorKey -> that key's current point
    2. a valid bodyAnchor -> clamped; upgraded to the current preset point
       when it matches a historical preset coordinate
    3. otherwise None (item is not drawn on the body map)
    """
    if not isinstance(item, dict):
        return None

    preset_point = get_body_anchor_point_by_key(item.get("bodyAnchorKey"))
    if preset_point is not None:
        return preset_point

    raw_anchor = item.get("bodyAnchor")
    if not is_valid_body_anchor(raw_anchor):
        return None

    normalized = clamp_body_anchor(raw_anchor)
    legacy_key = infer_legacy_anchor_key(normalized, tolerance)
    if legacy_key is not None:
        logger.debug(
            f"Upgrading legacy anchor ({normalized['x']}, {normalized['y']}) to preset '{legacy_key}'"
        )
        return get_body_anchor_point_by_key(legacy_key)
    return normalized
