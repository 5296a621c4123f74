"""
Anchor Geometry

Shape checks and clamping for raw body-map coordinates. Coordinates are
percentages of the reference image, so every axis lives in [0, 100].
"""

from __future__ import annotations

import math
from typing import Any

from solution_content.documents import BodyAnchorPoint

MIN_ANCHOR = 0
MAX_ANCHOR = 100


def _clamp(value: float) -> float:
    return max(MIN_ANCHOR, min(MAX_ANCHOR, value))


def _is_finite_number(value: Any) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_body_anchor(anchor: Any) -> bool:
    """Structural check only: a mapping with finite numeric x and y."""
    if not isinstance(anchor, dict):
        return False
    return _is_finite_number(anchor.get("x")) and _is_finite_number(anchor.get("y"))


def clamp_body_anchor(anchor: BodyAnchorPoint) -> BodyAnchorPoint:
    return {
        "x": _clamp(anchor["x"]),
        "y": _clamp(anchor["y"]),
    }
