"""
Usage Scenes

Fixed, ordered taxonomy of work situations a solution page can describe.
The order of USAGE_SCENES is the canonical card order everywhere.
"""

from __future__ import annotations

from typing import Any


USAGE_SCENES: tuple[str, ...] = (
    "construction",
    "height-work",
    "steel-work",
    "falling-objects",
    "fall-protection",
    "heavy-duty",
    "impact-resistant",
    "slip-resistant",
    "cut-resistant",
    "eye-protection",
    "dusty-work",
    "wet-ground",
)

_USAGE_SCENE_SET = frozenset(USAGE_SCENES)

INDUSTRY_TO_USAGE_SCENES: dict[str, tuple[str, ...]] = {
    "CONSTRUCTION": (
        "construction",
        "height-work",
        "steel-work",
        "falling-objects",
        "fall-protection",
        "heavy-duty",
        "impact-resistant",
        "slip-resistant",
    ),
    "FACTORY": (
        "heavy-duty",
        "impact-resistant",
        "cut-resistant",
        "eye-protection",
        "steel-work",
    ),
    "MINING": (
        "heavy-duty",
        "dusty-work",
        "impact-resistant",
        "slip-resistant",
    ),
    "ELECTRICAL": (
        "eye-protection",
        "cut-resistant",
        "impact-resistant",
    ),
    "WAREHOUSE": (
        "heavy-duty",
        "slip-resistant",
        "impact-resistant",
    ),
    "CHEMICAL": (
        "eye-protection",
        "cut-resistant",
        "impact-resistant",
        "dusty-work",
    ),
    "FOOD_PROCESSING": (
        "wet-ground",
        "slip-resistant",
        "cut-resistant",
        "eye-protection",
    ),
    "LOGISTICS": (
        "heavy-duty",
        "slip-resistant",
        "impact-resistant",
    ),
}


def is_usage_scene(value: Any) -> bool:
    """Return True when value is one of the fixed scene codes."""
    return isinstance(value, str) and value in _USAGE_SCENE_SET


def format_usage_scene_label(scene: str) -> str:
    """Turn a scene code into its display label ("height-work" -> "Height Work")."""
    return " ".join(
        segment[0].upper() + segment[1:] if segment else segment
        for segment in scene.split("-")
    )


def map_industry_to_usage_scenes(industry: str | None) -> list[str]:
    """Scenes implied by an industry code; unknown industries map to nothing."""
    return list(INDUSTRY_TO_USAGE_SCENES.get(industry or "", ()))


def merge_usage_scenes(existing: Any, industry: str | None) -> list[str]:
    """
    Merge stored scenes with the scenes implied by an industry.

    Stored values come first and keep their order; duplicates are dropped.
    Only string values are kept from the stored list; a stored value that
    is not a list is treated as empty.
    """
    stored = list(existing) if isinstance(existing, (list, tuple)) else []
    merged: list[str] = []
    seen: set[str] = set()
    for value in [*stored, *map_industry_to_usage_scenes(industry)]:
        if not isinstance(value, str) or value in seen:
            continue
        seen.add(value)
        merged.append(value)
    return merged
