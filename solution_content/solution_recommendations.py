"""
Recommended PPE block helpers.

The recommended-ppe block either follows the scene rules or shows a
hand-picked product list.
"""

from __future__ import annotations

from typing import Any

RECOMMENDED_PPE_BLOCK_KEY = "recommended-ppe"

RECOMMENDATION_MODES = ("rule", "manual")


def resolve_recommendation_mode(value: Any) -> str:
    return "manual" if value == "manual" else "rule"


def normalize_manual_product_ids(value: Any) -> list[str]:
    """Trimmed, de-duplicated product ids in their original order."""
    if not isinstance(value, list):
        return []

    normalized: list[str] = []
    seen: set[str] = set()
    for item in value:
        if not isinstance(item, str):
            continue
        product_id = item.strip()
        if not product_id or product_id in seen:
            continue
        seen.add(product_id)
        normalized.append(product_id)
    return normalized


def with_recommendation_mode_for_section(sections: Any, mode: str) -> list:
    """Write mode into the recommended block's data, leaving other sections untouched."""
    if not isinstance(sections, list):
        return []
    return [
        {**section, "data": {**_section_data(section), "mode": mode}}
        if isinstance(section, dict) and section.get("key") == RECOMMENDED_PPE_BLOCK_KEY
        else section
        for section in sections
    ]


def _section_data(section: dict) -> dict:
    data = section.get("data")
    return data if isinstance(data, dict) else {}
