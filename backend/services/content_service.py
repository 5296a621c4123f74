"""
Content Service

Wrapper around the solution_content engine for use in FastAPI.
Passes configuration into the pure normalizers and logs each call.
"""

from typing import Any, Iterable, Optional

from backend.core.config import Settings, get_settings
from solution_content.anchor_editor import (
    toggle_list_item_body_anchor,
    update_list_item_body_anchor_key,
    update_list_item_body_anchor_value,
)
from solution_content.anchor_points import BODY_ANCHOR_POINTS, resolve_list_item_body_anchor
from solution_content.body_link_map import BODY_ANCHOR_SECTION_KEY, is_body_linked_list, link_list_items
from solution_content.logging_config import get_logger
from solution_content.scene_presets import TASK_SCENE_PRESETS
from solution_content.solution_recommendations import (
    normalize_manual_product_ids,
    resolve_recommendation_mode,
    with_recommendation_mode_for_section,
)
from solution_content.task_cards import (
    normalize_task_cards,
    normalize_task_cards_from_legacy_groups,
)
from solution_content.usage_scenes import USAGE_SCENES, merge_usage_scenes

logger = get_logger(__name__)


class ContentService:
    """
    Service wrapper for the normalization engine.

    Holds the settings the engine needs (legacy anchor tolerance) so the
    routes stay free of configuration details.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def tolerance(self) -> float:
        return self._settings.legacy_anchor_tolerance

    # ── Registries ────────────────────────────────────────────────

    def list_scene_presets(self) -> list[dict]:
        return [preset.to_dict() for preset in TASK_SCENE_PRESETS]

    def list_anchor_presets(self) -> list[dict]:
        return [
            {"key": preset.key, "label": preset.label, "point": preset.point}
            for preset in BODY_ANCHOR_POINTS
        ]

    def health(self) -> dict:
        healthy = len(TASK_SCENE_PRESETS) == len(USAGE_SCENES) and len(BODY_ANCHOR_POINTS) > 0
        return {
            "status": "healthy" if healthy else "unhealthy",
            "scenes": len(TASK_SCENE_PRESETS),
            "anchor_keys": len(BODY_ANCHOR_POINTS),
        }

    # ── Task cards ────────────────────────────────────────────────

    def normalize(self, document: Any, default_checked_scenes: Iterable[Any] = ()) -> dict:
        with logger.span("normalize_task_cards"):
            result = normalize_task_cards(document, list(default_checked_scenes))
        checked = sum(1 for card in result["cards"] if card["checked"])
        logger.info(f"Normalized task cards ({checked} checked)")
        return result

    def migrate(self, document: Any, default_checked_scenes: Iterable[Any] = ()) -> dict:
        with logger.span("normalize_task_cards_from_legacy_groups"):
            result = normalize_task_cards_from_legacy_groups(document, list(default_checked_scenes))
        groups = document.get("groups") if isinstance(document, dict) else None
        group_count = len(groups) if isinstance(groups, list) else 0
        checked = sum(1 for card in result["cards"] if card["checked"])
        logger.info(f"Migrated {group_count} legacy groups ({checked} cards checked)")
        return result

    def defaults_for_solution(self, industry: Optional[str], usage_scenes: Iterable[Any] = ()) -> dict:
        scenes = merge_usage_scenes(list(usage_scenes), industry)
        return normalize_task_cards(None, scenes)

    # ── Body anchors ──────────────────────────────────────────────

    def resolve_anchor(self, item: Any) -> Optional[dict]:
        return resolve_list_item_body_anchor(item, self.tolerance)

    def toggle_anchor(self, item: dict, enabled: bool) -> dict:
        return toggle_list_item_body_anchor(item, enabled)

    def update_anchor_key(self, item: dict, key: Any) -> dict:
        updated = update_list_item_body_anchor_key(item, key)
        if updated is item:
            logger.debug(f"Rejected anchor key {key!r}")
        return updated

    def update_anchor_axis(self, item: dict, axis: str, value: str) -> dict:
        updated = update_list_item_body_anchor_value(item, axis, value)
        if updated is item:
            logger.debug(f"Rejected {axis} value {value!r}")
        return updated

    def linked_items(self, section_key: str, items: list) -> dict:
        if section_key != BODY_ANCHOR_SECTION_KEY:
            return {"linked": False, "items": []}
        return {
            "linked": is_body_linked_list(section_key, items),
            "items": link_list_items(items, self.tolerance),
        }

    # ── Recommended PPE block ─────────────────────────────────────

    def apply_recommendation_mode(self, sections: Any, mode: Any, product_ids: Any = None) -> dict:
        resolved = resolve_recommendation_mode(mode)
        manual_ids = normalize_manual_product_ids(product_ids)
        if resolved == "manual" and not manual_ids:
            logger.warning("Manual recommendation mode set without any product ids")
        return {
            "mode": resolved,
            "product_ids": manual_ids,
            "sections": with_recommendation_mode_for_section(sections, resolved),
        }


# Singleton instance
_content_service: Optional[ContentService] = None


def get_content_service() -> ContentService:
    """Get or create the ContentService singleton."""
    global _content_service
    if _content_service is None:
        _content_service = ContentService()
    return _content_service
