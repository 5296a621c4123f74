"""
Solution page content normalization.

Pure functions that turn stored, partially filled or legacy-shaped
solution page content into canonical documents:
- task_cards: one task card per usage scene, legacy group migration
- anchor_points: body anchor registry and list item anchor resolution
- anchor_editor: anchor mutations used by the section editor
- solution_recommendations: rule or manual mode for the recommended PPE block
"""

from .anchor_editor import (
    should_show_body_anchor_editor,
    toggle_list_item_body_anchor,
    update_list_item_body_anchor_key,
    update_list_item_body_anchor_value,
)
from .anchor_geometry import clamp_body_anchor, is_valid_body_anchor
from .anchor_points import (
    BODY_ANCHOR_POINTS,
    get_body_anchor_point_by_key,
    is_valid_body_anchor_key,
    resolve_list_item_body_anchor,
)
from .scene_presets import TASK_SCENE_PRESETS, get_task_scene_preset
from .solution_recommendations import (
    normalize_manual_product_ids,
    resolve_recommendation_mode,
    with_recommendation_mode_for_section,
)
from .task_cards import normalize_task_cards, normalize_task_cards_from_legacy_groups
from .usage_scenes import USAGE_SCENES

__all__ = [
    "USAGE_SCENES",
    "TASK_SCENE_PRESETS",
    "BODY_ANCHOR_POINTS",
    "get_task_scene_preset",
    "get_body_anchor_point_by_key",
    "is_valid_body_anchor_key",
    "is_valid_body_anchor",
    "clamp_body_anchor",
    "normalize_task_cards",
    "normalize_task_cards_from_legacy_groups",
    "resolve_list_item_body_anchor",
    "should_show_body_anchor_editor",
    "toggle_list_item_body_anchor",
    "update_list_item_body_anchor_key",
    "update_list_item_body_anchor_value",
    "resolve_recommendation_mode",
    "normalize_manual_product_ids",
    "with_recommendation_mode_for_section",
]
