"""
Task Cards

Normalizes the "task cards" content block of a solution page into its
canonical shape: exactly one card per usage scene, in taxonomy order.

Stored documents come from several schema generations and from hand
edits, so every entry point accepts any value and falls back to defaults
instead of raising. Running a normalizer on its own output is a no-op.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Optional

from solution_content.documents import LegacyGroup, TaskCard, TaskCardsDocument
from solution_content.scene_presets import TASK_SCENE_PRESETS, get_task_scene_preset
from solution_content.usage_scenes import USAGE_SCENES, is_usage_scene

logger = logging.getLogger(__name__)

_NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


# ============================================================================
# Field Helpers
# ============================================================================


def to_string_list(value: Any) -> list[str]:
    """Keep trimmed, non-empty strings from a list; anything else is an empty list."""
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def normalize_text(value: Any) -> str:
    """Lowercase, strip punctuation and collapse whitespace for keyword matching."""
    if not isinstance(value, str):
        return ""
    text = _NON_KEYWORD_CHARS.sub(" ", value.lower())
    return _WHITESPACE.sub(" ", text).strip()


def _list_field(raw: Any, name: str) -> list:
    if isinstance(raw, dict) and isinstance(raw.get(name), list):
        return raw[name]
    return []


def _checked_scene_set(default_checked_scenes: Optional[Iterable[Any]]) -> set[str]:
    if not isinstance(default_checked_scenes, Iterable) or isinstance(default_checked_scenes, (str, bytes, dict)):
        return set()
    return {scene for scene in default_checked_scenes if is_usage_scene(scene)}


def default_task_card(scene: str, checked: bool) -> TaskCard:
    preset = get_task_scene_preset(scene)
    return {
        "scene": scene,
        "checked": checked,
        "title": preset.title,
        "description": preset.description,
        "items": [],
    }


# ============================================================================
# Normalizers
# ============================================================================


def normalize_task_cards(
    raw: Any,
    default_checked_scenes: Optional[Iterable[Any]] = None,
) -> TaskCardsDocument:
    """
    Canonical task cards document from any stored value.

    Only a {"cards": [...]} shape is inspected. Cards with an unknown
    scene are skipped; for a repeated scene the last card wins. Scenes
    listed in default_checked_scenes start checked unless the stored
    card has an explicit boolean.
    """
    checked_set = _checked_scene_set(default_checked_scenes)
    card_map: dict[str, TaskCard] = {}

    for card in _list_field(raw, "cards"):
        if not isinstance(card, dict):
            continue
        scene = card.get("scene")
        if not is_usage_scene(scene):
            continue

        preset = get_task_scene_preset(scene)
        checked = card.get("checked")
        title = card.get("title")
        description = card.get("description")
        card_map[scene] = {
            "scene": scene,
            "checked": checked if isinstance(checked, bool) else scene in checked_set,
            "title": title.strip() if isinstance(title, str) and title.strip() else preset.title,
            "description": description.strip() if isinstance(description, str) else "",
            "items": to_string_list(card.get("items")),
        }

    return {
        "cards": [
            card_map.get(scene) or default_task_card(scene, scene in checked_set)
            for scene in USAGE_SCENES
        ],
    }


def _read_legacy_group(group: LegacyGroup) -> tuple[str, str, list[str]]:
    title = group.get("title")
    description = group.get("description")
    return (
        title.strip() if isinstance(title, str) else "",
        description.strip() if isinstance(description, str) else "",
        to_string_list(group.get("items")),
    )


def find_scene_by_title(title: Any, used_scenes: set[str]) -> Optional[str]:
    """
    First scene, in taxonomy order, whose keywords occur in the title.

    Scenes already claimed by an earlier legacy group are skipped.
    """
    normalized_title = normalize_text(title)
    if not normalized_title:
        return None

    for preset in TASK_SCENE_PRESETS:
        if preset.scene in used_scenes:
            continue
        if any(normalize_text(keyword) in normalized_title for keyword in preset.keywords):
            return preset.scene
    return None


def normalize_task_cards_from_legacy_groups(
    raw: Any,
    default_checked_scenes: Optional[Iterable[Any]] = None,
) -> TaskCardsDocument:
    """
    Migrate a legacy {"groups": [...]} document into canonical task cards.

    Each group is matched to at most one scene by keyword. A matched
    scene is checked and takes the group's title, description and items;
    the first group to claim a scene keeps it. Groups that match nothing
    are dropped.
    """
    result = normalize_task_cards(None, default_checked_scenes)
    cards_by_scene: dict[str, TaskCard] = {card["scene"]: dict(card) for card in result["cards"]}
    used_scenes: set[str] = set()

    for group in _list_field(raw, "groups"):
        if not isinstance(group, dict):
            continue
        title, description, items = _read_legacy_group(group)

        scene = find_scene_by_title(title, used_scenes)
        if scene is None:
            logger.debug(f"Dropping legacy group with no matching scene: {title!r}")
            continue

        card = cards_by_scene[scene]
        card["checked"] = True
        card["title"] = title or card["title"]
        card["description"] = description or card["description"]
        card["items"] = items
        used_scenes.add(scene)
        logger.debug(f"Legacy group {title!r} migrated to scene '{scene}'")

    return {
        "cards": [cards_by_scene.get(scene) or default_task_card(scene, False) for scene in USAGE_SCENES],
    }
