"""
Basic usage example for the solution content engine
"""

import json
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from solution_content import (
    normalize_task_cards,
    normalize_task_cards_from_legacy_groups,
    resolve_list_item_body_anchor,
    toggle_list_item_body_anchor,
    update_list_item_body_anchor_value,
)


def main():
    """Walk through the task card and body anchor helpers."""
    print("Solution Content - Basic Example")
    print("=" * 60)

    # A stored document with one hand-edited card
    stored = {"cards": [{"scene": "height-work", "checked": True, "items": ["Harness"]}]}
    document = normalize_task_cards(stored, ["construction"])
    checked = [card["title"] for card in document["cards"] if card["checked"]]
    print(f"\n📋 Checked cards: {checked}")

    # An old grouped list
    legacy = {
        "groups": [
            {"title": "Working at Height", "items": ["Full body harness"]},
            {"title": "Dusty and Demolition Environments", "items": ["Respirators"]},
        ]
    }
    migrated = normalize_task_cards_from_legacy_groups(legacy)
    for card in migrated["cards"]:
        if card["checked"]:
            print(f"🔁 {card['scene']}: {card['items']}")

    # Body map anchors
    item = toggle_list_item_body_anchor({"title": "Helmet", "text": "Head protection"}, True)
    item = update_list_item_body_anchor_value(item, "y", "12")
    print(f"\n📍 Item: {json.dumps(item)}")
    print(f"📍 Drawn at: {resolve_list_item_body_anchor(item)}")
    print(f"📍 Legacy chest point drawn at: {resolve_list_item_body_anchor({'bodyAnchor': {'x': 50, 'y': 35}})}")
    print("-" * 60)


if __name__ == "__main__":
    main()
