#!/usr/bin/env python3
"""
Legacy Group Migration Script

Rewrites an exported list of solution task-card blocks into the
canonical task cards shape.

Input: JSON list of records such as
    {"id": "...", "groups": [...], "usageScenes": [...], "industry": "MINING"}
    {"id": "...", "cards": [...], "usageScenes": [...]}

Records with "groups" are migrated by keyword; records with "cards" (or
neither) are re-normalized. Output keeps "id" and replaces the content
with {"cards": [...]}.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from solution_content.logging_config import get_logger, setup_logging
from solution_content.task_cards import (
    normalize_task_cards,
    normalize_task_cards_from_legacy_groups,
)
from solution_content.usage_scenes import merge_usage_scenes

logger = get_logger("migrate-legacy-groups")


def migrate_record(record: dict) -> tuple[dict, bool]:
    """Return the migrated record and whether it came from legacy groups."""
    checked = merge_usage_scenes(record.get("usageScenes"), record.get("industry"))
    is_legacy = isinstance(record.get("groups"), list)
    if is_legacy:
        document = normalize_task_cards_from_legacy_groups(record, checked)
    else:
        document = normalize_task_cards(record, checked)
    return {"id": record.get("id"), **document}, is_legacy


def main() -> int:
    parser = argparse.ArgumentParser(description="Migrate legacy task card groups")
    parser.add_argument("input", help="JSON export (list of records)")
    parser.add_argument("output", help="Where to write the migrated list")
    parser.add_argument("--debug", action="store_true", help="Log per-group matches")
    args = parser.parse_args()

    setup_logging(service_name="migrate-legacy-groups", level="DEBUG" if args.debug else "INFO")

    records = json.loads(Path(args.input).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        logger.error(f"{args.input} must contain a JSON list")
        return 1

    migrated = []
    legacy_count = 0
    for record in records:
        if not isinstance(record, dict):
            logger.warning(f"Skipping non-object record: {record!r}")
            continue
        result, is_legacy = migrate_record(record)
        legacy_count += int(is_legacy)
        migrated.append(result)

    Path(args.output).write_text(json.dumps(migrated, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.success(f"Records written: {len(migrated)} (legacy groups migrated: {legacy_count})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
