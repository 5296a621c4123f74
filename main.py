"""
Solution Content - Main Entry Point
Normalize a stored task cards document from the command line.

Usage:
    python main.py normalize page.json --checked construction wet-ground
    python main.py migrate legacy.json --industry MINING
"""

import argparse
import json
import sys
from pathlib import Path

from solution_content.logging_config import get_logger, setup_logging
from solution_content.task_cards import (
    normalize_task_cards,
    normalize_task_cards_from_legacy_groups,
)
from solution_content.usage_scenes import merge_usage_scenes

logger = get_logger("solution-content.cli")

COMMANDS = {
    "normalize": normalize_task_cards,
    "migrate": normalize_task_cards_from_legacy_groups,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Normalize solution page task cards")
    parser.add_argument("command", choices=sorted(COMMANDS), help="normalize cards or migrate legacy groups")
    parser.add_argument("path", help="JSON file with the stored document ('-' for stdin)")
    parser.add_argument("--checked", nargs="*", default=[], help="Scenes that start checked")
    parser.add_argument("--industry", default="", help="Industry code whose scenes start checked")
    parser.add_argument("--indent", type=int, default=2, help="JSON output indent")
    parser.add_argument("--debug", action="store_true", help="Log dropped groups and migrations")
    return parser


def load_document(path: str):
    text = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    return json.loads(text)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(service_name="solution-content-cli", level="DEBUG" if args.debug else "WARNING")

    try:
        document = load_document(args.path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {args.path}", error=e)
        return 1

    checked = merge_usage_scenes(args.checked, args.industry)
    result = COMMANDS[args.command](document, checked)
    print(json.dumps(result, ensure_ascii=False, indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
