"""
ipguard - image IP registration / licensing router

Commands:
  - route:   route an already-extracted attribute mapping (JSON file or inline JSON).
  - analyze: send an image to the configured vision model, then route the result.
  - table:   print the category decision table with licensing recommendations.

Exit codes: 0 ok, 2 invalid input / unreadable vision output, 3 decision-table coverage defect.

Usage:
    python src/app.py route --json '{"is_ai_generated": true, "has_human_face": false}'
    python src/app.py route --input observation.json --selfie-verified
    python src/app.py analyze --image photo.jpg
    python src/app.py table
"""

import argparse
import json
import os
import sys
from typing import List, Optional

# Add src to path for imports when run as a script
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), ".")))

from commons.config import config
from commons.file_utils import FileUtils
from commons.llm import get_llm_model_name, get_llm_provider
from commons.logging_utils import configure_logging

from entity.policy import Category
from ipguard.cache import get_cache
from ipguard.decision import DecisionRouter
from ipguard.decision_service import DecisionService, build_response
from ipguard.errors import (
    ImageTooLargeError,
    InvalidInputError,
    UnclassifiedError,
    VisionParseError,
)
from ipguard.policy import get_policy, licensing_view, requires_selfie

EXIT_OK = 0
EXIT_INVALID = 2
EXIT_UNCLASSIFIED = 3


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _load_payload(args: argparse.Namespace):
    if args.json is not None:
        return json.loads(args.json)
    return FileUtils.load_json_from_file(args.input)


def cmd_route(args: argparse.Namespace) -> int:
    try:
        payload = _load_payload(args)
    except (json.JSONDecodeError, FileNotFoundError) as e:
        print(f"❌ Could not read input: {e}", file=sys.stderr)
        return EXIT_INVALID
    router = DecisionRouter(cfg=config)
    result = router.route(payload, selfie_verified=args.selfie_verified)
    _print_json(build_response(result, payload if isinstance(payload, dict) else None))
    return EXIT_OK


def cmd_analyze(args: argparse.Namespace) -> int:
    from ipguard.extractors import VisionAttributeExtractor

    try:
        image_bytes, mime_type = FileUtils.load_image(args.image)
    except FileNotFoundError:
        print(f"❌ Image not found: {args.image}", file=sys.stderr)
        return EXIT_INVALID
    cache = None if args.no_cache else get_cache(config)
    print(
        f"🔎 Analyzing {args.image} with {get_llm_provider(config)}/{get_llm_model_name(config)}",
        file=sys.stderr,
    )
    service = DecisionService(
        extractor=VisionAttributeExtractor(cfg=config),
        router=DecisionRouter(cfg=config),
        cache=cache,
    )
    _print_json(service.analyze_image(image_bytes, mime_type, selfie_verified=args.selfie_verified))
    return EXIT_OK


def cmd_table(args: argparse.Namespace) -> int:
    rows = []
    for category in Category:
        if category is Category.UNCLASSIFIED:
            continue
        rows.append({
            "category": int(category),
            "name": category.name,
            **get_policy(category).to_dict(),
            "requires_selfie": requires_selfie(category),
            "licensing": licensing_view(category),
        })
    if args.as_json:
        _print_json(rows)
        return EXIT_OK
    for row in rows:
        status = "✅ Allowed" if row["registration_allowed"] else "❌ Blocked"
        if row["requires_selfie"]:
            status = "🤳 Selfie"
        print(
            f"{row['category']:>2}  {row['name']:<28} {status:<11} "
            f"{row['required_action']:<18} {row['ai_training_permission']:<13} "
            f"{row['licensing']['recommendation']}"
        )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Route image attributes to an IP registration policy.")
    parser.add_argument("--log-level", default=None, help="Override logging.level from config")
    sub = parser.add_subparsers(dest="command", required=True)

    p_route = sub.add_parser("route", help="Route an attribute mapping")
    src = p_route.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", help="Path to a JSON file with attribute fields")
    src.add_argument("--json", help="Inline JSON with attribute fields")
    p_route.add_argument("--selfie-verified", action="store_true", default=None,
                         help="Selfie verification succeeded")
    p_route.set_defaults(func=cmd_route)

    p_analyze = sub.add_parser("analyze", help="Analyze an image with the vision model, then route")
    p_analyze.add_argument("--image", required=True, help="Path to the image file")
    p_analyze.add_argument("--selfie-verified", action="store_true", default=None)
    p_analyze.add_argument("--no-cache", action="store_true", help="Skip the configured cache backend")
    p_analyze.set_defaults(func=cmd_analyze)

    p_table = sub.add_parser("table", help="Print the decision table")
    p_table.add_argument("--json", dest="as_json", action="store_true", help="Print as JSON")
    p_table.set_defaults(func=cmd_table)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(config, log_level=args.log_level)
    try:
        return args.func(args)
    except (InvalidInputError, VisionParseError, ImageTooLargeError) as e:
        print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_INVALID
    except UnclassifiedError as e:
        print(f"❌ Decision table defect: {e}", file=sys.stderr)
        return EXIT_UNCLASSIFIED


if __name__ == "__main__":
    sys.exit(main())
