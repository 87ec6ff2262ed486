#!/usr/bin/env python3
"""
CLI for generating personalized children's stories.

Usage:
    python cli/generate_story.py "Mia"
    python cli/generate_story.py "Mia" --theme space --length short
    python cli/generate_story.py "Leo" --theme adventure --mode beats --policy ranged
    python cli/generate_story.py "Mia" --variation 42 --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storyweaver.api.logging import configure_logging
from storyweaver.core.errors import ValidationError
from storyweaver.core.programs.story_generator import StoryGenerator
from storyweaver.core.types import GenerationMode, PageCountPolicy, ReadingLength


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a personalized children's story",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python cli/generate_story.py "Mia" --theme space --length short
    python cli/generate_story.py "Leo" --theme underwater --variation 7
    python cli/generate_story.py "Ava" --theme fantasy --mode beats
        """,
    )

    parser.add_argument(
        "child_name",
        type=str,
        help="The child's name",
    )

    parser.add_argument(
        "--theme", "-t",
        type=str,
        default="forest",
        help="Theme id (default: forest). Unknown ids use the default theme.",
    )

    parser.add_argument(
        "--length", "-l",
        choices=[length.value for length in ReadingLength],
        default=ReadingLength.MEDIUM.value,
        help="Reading length (default: medium)",
    )

    parser.add_argument(
        "--variation",
        type=int,
        default=0,
        help="Variation seed for a different story from the same inputs (default: 0)",
    )

    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GenerationMode],
        default=None,
        help="Generation mode (default: configured mode)",
    )

    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in PageCountPolicy],
        default=None,
        help="Page count policy (default: configured policy)",
    )

    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Skip image URLs",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the story as JSON instead of text",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress information",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(json_format=False, level=logging.INFO if args.verbose else logging.WARNING)

    generator_kwargs = {"mode": args.mode, "page_count_policy": args.policy}
    if args.no_images:
        generator_kwargs["image_resolver"] = None
    generator = StoryGenerator(**generator_kwargs)

    try:
        story = generator.generate_story(
            args.child_name,
            args.theme,
            args.length,
            variation_seed=args.variation,
        )
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(story.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(story.to_formatted_string(), end="")

    if args.verbose:
        print("\n--- Generation Summary ---", file=sys.stderr)
        print(f"Title: {story.title}", file=sys.stderr)
        print(f"Pages: {story.page_count}", file=sys.stderr)
        print(f"Mode: {generator.mode.value}", file=sys.stderr)
        print(f"Page count policy: {generator.page_count_policy.value}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
