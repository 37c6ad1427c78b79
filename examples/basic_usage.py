#!/usr/bin/env python
"""
Basic example script for rendering a group avatar.

This script demonstrates how to partition a conversation's participants,
look up their cached colors and write the avatar as SVG.

Usage:
    python basic_usage.py "Ann Lee <ann@example.com>" "Bob <bob@example.com>"
"""
import argparse
import logging
import sys
from pathlib import Path

from group_avatar import AvatarEngine, ConversationColorCache, Participant, SVGAvatarRenderer


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render one group avatar in both themes.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "participants",
        nargs="+",
        help='Participant addresses, e.g. "Ann Lee <ann@example.com>"',
    )

    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default="example_avatars",
        help="Directory to save the SVG files",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point for the example script."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    try:
        engine = AvatarEngine(cache=ConversationColorCache())
        renderer = SVGAvatarRenderer(size=108)
        participants = [Participant.parse(p) for p in args.participants]
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        for theme in ("light", "dark"):
            assignments = engine.partition(participants, theme, conversation_id="example")
            path = output_dir / f"example_{theme}.svg"
            path.write_text(renderer.render(assignments, theme), encoding="utf-8")

            print(f"\n=== {theme} ===")
            for participant in participants:
                color = engine.color_for("example", participant, theme)
                print(f"{participant.label}: {color.hex}")
            print(f"Saved to: {path}")

        return 0

    except Exception as e:
        logging.error(f"Rendering failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
