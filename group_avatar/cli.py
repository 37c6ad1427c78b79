"""
Command-line interface for rendering group avatars.
"""
import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from group_avatar.config.loader import build_engine, load_settings
from group_avatar.core import configure
from group_avatar.engine.hasher import group_digest
from group_avatar.engine.layout import describe_layout
from group_avatar.engine.overflow import MAX_CELLS, overflow_index
from group_avatar.engine.partition import AvatarEngine, to_participant
from group_avatar.models.theme import Theme
from group_avatar.rendering.svg_renderer import SVGAvatarRenderer
from group_avatar.utils.io import load_conversations, save_results, save_svg
from group_avatar.utils.logger import setup_logger

logger = logging.getLogger(__name__)

SINGLE_CONVERSATION_ID = "avatar"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render deterministic group avatars.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--participant", "-p",
        action="append",
        help='Participant address, e.g. "Ann Lee <ann@example.com>" (repeatable)',
    )
    source.add_argument(
        "--input", "-i",
        type=str,
        help="CSV with 'conversation_id' and ';'-separated 'participants' columns",
    )

    parser.add_argument(
        "--theme", "-t",
        choices=[t.value for t in Theme],
        help="UI theme (default from configuration)",
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=["zoned", "flat"],
        help="Color strategy (default from configuration)",
    )
    parser.add_argument(
        "--size",
        type=int,
        help="Avatar side in pixels (default from configuration)",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        help="Directory for SVG/PNG output (default from configuration)",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to a JSON configuration file",
    )
    parser.add_argument(
        "--png",
        action="store_true",
        help="Also write PNG files (needs cairo)",
    )
    parser.add_argument(
        "--gallery",
        action="store_true",
        help="Write a contact sheet of every rendered avatar (needs cairo)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging and profiling",
    )

    return parser.parse_args(argv)


def safe_filename(conversation_id: str) -> str:
    """File stem for a conversation id."""
    stem = re.sub(r"[^A-Za-z0-9._-]+", "_", conversation_id).strip("._")
    return stem or "conversation"


def summarize(
    engine: AvatarEngine,
    conversation_id: str,
    participants: List[str],
    theme: Theme
) -> Dict[str, Any]:
    """Partition one conversation and describe the outcome."""
    members = [to_participant(p) for p in participants]
    assignments = engine.partition(members, theme, conversation_id=conversation_id)
    group_hash = group_digest(members)
    count = len(members)
    return {
        "conversation_id": conversation_id,
        "participants": count,
        "layout": describe_layout(count, group_hash),
        "overflow_cell": overflow_index(group_hash) if count > MAX_CELLS else "",
        "colors": ";".join(a.color.hex for a in assignments),
        "assignments": assignments,
    }


class AvatarWriter:
    """Writes SVG, and optionally PNG, files for resolved avatars."""

    def __init__(self, output_dir: Path, renderer: SVGAvatarRenderer, theme: Theme,
                 raster_size: int, png: bool, gallery: bool):
        self.output_dir = output_dir
        self.renderer = renderer
        self.theme = theme
        self.png = png
        self.gallery = gallery
        self.rasterizer = None
        self.images = []

        if png or gallery:
            from group_avatar.rendering.rasterizer import AvatarRasterizer
            self.rasterizer = AvatarRasterizer(default_size=raster_size)

    def write(self, stem: str, caption: str, assignments) -> Path:
        svg_code = self.renderer.render(assignments, self.theme)
        svg_path = save_svg(svg_code, self.output_dir / f"{stem}.svg")

        if self.rasterizer is not None:
            png_path = self.output_dir / f"{stem}.png" if self.png else None
            image = self.rasterizer.rasterize(svg_code, output_path=png_path)
            if self.gallery:
                self.images.append((caption, image))

        return svg_path

    def finish(self) -> Optional[Path]:
        if not self.gallery or not self.images:
            return None
        from group_avatar.utils.visualization import create_contact_sheet
        return create_contact_sheet(
            self.images, self.output_dir / "gallery.png",
            title=f"Group avatars ({self.theme.value})"
        )


def run_single(engine: AvatarEngine, writer: AvatarWriter, participants: List[str]) -> None:
    summary = summarize(engine, SINGLE_CONVERSATION_ID, participants, writer.theme)
    svg_path = writer.write(SINGLE_CONVERSATION_ID, summary["layout"], summary["assignments"])

    print(f"{svg_path} ({summary['layout']})")
    for assignment in summary["assignments"]:
        name = assignment.label if assignment.is_overflow_marker else assignment.participant.label
        print(f"  {name or '(empty)'}: {assignment.color.hex}")


def run_batch(engine: AvatarEngine, writer: AvatarWriter, input_path: str) -> Path:
    df = load_conversations(input_path)
    rows = []

    for conversation_id, participants in zip(df["conversation_id"], df["participant_list"]):
        summary = summarize(engine, conversation_id, participants, writer.theme)
        svg_path = writer.write(safe_filename(conversation_id), conversation_id, summary.pop("assignments"))
        summary["svg"] = str(svg_path)
        rows.append(summary)

    results_path = save_results(rows, writer.output_dir / "results.csv")
    print(f"Rendered {len(rows)} avatar(s); summary in {results_path}")
    return results_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)

    try:
        settings = load_settings(args.config, overrides={
            "theme": args.theme,
            "color_strategy": args.strategy,
            "avatar_size": args.size,
            "output_dir": args.output_dir,
        })
        setup_logger("DEBUG" if args.verbose else settings["log_level"])
        if args.verbose:
            configure({"enable_profiling": True})

        engine = build_engine(settings)
        writer = AvatarWriter(
            output_dir=Path(settings["output_dir"]),
            renderer=SVGAvatarRenderer(size=settings["avatar_size"]),
            theme=Theme.coerce(settings["theme"]),
            raster_size=settings["raster_size"],
            png=args.png,
            gallery=args.gallery,
        )

        if args.input:
            run_batch(engine, writer, args.input)
        else:
            run_single(engine, writer, args.participant)

        gallery_path = writer.finish()
        if gallery_path:
            print(f"Gallery written to {gallery_path}")
        return 0

    except Exception as e:
        logger.error(f"Avatar rendering failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
