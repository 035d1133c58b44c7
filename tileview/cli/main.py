"""Command line entry point for trying out viewport centering and announcements."""

from __future__ import annotations

import argparse
import logging

from blessed import Terminal

from ..common.layout import DEFAULT_LAYOUT, ChromeLayout, load_chrome_layout
from ..display.state import Coord, CursorState, DisplayChrome, WorldBounds
from ..display.viewport import center_viewport
from ..reports.announcements import add_announcement
from ..reports.render import render_announcements
from ..reports.report_log import GameClock, ReportLog

_logger = logging.getLogger(__name__)


def setup_logging(log_file: str | None, verbose: bool) -> None:
    """Configure logging to the console and an optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tile viewport and announcement helper"
    )
    parser.add_argument("--log-file", help="Log file path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--layout", help="JSON file overriding chrome panel widths")
    subparsers = parser.add_subparsers(dest="command", required=True)

    center = subparsers.add_parser("center", help="Center the viewport on a tile")
    center.add_argument("x", type=int)
    center.add_argument("y", type=int)
    center.add_argument("z", type=int)
    center.add_argument("--menu-width", type=int, default=0, help="Menu width mode")
    center.add_argument(
        "--area-map-width", type=int, default=0, help="Area map width mode"
    )
    center.add_argument("--screen-width", type=int, default=80)
    center.add_argument("--screen-height", type=int, default=25)
    center.add_argument("--map-width", type=int, default=192)
    center.add_argument("--map-height", type=int, default=192)
    center.add_argument(
        "--cursor",
        action="store_true",
        help="Treat the cursor as visible (it follows the focus)",
    )

    announce = subparsers.add_parser("announce", help="Post announcements")
    announce.add_argument("text", nargs="+", help="Announcement text, one per arg")
    announce.add_argument("--color", type=int, help="Color index 0-7")
    announce.add_argument("--bright", action="store_true", default=None)
    announce.add_argument("--year", type=int, default=0)
    announce.add_argument("--tick", type=int, default=0)

    return parser


def run_center(args: argparse.Namespace, layout: ChromeLayout) -> None:
    chrome = DisplayChrome(
        menu_width_mode=args.menu_width,
        area_map_width_mode=args.area_map_width,
        viewport_pixel_width=args.screen_width,
        viewport_pixel_height=args.screen_height,
    )
    bounds = WorldBounds(args.map_width, args.map_height)
    cursor = CursorState(0, 0, 0) if args.cursor else CursorState()

    viewport = center_viewport(
        Coord(args.x, args.y, args.z), chrome, bounds, cursor, layout=layout
    )
    print(f"origin: {viewport.origin_x} {viewport.origin_y} {viewport.origin_z}")
    if cursor.visible:
        print(f"cursor: {cursor.x} {cursor.y} {cursor.z}")
    else:
        print("cursor: hidden")


def run_announce(args: argparse.Namespace) -> None:
    log = ReportLog()
    clock = GameClock(args.year, args.tick)
    for text in args.text:
        add_announcement(text, log, clock, color=args.color, bright=args.bright)

    term = Terminal()
    print(render_announcements(log.announcements, term))
    _logger.info(
        f"Posted {len(log.announcements)} report(s), "
        f"display timer {log.display_timer}"
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)

    layout = DEFAULT_LAYOUT
    if args.layout:
        try:
            layout = load_chrome_layout(args.layout)
        except (OSError, ValueError) as e:
            parser.error(f"Cannot load layout {args.layout}: {e}")

    if args.command == "center":
        run_center(args, layout)
    else:
        run_announce(args)


if __name__ == "__main__":
    main()
