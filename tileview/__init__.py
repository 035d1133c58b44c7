"""Viewport centering and announcement helpers for a tile-based world display.

Example usage:

    from tileview import (
        Coord, CursorState, DisplayChrome, GameClock, ReportLog, WorldBounds,
        add_announcement, center_viewport,
    )

    chrome = DisplayChrome(
        menu_width_mode=1,
        area_map_width_mode=0,
        viewport_pixel_width=80,
        viewport_pixel_height=25,
    )
    viewport = center_viewport(
        Coord(100, 50, 3), chrome, WorldBounds(1000, 1000), CursorState()
    )

    log = ReportLog()
    add_announcement("The caravan has arrived.", log, GameClock(250, 1200))
"""

from .common.constants import CURSOR_HIDDEN
from .common.layout import ChromeLayout, load_chrome_layout
from .display.screens import LinkedScreenResolver, ScreenResolver, active_screen
from .display.state import (
    Coord,
    CursorState,
    DisplayChrome,
    ViewportState,
    WorldBounds,
    normalize_focus,
)
from .display.viewport import center_viewport, effective_menu_width, visible_tile_size
from .reports.announcements import add_announcement, split_announcement
from .reports.report_log import GameClock, Report, ReportLog

__all__ = [
    "CURSOR_HIDDEN",
    "ChromeLayout",
    "load_chrome_layout",
    "ScreenResolver",
    "LinkedScreenResolver",
    "active_screen",
    "Coord",
    "CursorState",
    "DisplayChrome",
    "ViewportState",
    "WorldBounds",
    "normalize_focus",
    "center_viewport",
    "effective_menu_width",
    "visible_tile_size",
    "GameClock",
    "Report",
    "ReportLog",
    "add_announcement",
    "split_announcement",
]
