"""Centering the map viewport on a world coordinate."""

from __future__ import annotations

import logging
from typing import Any

from ..common.constants import (
    MENU_WIDTH_AREA_MAP,
    MENU_WIDTH_FULL,
    MENU_WIDTH_SIDE_PANEL,
)
from ..common.layout import DEFAULT_LAYOUT, ChromeLayout
from .state import (
    Coord,
    CursorState,
    DisplayChrome,
    ViewportState,
    WorldBounds,
    normalize_focus,
)

_logger = logging.getLogger(__name__)


def effective_menu_width(chrome: DisplayChrome, cursor: CursorState) -> int:
    """Menu width class actually taking space next to the map.

    The reported menu width mode only reflects the 'tab' status. While the
    cursor is shown, mode 2 next to a width-2 area map counts as the side
    panel alone, and mode 3 counts as mode 2.
    """
    menu_width = chrome.menu_width_mode
    if cursor.visible:
        if (
            menu_width == MENU_WIDTH_AREA_MAP
            and chrome.area_map_width_mode == MENU_WIDTH_AREA_MAP
        ):
            menu_width = MENU_WIDTH_SIDE_PANEL
        elif menu_width == MENU_WIDTH_FULL:
            menu_width = MENU_WIDTH_AREA_MAP
    return menu_width


def visible_tile_size(
    chrome: DisplayChrome,
    cursor: CursorState,
    layout: ChromeLayout = DEFAULT_LAYOUT,
) -> tuple[int, int]:
    """Return (width, height) in tiles of the map area left by the chrome."""
    width = chrome.viewport_pixel_width - layout.border
    height = chrome.viewport_pixel_height - layout.border

    menu_width = effective_menu_width(chrome, cursor)
    if menu_width == MENU_WIDTH_SIDE_PANEL:
        width -= layout.side_panel
    elif menu_width == MENU_WIDTH_AREA_MAP:
        if chrome.area_map_width_mode == MENU_WIDTH_AREA_MAP:
            width -= layout.area_map_narrow
        else:
            width -= layout.area_map_wide

    return width, height


def _clamp_origin(origin: int, map_size: int, view_size: int) -> int:
    # Clamp to map bounds, never below zero
    return max(min(origin, map_size - view_size), 0)


def center_viewport(
    focus: Any,
    chrome: DisplayChrome,
    bounds: WorldBounds,
    cursor: CursorState,
    viewport: ViewportState | None = None,
    layout: ChromeLayout = DEFAULT_LAYOUT,
) -> ViewportState:
    """Center the viewport on ``focus`` and move the cursor there if shown.

    Args:
        focus: Anything normalize_focus() accepts.
        chrome: Current UI chrome.
        bounds: Map extents used to keep the view on the map.
        cursor: Cursor state, updated in place when visible.
        viewport: State to update in place. A new one is created if omitted.
        layout: Panel widths to subtract from the screen size.

    Returns:
        The updated viewport state.
    """
    target: Coord = normalize_focus(focus)
    width, height = visible_tile_size(chrome, cursor, layout)

    origin_x = _clamp_origin(target.x - width // 2, bounds.map_tile_count_x, width)
    origin_y = _clamp_origin(target.y - height // 2, bounds.map_tile_count_y, height)

    if viewport is None:
        viewport = ViewportState()
    viewport.origin_x = origin_x
    viewport.origin_y = origin_y
    viewport.origin_z = target.z

    if cursor.visible:
        cursor.move_to(target)

    _logger.debug(
        f"Centered {width}x{height} view on ({target.x}, {target.y}, {target.z}) "
        f"-> origin ({origin_x}, {origin_y}, {target.z})"
    )
    return viewport
