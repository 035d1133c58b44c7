"""Shared constants for viewport centering and announcements."""

# Cursor x value meaning "cursor not shown"
CURSOR_HIDDEN = -30000

# Chrome widths in tiles
BORDER_WIDTH = 2
SIDE_PANEL_WIDTH = 55
AREA_MAP_NARROW_WIDTH = 24
AREA_MAP_WIDE_WIDTH = 31

# Menu/area-map width modes as reported by the host UI
MENU_WIDTH_SIDE_PANEL = 1
MENU_WIDTH_AREA_MAP = 2
MENU_WIDTH_FULL = 3

# Announcements
ANNOUNCEMENT_CHUNK_LEN = 73
ANNOUNCEMENT_DISPLAY_TICKS = 2000
