"""Chrome panel widths, with optional JSON overrides."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

from .constants import (
    AREA_MAP_NARROW_WIDTH,
    AREA_MAP_WIDE_WIDTH,
    BORDER_WIDTH,
    SIDE_PANEL_WIDTH,
)


@dataclass(frozen=True)
class ChromeLayout:
    """Widths (in tiles) of the fixed UI panels around the map view."""

    border: int = BORDER_WIDTH
    side_panel: int = SIDE_PANEL_WIDTH
    area_map_narrow: int = AREA_MAP_NARROW_WIDTH
    area_map_wide: int = AREA_MAP_WIDE_WIDTH


DEFAULT_LAYOUT = ChromeLayout()


def load_chrome_layout(path: str | Path) -> ChromeLayout:
    """Load a ChromeLayout from a JSON file.

    Every key is optional; missing keys keep their default width.

    Raises:
        ValueError: If the file contains keys that are not layout fields, or
            a width that is not an integer.
    """
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Layout file must contain a JSON object")

    known = {field.name for field in fields(ChromeLayout)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown layout keys: {', '.join(sorted(unknown))}")

    for key, value in data.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Layout key {key} must be an integer")

    return ChromeLayout(**data)
