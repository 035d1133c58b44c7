"""Display state shared between the host UI and the viewport helpers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..common.constants import CURSOR_HIDDEN


@dataclass(frozen=True)
class Coord:
    """A world tile coordinate."""

    x: int
    y: int
    z: int


@dataclass
class ViewportState:
    """Top-left world coordinate currently displayed."""

    origin_x: int = 0
    origin_y: int = 0
    origin_z: int = 0


@dataclass
class CursorState:
    """Map cursor position. x == CURSOR_HIDDEN means the cursor is not shown."""

    x: int = CURSOR_HIDDEN
    y: int = CURSOR_HIDDEN
    z: int = CURSOR_HIDDEN

    @property
    def visible(self) -> bool:
        return self.x != CURSOR_HIDDEN

    def hide(self) -> None:
        self.x = CURSOR_HIDDEN

    def move_to(self, coord: Coord) -> None:
        self.x, self.y, self.z = coord.x, coord.y, coord.z


@dataclass(frozen=True)
class DisplayChrome:
    """UI chrome currently on screen, as reported by the host."""

    menu_width_mode: int
    area_map_width_mode: int
    viewport_pixel_width: int
    viewport_pixel_height: int


@dataclass(frozen=True)
class WorldBounds:
    """Map extents in tiles."""

    map_tile_count_x: int
    map_tile_count_y: int


def normalize_focus(
    target: Any, y: int | None = None, z: int | None = None
) -> Coord:
    """Turn any supported focus form into a Coord.

    Accepted forms, checked in order:
    - an object with a ``pos`` attribute (the position is used instead)
    - an object with ``x``, ``y`` and ``z`` attributes (e.g. a Coord)
    - explicit ``(x, y, z)`` integer arguments
    - a sequence of three integers

    Raises:
        TypeError: If ``target`` matches none of the forms above, or its
            coordinates are not integers.
    """
    if hasattr(target, "pos"):
        target = target.pos
    if all(hasattr(target, attr) for attr in ("x", "y", "z")):
        return Coord(int(target.x), int(target.y), int(target.z))
    if isinstance(target, int) and y is not None and z is not None:
        return Coord(target, int(y), int(z))
    if (
        isinstance(target, Sequence)
        and not isinstance(target, str)
        and len(target) == 3
    ):
        x, y, z = target
        try:
            return Coord(int(x), int(y), int(z))
        except ValueError as e:
            raise TypeError(
                f"Focus coordinates must be integers: {target!r}"
            ) from e
    raise TypeError(f"Cannot derive a focus coordinate from {target!r}")
