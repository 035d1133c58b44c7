"""Tests for display state types and focus normalization."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from tileview.common.constants import CURSOR_HIDDEN
from tileview.display.state import Coord, CursorState, normalize_focus


@dataclass
class Creature:
    pos: Coord


@dataclass
class Building:
    x: int
    y: int
    z: int


class TestNormalizeFocus:
    """Tests for normalize_focus."""

    def test_coord(self) -> None:
        assert normalize_focus(Coord(1, 2, 3)) == Coord(1, 2, 3)

    def test_position_bearing_object(self) -> None:
        assert normalize_focus(Creature(Coord(4, 5, 6))) == Coord(4, 5, 6)

    def test_object_with_xyz_fields(self) -> None:
        assert normalize_focus(Building(7, 8, 9)) == Coord(7, 8, 9)

    def test_explicit_arguments(self) -> None:
        assert normalize_focus(10, 11, 12) == Coord(10, 11, 12)

    def test_sequence(self) -> None:
        assert normalize_focus([1, 2, 3]) == Coord(1, 2, 3)
        assert normalize_focus((4, 5, 6)) == Coord(4, 5, 6)

    def test_negative_coordinates_accepted(self) -> None:
        assert normalize_focus(-5, -6, 0) == Coord(-5, -6, 0)

    def test_unsupported_input(self) -> None:
        with pytest.raises(TypeError):
            normalize_focus("1,2,3")
        with pytest.raises(TypeError):
            normalize_focus(5)
        with pytest.raises(TypeError):
            normalize_focus((1, 2))

    def test_non_numeric_sequence(self) -> None:
        with pytest.raises(TypeError, match="must be integers"):
            normalize_focus(("a", "b", "c"))


class TestCursorState:
    """Tests for CursorState."""

    def test_hidden_by_default(self) -> None:
        cursor = CursorState()
        assert cursor.x == CURSOR_HIDDEN
        assert not cursor.visible

    def test_visible(self) -> None:
        assert CursorState(0, 0, 0).visible

    def test_hide(self) -> None:
        cursor = CursorState(3, 4, 5)
        cursor.hide()
        assert not cursor.visible

    def test_move_to(self) -> None:
        cursor = CursorState(0, 0, 0)
        cursor.move_to(Coord(1, 2, 3))
        assert (cursor.x, cursor.y, cursor.z) == (1, 2, 3)
