"""End-to-end tests for the tileview command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tileview.cli.main import main


class TestCenterCommand:
    """Tests for the center subcommand."""

    def test_side_panel_example(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "center",
                "100",
                "50",
                "3",
                "--menu-width",
                "1",
                "--map-width",
                "1000",
                "--map-height",
                "1000",
            ]
        )
        out = capsys.readouterr().out.splitlines()
        assert out == ["origin: 89 39 3", "cursor: hidden"]

    def test_cursor_follows(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["center", "5", "6", "7", "--cursor"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["origin: 0 0 7", "cursor: 5 6 7"]

    def test_layout_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        layout = tmp_path / "layout.json"
        layout.write_text(json.dumps({"side_panel": 57}))
        main(
            [
                "--layout",
                str(layout),
                "center",
                "100",
                "50",
                "3",
                "--menu-width",
                "1",
                "--map-width",
                "1000",
                "--map-height",
                "1000",
            ]
        )
        # 80 - 2 - 57 = 21 tiles wide
        assert capsys.readouterr().out.splitlines()[0] == "origin: 90 39 3"

    def test_bad_layout_file(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(
                ["--layout", str(tmp_path / "missing.json"), "center", "1", "1", "1"]
            )

    @pytest.mark.parametrize("value", [None, [1], {"a": 1}])
    def test_non_integer_layout_width(self, tmp_path: Path, value: object) -> None:
        layout = tmp_path / "layout.json"
        layout.write_text(json.dumps({"border": value}))
        with pytest.raises(SystemExit):
            main(["--layout", str(layout), "center", "1", "1", "1"])


class TestAnnounceCommand:
    """Tests for the announce subcommand."""

    def test_prints_chunks(self, capsys: pytest.CaptureFixture[str]) -> None:
        text = "x" * 80
        main(["announce", text, "short", "--color", "2"])
        out = capsys.readouterr().out.splitlines()
        assert out == ["x" * 73, "  " + "x" * 7, "short"]
