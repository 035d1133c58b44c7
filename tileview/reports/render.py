"""Announcement rendering with blessed."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .report_log import Report

if TYPE_CHECKING:
    from blessed import Terminal

# Color indices 0-7 as used by report records
COLOR_NAMES = [
    "black",
    "blue",
    "green",
    "cyan",
    "red",
    "magenta",
    "yellow",
    "white",
]


def color_name(report: Report) -> str:
    """Blessed color name for a report's color index and bright flag."""
    name = COLOR_NAMES[report.color % len(COLOR_NAMES)]
    if report.bright:
        return f"bright_{name}"
    return name


def render_report(report: Report, term: "Terminal") -> str:
    """Render a report's text in its color using blessed Terminal."""
    prefix = "  " if report.is_continuation else ""
    color_fn = getattr(term, color_name(report), None)
    if color_fn:
        return prefix + str(color_fn(report.text))
    return prefix + report.text


def render_announcements(reports: list[Report], term: "Terminal") -> str:
    """Render reports one per line, continuations indented."""
    return "\n".join(render_report(report, term) for report in reports)
