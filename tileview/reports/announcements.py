"""Posting player-facing announcements to the report log."""

from __future__ import annotations

import logging
from typing import Any

from ..common.constants import ANNOUNCEMENT_CHUNK_LEN, ANNOUNCEMENT_DISPLAY_TICKS
from .report_log import GameClock, Report, ReportLog

_logger = logging.getLogger(__name__)


def split_announcement(text: str, width: int = ANNOUNCEMENT_CHUNK_LEN) -> list[str]:
    """Split text into consecutive pieces of at most ``width`` characters."""
    chunks: list[str] = []
    while len(text) > 0:
        chunks.append(text[:width])
        text = text[width:]
    return chunks


def add_announcement(
    text: Any,
    log: ReportLog,
    clock: GameClock,
    color: int | None = None,
    bright: Any = None,
) -> list[Report]:
    """Append ``text`` to the log as one or more announcement reports.

    Long text is split into ANNOUNCEMENT_CHUNK_LEN pieces; every piece after
    the first is flagged as a continuation. Each appended piece resets the
    log's display timer. Non-string text is treated as empty and adds nothing.

    Args:
        text: Message to announce.
        log: Report log to append to.
        clock: Current in-game date stamped on every report.
        color: Color index. Left at the report default when None.
        bright: Brightness flag, normalized to bool. Left at the report
            default when None.

    Returns:
        The reports appended, in order.
    """
    if not isinstance(text, str):
        text = ""

    added: list[Report] = []
    for index, chunk in enumerate(split_announcement(text)):
        report = log.allocate()
        if color is not None:
            report.color = color
        if bright is not None:
            report.bright = bool(bright)
        report.year = clock.year
        report.tick = clock.tick
        report.is_continuation = index > 0
        report.is_announcement = True
        report.text = chunk
        report.id = log.take_report_id()
        log.append(report)
        log.display_timer = ANNOUNCEMENT_DISPLAY_TICKS
        added.append(report)

    if added:
        _logger.debug(
            f"Announcement in {len(added)} report(s), "
            f"ids {added[0].id}-{added[-1].id}"
        )
    return added
