"""In-memory report log shared by everything that posts announcements."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Report:
    """A single report record."""

    id: int = 0
    year: int = 0
    tick: int = 0
    text: str = ""
    color: int = 0
    bright: bool = False
    is_continuation: bool = False  # Non-first chunk of a longer message
    is_announcement: bool = False


@dataclass(frozen=True)
class GameClock:
    """Current in-game date."""

    year: int
    tick: int


@dataclass
class ReportLog:
    """Ordered report storage with id allocation and a display countdown.

    ``announcements`` holds the subset of ``reports`` flagged as
    announcements, in the same order.
    """

    reports: list[Report] = field(default_factory=list)
    announcements: list[Report] = field(default_factory=list)
    next_report_id: int = 0
    display_timer: int = 0

    def allocate(self) -> Report:
        """Create a zero-initialized report owned by this log."""
        return Report()

    def take_report_id(self) -> int:
        """Return the next report id and advance the counter."""
        report_id = self.next_report_id
        self.next_report_id += 1
        return report_id

    def append(self, report: Report) -> None:
        """Append a report, and to the announcements too if flagged."""
        self.reports.append(report)
        if report.is_announcement:
            self.announcements.append(report)

    def recent_announcements(self, count: int | None = None) -> list[Report]:
        """Return up to ``count`` of the newest announcement reports.

        Reports keep their log order, so continuations follow the report
        they extend. With no count, every announcement is returned.
        """
        if count is None:
            return list(self.announcements)
        if count <= 0:
            return []
        return self.announcements[-count:]
