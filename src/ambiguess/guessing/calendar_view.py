"""ASCII month calendar for an instant.

    September 2015
 Mo Tu We Th Fr Sa Su
     1  2  3  4  5  6
  7  8  9 10 11 12 13
 14 15 16 17 18 19 20
 21 22 23 24 25 26 27
 28 29 30

Layout and highlighting are separate: ``render_calendar`` produces plain
text and ``calendar_highlights`` maps day cells onto text coordinates, so
the presentation layer may style cells without touching the layout.
"""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import List

from ambiguess.guessing.models import CellRole, Highlight

WIDTH = 20
WEEKDAY_HEADER = "Mo Tu We Th Fr Sa Su"
HEADER_LINES = 2

_weeks = calendar.Calendar(firstweekday=calendar.MONDAY)


def render_calendar(instant: datetime) -> List[str]:
    """Render the month containing ``instant`` as fixed-width lines."""
    title = f"{calendar.month_name[instant.month]} {instant.year}"
    lines = [" " * ((WIDTH - len(title)) // 2) + title, WEEKDAY_HEADER]

    for week in _weeks.monthdayscalendar(instant.year, instant.month):
        # Trailing cells belong to the next month and are not rendered
        while week and week[-1] == 0:
            week.pop()
        lines.append(" ".join(f"{day:2d}" if day else "  " for day in week))
    return lines


def calendar_highlights(instant: datetime, now: datetime) -> List[Highlight]:
    """Locate the cells worth styling in ``render_calendar(instant)``.

    The given day always wins; today is marked only when the calendar
    shows the current month; every other Sunday is marked as such.
    """
    local_now = now.astimezone(instant.tzinfo) if instant.tzinfo else now
    current_month = (local_now.year, local_now.month) == (instant.year, instant.month)

    highlights = []
    for row, week in enumerate(_weeks.monthdayscalendar(instant.year, instant.month)):
        for weekday, day in enumerate(week):
            if not day:
                continue
            if day == instant.day:
                role = CellRole.GIVEN
            elif current_month and day == local_now.day:
                role = CellRole.TODAY
            elif weekday == calendar.SUNDAY:
                role = CellRole.SUNDAY
            else:
                continue
            start = 3 * weekday
            highlights.append(Highlight(HEADER_LINES + row, start, start + 2, role))
    return highlights
