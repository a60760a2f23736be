"""Tests for the month calendar and its cell highlights."""

from datetime import datetime, timezone

from ambiguess.guessing.calendar_view import (
    HEADER_LINES,
    WEEKDAY_HEADER,
    calendar_highlights,
    render_calendar,
)
from ambiguess.guessing.models import CellRole


class TestRenderCalendar:
    """Tests for the plain-text layout."""

    def test_september_2015(self):
        lines = render_calendar(datetime(2015, 9, 26, tzinfo=timezone.utc))

        assert lines == [
            "   September 2015",
            WEEKDAY_HEADER,
            "    1  2  3  4  5  6",
            " 7  8  9 10 11 12 13",
            "14 15 16 17 18 19 20",
            "21 22 23 24 25 26 27",
            "28 29 30",
        ]

    def test_month_starting_on_monday(self):
        lines = render_calendar(datetime(2015, 6, 15))
        assert lines[0] == "     June 2015"
        assert lines[2] == " 1  2  3  4  5  6  7"

    def test_month_starting_on_sunday(self):
        lines = render_calendar(datetime(2015, 2, 10))
        assert lines[2] == " " * 19 + "1"
        assert lines[-1] == "23 24 25 26 27 28"
        assert len(lines) == HEADER_LINES + 5

    def test_lines_fit_the_width(self):
        for month in range(1, 13):
            for line in render_calendar(datetime(2016, month, 1)):
                assert len(line) <= 20


class TestCalendarHighlights:
    """Tests for mapping day cells onto text coordinates."""

    def _cells(self, instant, now):
        lines = render_calendar(instant)
        return {
            lines[h.line][h.start:h.end].strip(): h.role
            for h in calendar_highlights(instant, now)
        }

    def test_roles_in_current_month(self, now):
        instant = datetime(2015, 9, 26, 12, 0, tzinfo=timezone.utc)

        cells = self._cells(instant, now)

        assert cells == {
            "26": CellRole.GIVEN,
            "27": CellRole.TODAY,
            "6": CellRole.SUNDAY,
            "13": CellRole.SUNDAY,
            "20": CellRole.SUNDAY,
        }

    def test_coordinates(self, now):
        instant = datetime(2015, 9, 26, tzinfo=timezone.utc)
        given = [h for h in calendar_highlights(instant, now) if h.role is CellRole.GIVEN]
        assert len(given) == 1
        assert (given[0].line, given[0].start, given[0].end) == (5, 15, 17)

    def test_given_day_wins_over_today(self, now):
        cells = self._cells(datetime(2015, 9, 27, tzinfo=timezone.utc), now)
        assert cells["27"] is CellRole.GIVEN
        assert CellRole.TODAY not in cells.values()

    def test_given_day_wins_over_sunday(self, now):
        cells = self._cells(datetime(2015, 9, 20, tzinfo=timezone.utc), now)
        assert cells["20"] is CellRole.GIVEN

    def test_no_today_in_other_months(self, now):
        cells = self._cells(datetime(2015, 8, 10, tzinfo=timezone.utc), now)
        assert CellRole.TODAY not in cells.values()
        assert cells["10"] is CellRole.GIVEN
