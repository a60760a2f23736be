"""Relative-time scoring.

Every time-based guesser asks the same question: how far is this instant
from the caller's current instant? The answer drives three things at
once: the narrative shown next to the guess, the goodness score used for
ranking, and whether a zone table and/or calendar are worth attaching.

Buckets (checked in ascending order):

    delta      prefix                 goodness  zones  calendar
    < 1 min    "within the minute, "  200       yes    no
    < 1 hour   "within the hour, "    180       yes    no
    < 1 day    "within the day, "     150       yes    no
    < 1 week   "within the week, "    120       yes    yes
    < 1 year   -                      20        no     yes
    >= 1 year  -                      -10       no     no
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Tuple

RIGHT_NOW = "right now"

# Goodness values, in the order the buckets are checked
GOODNESS_MINUTE = 200
GOODNESS_HOUR = 180
GOODNESS_DAY = 150
GOODNESS_WEEK = 120
GOODNESS_YEAR = 20
GOODNESS_DISTANT = -10


@dataclass(frozen=True)
class _Bucket:
    limit: timedelta
    unit: str
    goodness: int
    want_zones: bool
    want_calendar: bool


_BUCKETS = (
    _Bucket(timedelta(minutes=1), "minute", GOODNESS_MINUTE, True, False),
    _Bucket(timedelta(hours=1), "hour", GOODNESS_HOUR, True, False),
    _Bucket(timedelta(days=1), "day", GOODNESS_DAY, True, False),
    _Bucket(timedelta(weeks=1), "week", GOODNESS_WEEK, True, True),
    # No "within the year" prefix: past a week the exact breakdown says enough
    _Bucket(timedelta(days=365), "", GOODNESS_YEAR, False, True),
)


@dataclass(frozen=True)
class RelativeTime:
    """Distance between an instant and now, with everything derived from it.

    Attributes:
        delta: Absolute distance, truncated to whole seconds
        narrative: e.g. "within the hour, 5 minutes 3 seconds ago"
        goodness: Score of the bucket the delta falls in
        want_zones: Whether a cross-zone table is worth attaching
        want_calendar: Whether a calendar is worth attaching
    """

    delta: timedelta
    narrative: str
    goodness: int
    want_zones: bool
    want_calendar: bool


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def _exact(delta: timedelta, suffix: str) -> str:
    days, remainder = divmod(int(delta.total_seconds()), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    for count, unit in ((days, "day"), (hours, "hour"), (minutes, "minute"), (seconds, "second")):
        if count:
            parts.append(_plural(count, unit))
    parts.append(suffix)
    return " ".join(parts)


def score_instant(instant: datetime, now: datetime) -> RelativeTime:
    """Score an aware instant by its distance to ``now``.

    Args:
        instant: The candidate instant
        now: Caller-supplied current instant (aware)

    Returns:
        RelativeTime with narrative, goodness and attachment gates
    """
    if now >= instant:
        suffix, delta = "ago", now - instant
    else:
        suffix, delta = "ahead", instant - now

    if delta < timedelta(seconds=1):
        return RelativeTime(timedelta(0), RIGHT_NOW, GOODNESS_MINUTE, True, False)

    delta = timedelta(seconds=int(delta.total_seconds()))
    for bucket in _BUCKETS:
        if delta < bucket.limit:
            prefix = f"within the {bucket.unit}, " if bucket.unit else ""
            return RelativeTime(
                delta,
                prefix + _exact(delta, suffix),
                bucket.goodness,
                bucket.want_zones,
                bucket.want_calendar,
            )
    return RelativeTime(delta, _exact(delta, suffix), GOODNESS_DISTANT, False, False)


def delta_now(instant: datetime, now: datetime) -> Tuple[timedelta, str]:
    """Return ``(absolute_delta, narrative)`` for an instant."""
    relative = score_instant(instant, now)
    return relative.delta, relative.narrative
