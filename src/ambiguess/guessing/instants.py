"""Decoration shared by every guess that resolves to a single instant.

Timestamps and zone-aware date strings both end up as one aware instant;
this module renders it, scores it against now and attaches the zone
table and calendar its relative-time bucket asks for.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import List, Sequence, Tuple

from ambiguess.guessing.calendar_view import calendar_highlights, render_calendar
from ambiguess.guessing.layout import right_column, side_by_side
from ambiguess.guessing.models import Guess, GuessConfig, Highlight
from ambiguess.guessing.relative import score_instant

logger = logging.getLogger(__name__)


def format_instant(instant: datetime) -> str:
    """Render an aware instant as ``2015-09-27 02:28:42 -0700 PDT``."""
    text = f"{instant:%Y-%m-%d %H:%M:%S}"
    if instant.microsecond:
        text += f".{instant.microsecond:06d}".rstrip("0")
    return f"{text} {instant:%z} {instant.tzname()}"


def unix_seconds(instant: datetime) -> int:
    return math.floor(instant.timestamp())


def zone_table(instant: datetime, config: GuessConfig) -> List[str]:
    """The instant as seen in every configured zone, plus its UNIX time."""
    lines = ["In other time zones:"]
    for zone in config.zones:
        lines.append(f"{format_instant(instant.astimezone(zone.tz))} ({zone.name})")
    lines.append(f"UNIX timestamp: {unix_seconds(instant)}")
    return lines


def attach_calendar(
    left: Sequence[str],
    instant: datetime,
    now: datetime,
) -> Tuple[List[str], List[Highlight]]:
    """Compose ``left`` with a calendar for ``instant`` on its right.

    Returns the merged lines and the calendar highlights moved to the
    column the calendar ended up in.
    """
    column = right_column(left)
    lines = side_by_side(left, render_calendar(instant))
    highlights = [h.shifted(columns=column) for h in calendar_highlights(instant, now)]
    return lines, highlights


def instant_guess(
    instant: datetime,
    config: GuessConfig,
    now: datetime,
    *,
    rendering: str,
    source: str,
) -> Guess:
    """Build the guess for one candidate instant.

    Args:
        instant: Aware candidate instant, already in its display zone
        config: Zones to tabulate
        now: Caller-supplied current instant
        rendering: Primary line of the guess
        source: Provenance tag

    Returns:
        Guess scored by the instant's distance to now
    """
    relative = score_instant(instant, now)
    logger.debug(
        f"{format_instant(instant)}: goodness={relative.goodness} "
        f"zones={relative.want_zones} calendar={relative.want_calendar}"
    )

    additional: List[str] = zone_table(instant, config) if relative.want_zones else []
    highlights: List[Highlight] = []
    if relative.want_calendar:
        additional, highlights = attach_calendar(additional, instant, now)

    return Guess(
        rendering=rendering,
        comment=relative.narrative,
        additional=additional,
        highlights=highlights,
        source=source,
        goodness=relative.goodness,
    )
