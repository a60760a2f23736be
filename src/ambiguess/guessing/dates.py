"""Date string guesses.

Two families of formats are tried:

- Confident formats carry a zone, either as a numeric offset or as an
  abbreviation. The first one that matches wins and yields one instant.
- Naive formats carry no zone. Every one that matches yields a guess
  interpreted in the local zone, annotated with what the same wall clock
  would mean had it been written in each configured zone.

Zone abbreviations have no fixed offset, so a bare "PDT" is first read
as a zero offset and then repaired by looking for a configured zone that
uses that abbreviation (see ``resolve_abbreviation``).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import List, Optional, Tuple

from ambiguess.errors import InternalConsistencyError
from ambiguess.guessing.instants import (
    attach_calendar,
    format_instant,
    instant_guess,
    unix_seconds,
)
from ambiguess.guessing.models import Guess, GuessConfig, GuessSource, Highlight
from ambiguess.guessing.relative import score_instant

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Format Tables
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DateFormat:
    """A strptime pattern; ``%Z`` stands for a zone abbreviation."""

    name: str
    pattern: str
    # strptime accepts unpadded fields; digit-only formats need an exact width
    width: Optional[int] = None

    @property
    def has_abbreviation(self) -> bool:
        return "%Z" in self.pattern

    @property
    def has_offset(self) -> bool:
        return "%z" in self.pattern


CONFIDENT_FORMATS: Tuple[DateFormat, ...] = (
    DateFormat("RFC 3339 with fraction", "%Y-%m-%dT%H:%M:%S.%f%z"),
    DateFormat("RFC 3339", "%Y-%m-%dT%H:%M:%S%z"),
    DateFormat("RFC 1123 with offset", "%a, %d %b %Y %H:%M:%S %z"),
    DateFormat("RFC 1123", "%a, %d %b %Y %H:%M:%S %Z"),
    DateFormat("RFC 850", "%A, %d-%b-%y %H:%M:%S %Z"),
    DateFormat("RFC 822 with offset", "%d %b %y %H:%M %z"),
    DateFormat("RFC 822", "%d %b %y %H:%M %Z"),
    DateFormat("Ruby date", "%a %b %d %H:%M:%S %z %Y"),
    DateFormat("Unix date", "%a %b %d %H:%M:%S %Z %Y"),
    DateFormat("offset and abbreviation with fraction", "%Y-%m-%d %H:%M:%S.%f %z %Z"),
    DateFormat("offset and abbreviation", "%Y-%m-%d %H:%M:%S %z %Z"),
    DateFormat("ISO date, seconds, abbreviation", "%Y-%m-%d %H:%M:%S %Z"),
    DateFormat("ISO date, minutes, abbreviation", "%Y-%m-%d %H:%M %Z"),
    DateFormat("slashed date with fraction, abbreviation", "%Y/%m/%d %H:%M:%S.%f %Z"),
    DateFormat("slashed date, abbreviation", "%Y/%m/%d %H:%M:%S %Z"),
    DateFormat("dashed log date with fraction, abbreviation", "%Y/%m/%d-%H:%M:%S.%f %Z"),
    DateFormat("dashed log date, abbreviation", "%Y/%m/%d-%H:%M:%S %Z"),
)

NAIVE_FORMATS: Tuple[DateFormat, ...] = (
    DateFormat("ANSI C", "%a %b %d %H:%M:%S %Y"),
    DateFormat("month day year time", "%b %d %Y %H:%M:%S"),
    DateFormat("ISO date, seconds", "%Y-%m-%d %H:%M:%S"),
    DateFormat("ISO date, minutes", "%Y-%m-%d %H:%M"),
    DateFormat("ISO date and time", "%Y-%m-%dT%H:%M:%S"),
    DateFormat("US date", "%m/%d/%Y %H:%M:%S"),
    DateFormat("European date", "%d/%m/%Y %H:%M:%S"),
    DateFormat("slashed date with fraction", "%Y/%m/%d %H:%M:%S.%f"),
    DateFormat("slashed date", "%Y/%m/%d %H:%M:%S"),
    DateFormat("dashed log date with fraction", "%Y/%m/%d-%H:%M:%S.%f"),
    DateFormat("dashed log date", "%Y/%m/%d-%H:%M:%S"),
    DateFormat("compact", "%Y%m%d%H%M%S", width=14),
)

# Sub-microsecond digits cannot be represented by datetime
_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")
# Letters ("PDT") or, as zoneinfo names zones without one, signed hours ("+04")
_ABBREVIATION = re.compile(r"\b[A-Z]{3,5}\b|(?<!\S)[+-]\d{2}\b")
_NUMERIC_ABBREVIATION = re.compile(r"[+-]\d{2}")
_ZONE_MARK = "@"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _strptime(token: str, fmt: DateFormat) -> Optional[Tuple[datetime, Optional[str]]]:
    """Parse ``token`` with ``fmt``.

    Returns the parsed datetime (aware only if the format has an offset)
    and the zone abbreviation found, or None if the format does not match.
    """
    if fmt.width is not None and len(token) != fmt.width:
        return None
    text = _LONG_FRACTION.sub(r"\1", token)
    if not fmt.has_abbreviation:
        try:
            return datetime.strptime(text, fmt.pattern), None
        except ValueError:
            return None

    # strptime only knows a handful of zone names, so cut the abbreviation
    # out and let strptime match a placeholder in its place
    pattern = fmt.pattern.replace("%Z", _ZONE_MARK)
    for match in _ABBREVIATION.finditer(text):
        candidate = text[: match.start()] + _ZONE_MARK + text[match.end():]
        try:
            return datetime.strptime(candidate, pattern), match.group(0)
        except ValueError:
            continue
    return None


def resolve_abbreviation(
    wall_clock: datetime,
    abbreviation: str,
    config: GuessConfig,
    now: datetime,
) -> Optional[tzinfo]:
    """Find the zone a bare abbreviation most likely refers to.

    A configured zone matches if it uses ``abbreviation`` either at the
    parsed wall-clock time or at the current instant. In the first case
    the zone itself is returned; in the second the abbreviation's current
    offset is, so "PDT" in January still means UTC-7.
    """
    for zone in config.zones:
        if wall_clock.replace(tzinfo=zone.tz).tzname() == abbreviation:
            return zone.tz
        current = now.astimezone(zone.tz)
        if current.tzname() == abbreviation:
            return timezone(current.utcoffset(), abbreviation)
    return None


def parse_confident(token: str, config: GuessConfig, now: datetime) -> Optional[datetime]:
    """Parse a date string that carries its zone.

    Args:
        token: Input string
        config: Configured zones used to place bare abbreviations
        now: Current instant, for abbreviations in use right now

    Returns:
        Aware datetime from the first matching confident format, or None

    Raises:
        InternalConsistencyError: If re-parsing in a resolved zone fails
    """
    for fmt in CONFIDENT_FORMATS:
        parsed = _strptime(token, fmt)
        if parsed is None:
            logger.debug(f"{token!r} does not match {fmt.name!r}")
            continue
        value, abbreviation = parsed
        if abbreviation is None:
            logger.debug(f"successfully parsed date {token!r} as {value}")
            return value

        offset = value.utcoffset() if value.tzinfo else timedelta(0)
        value = value.replace(tzinfo=timezone(offset, abbreviation))
        if offset or fmt.has_offset:
            return value

        # Zero offset invented for an abbreviation: try to do better
        resolved = resolve_abbreviation(value.replace(tzinfo=None), abbreviation, config, now)
        if resolved is not None:
            value = _reanchor(token, fmt, resolved)
        elif _NUMERIC_ABBREVIATION.fullmatch(abbreviation):
            value = value.replace(tzinfo=timezone(timedelta(hours=int(abbreviation)), abbreviation))
        logger.debug(f"successfully parsed date {token!r} as {value}")
        return value
    return None


def _reanchor(token: str, fmt: DateFormat, zone: tzinfo) -> datetime:
    parsed = _strptime(token, fmt)
    if parsed is None:
        raise InternalConsistencyError(
            f"{token!r} matched {fmt.name!r} but failed to parse again",
            details={"token": token, "format": fmt.pattern},
        )
    return parsed[0].replace(tzinfo=zone)


def parse_naive(token: str) -> List[Tuple[DateFormat, datetime]]:
    """Every distinct reading of ``token`` under the naive formats."""
    readings: List[Tuple[DateFormat, datetime]] = []
    for fmt in NAIVE_FORMATS:
        parsed = _strptime(token, fmt)
        if parsed is None:
            logger.debug(f"{token!r} does not match {fmt.name!r}")
            continue
        value = parsed[0]
        if any(value == seen for _, seen in readings):
            continue
        logger.debug(f"{token!r} is parsable from format {fmt.name!r}")
        readings.append((fmt, value))
    return readings


# ---------------------------------------------------------------------------
# Guessers
# ---------------------------------------------------------------------------


def guess_confident_date(token: str, config: GuessConfig, now: datetime) -> List[Guess]:
    """At most one guess for a date string with a zone."""
    instant = parse_confident(token, config, now)
    if instant is None:
        return []
    return [instant_guess(
        instant,
        config,
        now,
        rendering=format_instant(instant),
        source=GuessSource.DATE_WITH_ZONE.value,
    )]


def naive_date_guess(wall_clock: datetime, config: GuessConfig, now: datetime) -> Guess:
    """Guess for a zone-less wall clock reading.

    The reading is taken in the local zone for scoring; each additional
    line answers "had someone in zone Z written this, when would that be
    in my local time?".
    """
    local = wall_clock.replace(tzinfo=config.local)
    relative = score_instant(local, now)

    lines = []
    for zone in config.zones:
        anchored = wall_clock.replace(tzinfo=zone.tz)
        try:
            converted = anchored.astimezone(config.local)
        except OverflowError:
            logger.debug(f"{wall_clock} in {zone.name} is out of range locally")
            continue
        line = f"From {anchored.tzname()} ({zone.name}): {format_instant(converted)}"
        if not relative.want_calendar:
            line += f" ({score_instant(anchored, now).narrative})"
        lines.append(line)
    lines.append(f"As UNIX timestamp: {unix_seconds(wall_clock.replace(tzinfo=timezone.utc))}")

    highlights: List[Highlight] = []
    if relative.want_calendar:
        lines, highlights = attach_calendar(lines, local, now)

    return Guess(
        rendering="In local time: " + format_instant(local),
        comment=relative.narrative,
        additional=lines,
        highlights=highlights,
        source=GuessSource.DATE_WITHOUT_ZONE.value,
        goodness=relative.goodness,
    )


def guess_naive_date(token: str, config: GuessConfig, now: datetime) -> List[Guess]:
    """One guess per distinct naive reading of ``token``."""
    return [naive_date_guess(value, config, now) for _, value in parse_naive(token)]
