"""UNIX timestamp guesses.

An integer is read as elapsed seconds, milliseconds, microseconds and
nanoseconds since the epoch. Each reading is scored on its own; the one
landing close to now is usually the intended resolution.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Tuple

from ambiguess.guessing.instants import format_instant, instant_guess
from ambiguess.guessing.models import Guess, GuessConfig, GuessSource

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

RESOLUTIONS: Tuple[Tuple[GuessSource, Callable[[int], timedelta]], ...] = (
    (GuessSource.TIMESTAMP_SECONDS, lambda n: timedelta(seconds=n)),
    (GuessSource.TIMESTAMP_MILLISECONDS, lambda n: timedelta(milliseconds=n)),
    (GuessSource.TIMESTAMP_MICROSECONDS, lambda n: timedelta(microseconds=n)),
    # datetime stops at microseconds
    (GuessSource.TIMESTAMP_NANOSECONDS, lambda n: timedelta(microseconds=n // 1000)),
)


def timestamp_instant(n: int, to_delta: Callable[[int], timedelta]) -> Optional[datetime]:
    """The instant ``n`` units after the epoch, or None if out of range."""
    try:
        return EPOCH + to_delta(n)
    except OverflowError:
        return None


def guess_timestamp(n: int, config: GuessConfig, now: datetime) -> List[Guess]:
    """Read an integer as a UNIX timestamp at every supported resolution.

    Args:
        n: Candidate timestamp; non-positive values yield no guesses
        config: Zones for the conversion table and the local display zone
        now: Caller-supplied current instant

    Returns:
        Up to four guesses, in seconds/ms/us/ns order
    """
    if n <= 0:
        return []

    guesses = []
    for source, to_delta in RESOLUTIONS:
        instant = timestamp_instant(n, to_delta)
        if instant is None:
            logger.debug(f"{n} is out of range as {source.value}")
            continue
        try:
            local = instant.astimezone(config.local)
        except OverflowError:
            logger.debug(f"{n} is out of range as {source.value} in the local zone")
            continue
        guesses.append(instant_guess(
            local,
            config,
            now,
            rendering=f"Timestamp {n} is {format_instant(local)}",
            source=source.value,
        ))
    logger.debug(f"guess_timestamp({n}): {len(guesses)} guesses")
    return guesses
