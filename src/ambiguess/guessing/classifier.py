"""Token classification.

Every interpretation kind is a plain function ``(token, config, now) ->
[Guess]``. The classifier calls all of them, in a fixed order, and
concatenates what they return: a token may be several things at once,
and no strategy ever prevents another from running.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from functools import partial
from typing import Callable, List, Optional, Tuple

from ambiguess.errors import ClassificationError
from ambiguess.guessing.bytesize import guess_byte_size, guess_bytes_with_unit, parse_unit_suffix
from ambiguess.guessing.dates import guess_confident_date, guess_naive_date
from ambiguess.guessing.models import Guess, GuessConfig
from ambiguess.guessing.network import NullResolver, Resolver, guess_ip, parse_ip
from ambiguess.guessing.timestamps import guess_timestamp

logger = logging.getLogger(__name__)

Strategy = Callable[[str, GuessConfig, datetime], List[Guess]]

_INTEGER = re.compile(r"[+-]?\d+")


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


def integer_guesses(token: str, config: GuessConfig, now: datetime) -> List[Guess]:
    """An integer is both a byte count and a timestamp."""
    if not _INTEGER.fullmatch(token):
        return []
    try:
        n = int(token)
    except ValueError as e:
        logger.debug(f"cannot parse {token[:20]!r}... as integer: {e}")
        return []
    logger.debug(f"parsed {token!r} as integer")
    return guess_byte_size(n) + guess_timestamp(n, config, now)


def now_guesses(token: str, config: GuessConfig, now: datetime) -> List[Guess]:
    """The word "now" stands for the current UNIX time."""
    if token.lower() != "now":
        return []
    return guess_timestamp(int(now.timestamp()), config, now)


def unit_guesses(token: str, config: GuessConfig, now: datetime) -> List[Guess]:
    """A number with a byte unit suffix."""
    parsed = parse_unit_suffix(token)
    if parsed is None:
        return []
    mult, value = parsed
    return guess_bytes_with_unit(mult, value)


def ip_guesses(token: str, config: GuessConfig, now: datetime, *, resolver: Resolver) -> List[Guess]:
    """An IPv4 or IPv6 literal."""
    address = parse_ip(token)
    if address is None:
        return []
    return guess_ip(address, resolver)


def strategies(resolver: Resolver) -> Tuple[Strategy, ...]:
    """All strategies in dispatch order."""
    return (
        integer_guesses,
        now_guesses,
        guess_confident_date,
        guess_naive_date,
        partial(ip_guesses, resolver=resolver),
        unit_guesses,
    )


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def classify(
    token: str,
    config: GuessConfig,
    now: datetime,
    resolver: Optional[Resolver] = None,
) -> List[Guess]:
    """Collect every interpretation of ``token``, in discovery order.

    Args:
        token: Trimmed input string
        config: Pre-validated zones and local zone
        now: Current instant, read once by the caller for the whole pass
        resolver: DNS collaborator for IP guesses (no lookups if None)

    Returns:
        Guesses from all strategies, possibly empty

    Raises:
        InternalConsistencyError: If zone disambiguation breaks down
    """
    logger.debug(f"Trying to guess {token!r}")
    guesses: List[Guess] = []
    for strategy in strategies(resolver or NullResolver()):
        guesses.extend(strategy(token, config, now))
    return guesses


def guess(
    token: str,
    config: GuessConfig,
    now: datetime,
    resolver: Optional[Resolver] = None,
) -> List[Guess]:
    """Like ``classify`` but fail loudly when nothing matched.

    Raises:
        ClassificationError: If no strategy produced a guess
    """
    guesses = classify(token, config, now, resolver)
    if not guesses:
        raise ClassificationError(
            f"Could not classify {token!r}",
            details={"token": token},
        )
    return guesses
