"""Byte count guesses.

An integer may be a byte count; so may a number with a unit suffix such
as ``8TiB``, ``1.5 GB`` or ``512K``. Either way the guess names the exact
byte count and lists it in every unit large enough to be meaningful,
binary and decimal side by side ("8.0 TiB (8.8 TB)").
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ambiguess.guessing.models import Guess, GuessSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ByteUnit:
    """A binary unit with its decimal counterpart and a short alias."""

    mult: int
    alt_mult: int
    sym: str
    alt_sym: str
    alias: str


BYTE_UNITS: Tuple[ByteUnit, ...] = tuple(
    ByteUnit(1024 ** power, 1000 ** power, f"{prefix}iB", f"{prefix}B", prefix)
    for power, prefix in enumerate("KMGTPE", start=1)
)

# Goodness of a byte-count reading, judged by how a unit fits the value
GOODNESS_LIKELY = 10
GOODNESS_SLIGHTLY_UNLIKELY = -1
GOODNESS_MILDLY_UNLIKELY = -5
GOODNESS_STRONGLY_UNLIKELY = -50


def unit_goodness(quotient: float) -> int:
    """Score how natural a value expressed in some unit looks.

    Below 0.01 the unit is far too large; above 1000 a larger unit would
    have been used; anything from 1 to 1000 is what people actually write.
    """
    if quotient < 0.01:
        return GOODNESS_STRONGLY_UNLIKELY
    if quotient > 1000:
        return GOODNESS_MILDLY_UNLIKELY
    if quotient >= 1:
        return GOODNESS_LIKELY
    return GOODNESS_SLIGHTLY_UNLIKELY


def byte_goodness(n: int) -> int:
    """Goodness of reading ``n`` as a byte count: the best fitting unit wins."""
    return max(unit_goodness(n / unit.mult) for unit in BYTE_UNITS)


def bytes_info(n: int) -> List[str]:
    """One line per unit whose decimal quantity is at least one."""
    lines = []
    for unit in BYTE_UNITS:
        binary = n / unit.mult
        decimal = n / unit.alt_mult
        if decimal < 1:
            continue
        lines.append(f"{binary:.1f} {unit.sym} ({decimal:.1f} {unit.alt_sym})")
    logger.debug(f"bytes_info({n}): {lines}")
    return lines


def parse_unit_suffix(token: str) -> Optional[Tuple[int, float]]:
    """Split a unit-suffixed number into ``(multiplier, value)``.

    Binary symbols (KiB) and aliases (K) map to binary multipliers, decimal
    symbols (KB) to decimal ones. Returns None when no unit matches or the
    remainder is not a finite, non-negative number.
    """
    for unit in BYTE_UNITS:
        for suffix, mult in ((unit.sym, unit.mult), (unit.alias, unit.mult), (unit.alt_sym, unit.alt_mult)):
            if not token.endswith(suffix):
                continue
            number = token[: -len(suffix)].strip()
            try:
                value = float(number)
            except ValueError:
                logger.debug(f"cannot parse {number!r} as float")
                return None
            if not math.isfinite(value * mult) or value < 0:
                logger.debug(f"{number!r} is not a usable byte quantity")
                return None
            return mult, value
    return None


def guess_byte_size(n: int) -> List[Guess]:
    """Read a plain non-negative integer as a byte count."""
    if n < 0:
        return []
    try:
        float(n)
    except OverflowError:
        logger.debug(f"{n} is too large to be a byte count")
        return []
    return [Guess(
        rendering=f"{n} bytes",
        additional=bytes_info(n),
        source=GuessSource.BYTES.value,
        goodness=byte_goodness(n),
    )]


def guess_bytes_with_unit(mult: int, value: float) -> List[Guess]:
    """Read a number with an explicit unit as a byte count.

    The unit was stated rather than inferred, so the reading is always
    scored as likely.
    """
    n = int(value * mult)
    return [Guess(
        rendering=f"{n} bytes",
        additional=bytes_info(n),
        source=GuessSource.BYTES_WITH_UNIT.value,
        goodness=GOODNESS_LIKELY,
    )]
