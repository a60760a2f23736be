"""Data models shared by the guessers.

Defines:
- Guess: one candidate interpretation of a token
- Highlight / CellRole: presentation hints for calendar cells
- NamedZone / GuessConfig: the read-only configuration threaded into
  every guesser call
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum
from typing import Any, Dict, Tuple


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class GuessSource(str, Enum):
    """Provenance tag naming the heuristic that produced a guess."""

    BYTES = "byte count without explicit unit"
    BYTES_WITH_UNIT = "byte count with unit"
    TIMESTAMP_SECONDS = "timestamp (seconds)"
    TIMESTAMP_MILLISECONDS = "timestamp (milliseconds)"
    TIMESTAMP_MICROSECONDS = "timestamp (microseconds)"
    TIMESTAMP_NANOSECONDS = "timestamp (nanoseconds)"
    DATE_WITH_ZONE = "date string with timezone"
    DATE_WITHOUT_ZONE = "date string without timezone"
    IP_ADDRESS = "IP address"

    def __str__(self) -> str:
        return self.value


class CellRole(Enum):
    """Role of a highlighted calendar cell, in decreasing precedence."""

    GIVEN = "given"     # The day the guessed instant falls on
    TODAY = "today"     # Today, when the calendar shows the current month
    SUNDAY = "sunday"


# ---------------------------------------------------------------------------
# Guess
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Highlight:
    """A styled span inside one of a guess's additional lines.

    Coordinates are plain text offsets, so applying or ignoring a
    highlight never changes the width of the line.
    """

    line: int
    start: int
    end: int
    role: CellRole

    def shifted(self, lines: int = 0, columns: int = 0) -> "Highlight":
        return Highlight(self.line + lines, self.start + columns, self.end + columns, self.role)


@dataclass(frozen=True)
class Guess:
    """One candidate interpretation of a token.

    Guesses are built once by a guesser and never mutated; the ranker
    only reorders and filters them.
    """

    rendering: str
    source: str
    goodness: int = 0
    comment: str = ""
    additional: Tuple[str, ...] = ()
    highlights: Tuple[Highlight, ...] = ()

    def __post_init__(self) -> None:
        if not self.rendering:
            raise ValueError("Guess rendering must not be empty")
        # Accept any sequence from callers, store tuples
        object.__setattr__(self, "additional", tuple(self.additional))
        object.__setattr__(self, "highlights", tuple(self.highlights))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "rendering": self.rendering,
            "comment": self.comment,
            "additional": list(self.additional),
            "source": self.source,
            "goodness": self.goodness,
        }


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NamedZone:
    """A configured time zone together with the name it was configured by."""

    name: str
    tz: tzinfo

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class GuessConfig:
    """Read-only configuration for one classification pass.

    Attributes:
        zones: Ordered, non-empty list of zones to convert to and from
        local: Zone used for naive dates and for displaying instants
        dns_timeout: Upper bound in seconds for each DNS lookup
    """

    zones: Tuple[NamedZone, ...]
    local: tzinfo
    dns_timeout: float = 2.0
