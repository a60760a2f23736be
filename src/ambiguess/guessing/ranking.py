"""Ordering and filtering of guesses for presentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ambiguess.guessing.models import Guess

NO_GOOD_GUESSES = "no good guesses, showing unlikely ones"


@dataclass(frozen=True)
class Ranking:
    """Guesses to show, and the note to print before them if any."""

    guesses: List[Guess]
    note: Optional[str] = None


def sort_guesses(guesses: Sequence[Guess]) -> List[Guess]:
    """Most plausible first; ties keep their discovery order."""
    return sorted(guesses, key=lambda g: g.goodness, reverse=True)


def rank(guesses: Sequence[Guess], *, sort: bool = True, show_unlikely: bool = False) -> Ranking:
    """Select the guesses to present.

    Args:
        guesses: All guesses for one token, in discovery order
        sort: Sort by descending goodness (stable)
        show_unlikely: Also show guesses with negative goodness

    Returns:
        Ranking. When every guess is unlikely and ``show_unlikely`` is off,
        all of them are returned anyway, with an explanatory note.
    """
    ordered = sort_guesses(guesses) if sort else list(guesses)
    if show_unlikely:
        return Ranking(ordered)

    likely = [g for g in ordered if g.goodness >= 0]
    if likely or not ordered:
        return Ranking(likely)
    return Ranking(ordered, note=NO_GOOD_GUESSES)
