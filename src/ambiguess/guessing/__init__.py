"""Ranked multi-interpretation guessing for ambiguous tokens.

A token such as ``1443346122`` is at once a byte count and a UNIX
timestamp at four resolutions; ``2015-09-26 11:29:43 PDT`` is a date in
a zone that has to be worked out. The classifier collects every such
interpretation as a scored Guess and the ranker orders them.
"""

from ambiguess.guessing.calendar_view import calendar_highlights, render_calendar
from ambiguess.guessing.classifier import classify, guess
from ambiguess.guessing.layout import side_by_side
from ambiguess.guessing.models import (
    CellRole,
    Guess,
    GuessConfig,
    GuessSource,
    Highlight,
    NamedZone,
)
from ambiguess.guessing.network import NullResolver, Resolver, SocketResolver
from ambiguess.guessing.ranking import Ranking, rank
from ambiguess.guessing.relative import delta_now, score_instant

__all__ = [
    # Models
    "CellRole",
    "Guess",
    "GuessConfig",
    "GuessSource",
    "Highlight",
    "NamedZone",
    # Classification
    "classify",
    "guess",
    # Ranking
    "Ranking",
    "rank",
    # Rendering helpers
    "calendar_highlights",
    "render_calendar",
    "side_by_side",
    "delta_now",
    "score_instant",
    # DNS
    "NullResolver",
    "Resolver",
    "SocketResolver",
]
