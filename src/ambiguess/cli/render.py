"""Terminal rendering of guesses with rich."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from rich.text import Text

from ambiguess.guessing.models import CellRole, Guess, Highlight

INDENT = "    "

CELL_STYLES: Dict[CellRole, str] = {
    CellRole.GIVEN: "bold on red",
    CellRole.TODAY: "bold underline",
    CellRole.SUNDAY: "magenta",
}


def render_guess(guess: Guess, *, verbose: bool = False) -> Text:
    """Render one guess: header line, then indented additional lines.

    Highlights only add styles to existing characters, so the plain text
    is identical whether or not the terminal shows colors.
    """
    text = Text()
    if verbose:
        text.append(f"[goodness: {guess.goodness}, source: {guess.source}]\n")
    text.append(guess.rendering, style="bold")
    if guess.comment:
        text.append(f" ({guess.comment})")
    text.append("\n")

    by_line: Dict[int, List[Highlight]] = defaultdict(list)
    for highlight in guess.highlights:
        by_line[highlight.line].append(highlight)

    for i, line in enumerate(guess.additional):
        row = Text(INDENT + line)
        for highlight in by_line.get(i, ()):
            row.stylize(
                CELL_STYLES[highlight.role],
                len(INDENT) + highlight.start,
                len(INDENT) + highlight.end,
            )
        text.append_text(row)
        text.append("\n")
    return text
