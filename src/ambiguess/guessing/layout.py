"""Side-by-side composition of two text blocks."""

from __future__ import annotations

from typing import List, Sequence

GUTTER = 4


def right_column(left: Sequence[str]) -> int:
    """Column at which right-hand lines start when composed with ``left``."""
    width = max((len(line) for line in left), default=0)
    return width + GUTTER if width else 0


def side_by_side(left: Sequence[str], right: Sequence[str]) -> List[str]:
    """Merge two line blocks into two aligned columns.

    Line ``i`` of the result is ``left[i]`` padded to the widest left line
    plus a four-column gutter, followed by ``right[i]``. Left lines without
    a partner are emitted unpadded; right lines without a partner are
    indented to the right column. With an empty left block the right block
    is returned unchanged.
    """
    column = right_column(left)
    if not column:
        return list(right)

    out = []
    for i in range(max(len(left), len(right))):
        if i >= len(right):
            out.append(left[i])
            continue
        line = left[i] if i < len(left) else ""
        out.append(line.ljust(column) + right[i])
    return out
