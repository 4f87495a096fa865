"""Infer per-column text alignment for multi-column layouts."""

from __future__ import annotations

from typing import Sequence

from blockplan.schemas import Alignment


def resolve_alignment(columns: Sequence[float]) -> list[Alignment]:
    """Map layout column weights to one alignment per column.

    The widest column keeps its natural reading position and the narrower
    columns lean toward the opposite margin::

        [1, 1]    -> left, right
        [1, 1, 1] -> left, center, right
        [2, 1, 1] -> left, right, right
        [1, 2, 1] -> left, center, right
        [1, 1, 2] -> left, left, right
    """
    count = len(columns)
    if count == 0:
        return []
    if count == 1:
        return [Alignment.LEFT]
    if count == 2:
        return [Alignment.LEFT, Alignment.RIGHT]

    last = count - 1
    if all(weight == columns[0] for weight in columns):
        return [Alignment.LEFT] + [Alignment.CENTER] * (count - 2) + [Alignment.RIGHT]

    widest = list(columns).index(max(columns))
    if widest == 0:
        return [Alignment.LEFT] + [Alignment.RIGHT] * last
    if widest == last:
        return [Alignment.LEFT] * last + [Alignment.RIGHT]

    alignments: list[Alignment] = []
    for index in range(count):
        if index < widest:
            alignments.append(Alignment.LEFT)
        elif index == widest:
            alignments.append(Alignment.CENTER)
        else:
            alignments.append(Alignment.RIGHT)
    return alignments
