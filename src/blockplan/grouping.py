"""Partition section content into boxed and breakout render groups."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from blockplan.config import BLOCKPLAN_BREAKOUT_COMPONENTS
from blockplan.patterns import is_breakout, is_empty_paragraph
from blockplan.schemas import Block, Divider, RenderGroup


def partition(
    content: Sequence[Block],
    *,
    breakout_components: AbstractSet[str] = BLOCKPLAN_BREAKOUT_COMPONENTS,
) -> list[RenderGroup]:
    """Group consecutive boxed blocks and isolate each breakout block.

    Layout blocks and the configured full-width components become
    single-block breakout groups; runs of everything else become boxed groups.
    Empty paragraphs and dividers are skipped. Group order follows the input
    and no boxed group is ever empty.
    """
    groups: list[RenderGroup] = []
    boxed: list[Block] = []

    for block in content:
        if isinstance(block, Divider) or is_empty_paragraph(block):
            continue
        if is_breakout(block, breakout_components):
            if boxed:
                groups.append(RenderGroup(kind="boxed", blocks=boxed))
                boxed = []
            groups.append(RenderGroup(kind="breakout", blocks=[block]))
        else:
            boxed.append(block)

    if boxed:
        groups.append(RenderGroup(kind="boxed", blocks=boxed))
    return groups
