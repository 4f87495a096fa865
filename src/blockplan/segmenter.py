"""Split a flat block list into titled sections around the form anchor."""

from __future__ import annotations

import logging
from typing import Sequence

from blockplan.config import BLOCKPLAN_ANCHOR_COMPONENT
from blockplan.patterns import is_anchor, is_empty_paragraph, title_marker_text
from blockplan.schemas import Block, ComponentBlock, Divider, Section, SegmentationResult

logger = logging.getLogger(__name__)


class _OpenSection:
    """Mutable accumulator for the section currently being scanned."""

    def __init__(self, *, title: str | None = None, id: str | None = None) -> None:
        self.title = title
        self.id = id
        self.content: list[Block] = []

    def close(self) -> Section:
        return Section(title=self.title, id=self.id, content=self.content)


def segment(
    blocks: Sequence[Block],
    *,
    anchor_component: str = BLOCKPLAN_ANCHOR_COMPONENT,
) -> SegmentationResult:
    """Segment a document into pre-form sections, the form anchor and post-form sections.

    Before the anchor, each title marker opens a new section titled with the
    marker text. After the anchor, a section only starts at a divider that is
    immediately followed by a title marker; the marker text becomes the
    section id. Dividers are dropped everywhere, and content seen while no
    section is open is discarded.

    Args:
        blocks: The document's top-level blocks.
        anchor_component: Component name of the form anchor. Only the first
            matching block is the anchor; later ones are ordinary content.

    Returns:
        The segmentation result. Shapes that do not match a pattern are
        treated as content; this function never raises for malformed input.
    """
    pre: list[Section] = []
    post: list[Section] = []
    discarded: list[Block] = []
    anchor: ComponentBlock | None = None
    current: _OpenSection | None = None

    i = 0
    while i < len(blocks):
        block = blocks[i]
        consumed = 1

        if anchor is None:
            title = title_marker_text(block)
            if is_anchor(block, anchor_component):
                if current is not None:
                    pre.append(current.close())
                    current = None
                anchor = block
            elif title is not None:
                if current is not None:
                    pre.append(current.close())
                current = _OpenSection(title=title)
            elif not isinstance(block, Divider):
                _append(current, block, discarded)
        else:
            marker_id = _post_section_marker(blocks, i)
            if marker_id is not None:
                if current is not None:
                    post.append(current.close())
                current = _OpenSection(id=marker_id)
                # The divider and the title marker after it.
                consumed = 2
            elif not isinstance(block, Divider):
                _append(current, block, discarded)

        i += consumed

    if current is not None:
        (pre if anchor is None else post).append(current.close())

    return SegmentationResult(pre=pre, anchor=anchor, post=post, discarded=discarded)


def _post_section_marker(blocks: Sequence[Block], index: int) -> str | None:
    """Return the section id when ``blocks[index]`` is a divider followed by a title marker."""
    if not isinstance(blocks[index], Divider) or index + 1 >= len(blocks):
        return None
    return title_marker_text(blocks[index + 1])


def _append(current: _OpenSection | None, block: Block, discarded: list[Block]) -> None:
    if current is not None:
        current.content.append(block)
        return
    if not is_empty_paragraph(block):
        logger.debug(
            "Discarding %s block outside any titled section",
            getattr(block, "type", type(block).__name__),
        )
    discarded.append(block)
