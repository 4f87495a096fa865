"""Build a render plan from an editor document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from blockplan.alignment import resolve_alignment
from blockplan.config import BLOCKPLAN_ANCHOR_COMPONENT, BLOCKPLAN_BREAKOUT_COMPONENTS
from blockplan.document import load_document
from blockplan.grouping import partition
from blockplan.schemas import Block, Layout, PlannedSection, RenderGroup, RenderPlan, Section
from blockplan.segmenter import segment

logger = logging.getLogger(__name__)


@dataclass
class PlanOptions:
    """Options for render planning.

    Attributes:
        anchor_component: Component name of the form anchor block.
        breakout_components: Component names rendered edge to edge.
    """

    anchor_component: str = BLOCKPLAN_ANCHOR_COMPONENT
    breakout_components: frozenset[str] = field(
        default_factory=lambda: BLOCKPLAN_BREAKOUT_COMPONENTS
    )


def build_render_plan(
    document: Sequence[Block] | str | bytes | Mapping[str, Any] | list[Any],
    *,
    options: PlanOptions | None = None,
) -> RenderPlan:
    """Segment a document and partition every section into render groups.

    Args:
        document: Parsed blocks, or raw editor JSON accepted by
            :func:`blockplan.document.load_document`.
        options: Planning options. Uses configured defaults if None.

    Returns:
        The render plan, with alignments resolved for every layout group.

    Raises:
        ParseError: If ``document`` is raw JSON that cannot be loaded.
    """
    opts = options or PlanOptions()
    blocks = _ensure_blocks(document)

    result = segment(blocks, anchor_component=opts.anchor_component)
    pre = [_plan_section(section, opts) for section in result.pre]
    post = [_plan_section(section, opts) for section in result.post]

    logger.info(
        "Planned document: %d pre-form sections, %d post-form sections, anchor=%s, discarded=%d",
        len(pre),
        len(post),
        result.anchor.component if result.anchor else None,
        len(result.discarded),
    )
    return RenderPlan(pre=pre, anchor=result.anchor, post=post)


def _ensure_blocks(document: Any) -> list[Block]:
    if isinstance(document, (str, bytes, bytearray, Mapping)):
        return load_document(document)
    blocks: list[Block] = []
    for item in document:
        if isinstance(item, Mapping):
            # Raw nodes mixed in with parsed blocks go through the loader one by one.
            blocks.extend(load_document([item]))
        else:
            blocks.append(item)
    return blocks


def _plan_section(section: Section, opts: PlanOptions) -> PlannedSection:
    groups = [
        _with_alignments(group)
        for group in partition(section.content, breakout_components=opts.breakout_components)
    ]
    return PlannedSection(title=section.title, id=section.id, groups=groups)


def _with_alignments(group: RenderGroup) -> RenderGroup:
    if group.kind != "breakout" or not isinstance(group.blocks[0], Layout):
        return group
    layout = group.blocks[0]
    if len(layout.columns) != len(layout.children):
        logger.debug(
            "Layout has %d column weights for %d areas",
            len(layout.columns),
            len(layout.children),
        )
    return group.model_copy(update={"alignments": resolve_alignment(layout.columns)})
