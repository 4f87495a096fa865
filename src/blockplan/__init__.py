"""blockplan: turn editor block trees into section and render-group plans."""

from blockplan.alignment import resolve_alignment
from blockplan.document import load_document, parse_block
from blockplan.exceptions import BlockplanError, ParseError
from blockplan.grouping import partition
from blockplan.markdown import blocks_to_markdown
from blockplan.output_formatter import format_plan
from blockplan.patterns import is_breakout
from blockplan.planner import PlanOptions, build_render_plan
from blockplan.schemas import (
    Alignment,
    Block,
    Blockquote,
    CodeMarker,
    ComponentBlock,
    Divider,
    GenericBlock,
    Heading,
    Layout,
    LayoutArea,
    Link,
    Paragraph,
    PlannedSection,
    PlanPreview,
    RenderGroup,
    RenderPlan,
    Section,
    SegmentationResult,
    TextLeaf,
)
from blockplan.segmenter import segment

__all__ = [
    "Alignment",
    "Block",
    "BlockplanError",
    "Blockquote",
    "CodeMarker",
    "ComponentBlock",
    "Divider",
    "GenericBlock",
    "Heading",
    "Layout",
    "LayoutArea",
    "Link",
    "Paragraph",
    "ParseError",
    "PlanOptions",
    "PlanPreview",
    "PlannedSection",
    "RenderGroup",
    "RenderPlan",
    "Section",
    "SegmentationResult",
    "TextLeaf",
    "blocks_to_markdown",
    "build_render_plan",
    "format_plan",
    "is_breakout",
    "load_document",
    "parse_block",
    "partition",
    "resolve_alignment",
    "segment",
]
