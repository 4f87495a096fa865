"""Shared schemas for blockplan."""

from blockplan.schemas.blocks import (
    Block,
    Blockquote,
    CodeMarker,
    ComponentBlock,
    Divider,
    GenericBlock,
    Heading,
    InlineNode,
    Layout,
    LayoutArea,
    Link,
    Node,
    Paragraph,
    TextLeaf,
)
from blockplan.schemas.plan import Alignment, PlannedSection, RenderGroup, RenderPlan
from blockplan.schemas.preview import PlanPreview
from blockplan.schemas.sections import Section, SegmentationResult

__all__ = [
    "Alignment",
    "Block",
    "Blockquote",
    "CodeMarker",
    "ComponentBlock",
    "Divider",
    "GenericBlock",
    "Heading",
    "InlineNode",
    "Layout",
    "LayoutArea",
    "Link",
    "Node",
    "Paragraph",
    "PlanPreview",
    "PlannedSection",
    "RenderGroup",
    "RenderPlan",
    "Section",
    "SegmentationResult",
    "TextLeaf",
]
