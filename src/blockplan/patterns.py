"""Shared shape predicates for block trees."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from blockplan.config import BLOCKPLAN_ANCHOR_COMPONENT, BLOCKPLAN_BREAKOUT_COMPONENTS
from blockplan.schemas import (
    Block,
    Blockquote,
    CodeMarker,
    ComponentBlock,
    Layout,
    Link,
    Node,
    Paragraph,
    TextLeaf,
)


def title_marker_text(block: Block) -> str | None:
    """Return the title carried by a title marker, or None if ``block`` is not one.

    A title marker is a blockquote whose sole child is a code node whose sole
    child is a non-empty text leaf.
    """
    if not isinstance(block, Blockquote) or len(block.children) != 1:
        return None
    code = block.children[0]
    if not isinstance(code, CodeMarker) or len(code.children) != 1:
        return None
    leaf = code.children[0]
    if not isinstance(leaf, TextLeaf) or not leaf.text:
        return None
    return leaf.text


def is_empty_paragraph(block: Block) -> bool:
    """Check for the stray empty paragraph the editor leaves between blocks."""
    return (
        isinstance(block, Paragraph)
        and len(block.children) == 1
        and isinstance(block.children[0], TextLeaf)
        and block.children[0].text == ""
    )


def is_anchor(block: Block, anchor_component: str = BLOCKPLAN_ANCHOR_COMPONENT) -> bool:
    return isinstance(block, ComponentBlock) and block.component == anchor_component


def is_breakout(
    block: Block,
    breakout_components: AbstractSet[str] = BLOCKPLAN_BREAKOUT_COMPONENTS,
) -> bool:
    """Check whether ``block`` is drawn edge to edge instead of inside a panel."""
    if isinstance(block, Layout):
        return True
    return isinstance(block, ComponentBlock) and block.component in breakout_components


def plain_text(nodes: Iterable[Node]) -> str:
    """Concatenate the text of every leaf below ``nodes``."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, TextLeaf):
            parts.append(node.text)
        elif isinstance(node, Link):
            parts.append(plain_text(node.children))
        else:
            parts.append(plain_text(getattr(node, "children", [])))
    return "".join(parts)
