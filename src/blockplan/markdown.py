"""Serialize block trees to Markdown for previews."""

from __future__ import annotations

import re
from typing import Sequence

from blockplan.alignment import resolve_alignment
from blockplan.patterns import plain_text
from blockplan.schemas import (
    Block,
    Blockquote,
    CodeMarker,
    ComponentBlock,
    Divider,
    GenericBlock,
    Heading,
    InlineNode,
    Layout,
    Link,
    Paragraph,
    TextLeaf,
)

_LIST_TYPES = {"unordered-list": False, "ordered-list": True}


def blocks_to_markdown(blocks: Sequence[Block]) -> str:
    """Convert a block list into Markdown, one paragraph per block."""
    parts = [_serialize_block(block) for block in blocks]
    return "\n\n".join(part for part in parts if part).strip()


def _serialize_block(block: Block) -> str:
    if isinstance(block, Paragraph):
        return _cleanup_inline_text(_serialize_inline(block.children))

    if isinstance(block, Heading):
        heading = _normalize_text(_serialize_inline(block.children))
        if not heading:
            return ""
        return f"{'#' * block.level} {heading}"

    if isinstance(block, Divider):
        return "---"

    if isinstance(block, Blockquote):
        content = blocks_to_markdown(block.children)
        if not content:
            return ""
        return "\n".join(f"> {line}" if line else ">" for line in content.splitlines())

    if isinstance(block, CodeMarker):
        code = plain_text(block.children)
        return f"`{code}`" if code else ""

    if isinstance(block, ComponentBlock):
        return f"[component: {block.component}]"

    if isinstance(block, Layout):
        return _serialize_layout(block)

    if isinstance(block, GenericBlock):
        if block.type in _LIST_TYPES:
            return "\n".join(_serialize_list(block, ordered=_LIST_TYPES[block.type]))
        inline = [child for child in block.children if isinstance(child, (TextLeaf, Link))]
        if inline and len(inline) == len(block.children):
            return _cleanup_inline_text(_serialize_inline(inline))
        return blocks_to_markdown(
            [child for child in block.children if not isinstance(child, (TextLeaf, Link))]
        )

    return ""


def _serialize_layout(layout: Layout) -> str:
    alignments = resolve_alignment(layout.columns)
    blocks: list[str] = []
    for index, area in enumerate(layout.children, start=1):
        label = f"Column {index}"
        if index <= len(alignments):
            label += f" ({alignments[index - 1].value})"
        content = blocks_to_markdown(area.children)
        blocks.append(f"{label}:\n{content}" if content else f"{label}:")
    return "\n\n".join(blocks)


def _serialize_list(block: GenericBlock, indent: int = 0, *, ordered: bool) -> list[str]:
    lines: list[str] = []
    number = 0
    for item in block.children:
        if not isinstance(item, GenericBlock):
            continue
        number += 1
        prefix = "  " * indent + (f"{number}. " if ordered else "- ")
        text_parts: list[str] = []
        nested: list[GenericBlock] = []
        for child in item.children:
            if isinstance(child, GenericBlock) and child.type in _LIST_TYPES:
                nested.append(child)
            elif isinstance(child, (TextLeaf, Link)):
                text_parts.append(_serialize_inline([child]))
            else:
                text_parts.append(_serialize_inline(_inline_descendants(child)))
        item_text = _cleanup_inline_text("".join(text_parts))
        lines.append(prefix + item_text if item_text else prefix.rstrip())
        for child in nested:
            lines.extend(_serialize_list(child, indent + 1, ordered=_LIST_TYPES[child.type]))
    return lines


def _inline_descendants(node) -> list[InlineNode]:
    found: list[InlineNode] = []
    for child in getattr(node, "children", []):
        if isinstance(child, (TextLeaf, Link)):
            found.append(child)
        else:
            found.extend(_inline_descendants(child))
    return found


def _serialize_inline(nodes: Sequence[InlineNode]) -> str:
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Link):
            text = _serialize_inline(node.children).strip()
            if node.href:
                parts.append(f"[{text or node.href}]({node.href})")
            else:
                parts.append(text)
            continue
        text = node.text
        if not text:
            continue
        if node.underline:
            text = f"<u>{text}</u>"
        if node.italic:
            text = f"*{text}*"
        if node.bold:
            text = f"**{text}**"
        parts.append(text)
    return "".join(parts)


def _cleanup_inline_text(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\s*\n\s*", "\n", text)
    return text.strip()


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
