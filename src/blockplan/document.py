"""Load editor JSON documents into block models."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from blockplan.exceptions import ParseError
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
    LayoutArea,
    Link,
    Node,
    Paragraph,
    TextLeaf,
)

logger = logging.getLogger(__name__)

_DOCUMENT_KEY = "document"
_STRUCTURAL_KEYS = {"type", "children"}


def load_document(source: str | bytes | Mapping[str, Any] | list[Any]) -> list[Block]:
    """Load a block list from the editor's portable JSON representation.

    Args:
        source: A list of block nodes, a mapping holding that list under
            ``"document"``, or JSON text encoding either of them.

    Returns:
        The parsed top-level blocks, in document order.

    Raises:
        ParseError: If the JSON text is invalid, the top-level value is not a
            block list, or the tree is nested too deeply to parse.
    """
    if isinstance(source, (str, bytes, bytearray)):
        try:
            source = json.loads(source)
        except ValueError as exc:
            raise ParseError(f"Document is not valid JSON: {exc}") from exc

    if isinstance(source, Mapping):
        if _DOCUMENT_KEY not in source:
            raise ParseError(f"Document mapping has no {_DOCUMENT_KEY!r} key")
        source = source[_DOCUMENT_KEY]

    if not isinstance(source, list):
        raise ParseError(f"Expected a list of blocks, got {type(source).__name__}")

    try:
        return _parse_blocks(source)
    except RecursionError as exc:
        raise ParseError("Document is nested too deeply to parse") from exc


def parse_block(node: Mapping[str, Any]) -> Node:
    """Convert one raw node into its model, falling back to ``GenericBlock``.

    Raises:
        RecursionError: If the node is nested deeper than the interpreter's
            recursion limit. :func:`load_document` reports this as ``ParseError``.
    """
    node_type = node.get("type")
    children = _raw_children(node)

    if node_type is None and "text" in node:
        return _parse_leaf(node)

    if node_type == "paragraph":
        return Paragraph(children=_parse_inline(children), text_align=node.get("textAlign"))

    if node_type == "heading":
        level = _parse_level(node.get("level"))
        if level is not None:
            return Heading(
                level=level,
                children=_parse_inline(children),
                text_align=node.get("textAlign"),
            )

    if node_type == "divider":
        return Divider()

    if node_type == "blockquote":
        return Blockquote(children=_parse_blocks(children))

    if node_type == "code":
        return CodeMarker(children=_parse_leaves(children))

    if node_type == "link":
        return Link(href=str(node.get("href") or ""), children=_parse_leaves(children))

    if node_type == "component-block":
        component = node.get("component")
        if isinstance(component, str):
            props = node.get("props")
            return ComponentBlock(
                component=component,
                props=dict(props) if isinstance(props, Mapping) else {},
            )

    if node_type == "layout":
        return Layout(columns=_parse_columns(node.get("layout")), children=_parse_areas(children))

    return GenericBlock(
        type=str(node_type or "unknown"),
        children=[parse_block(child) for child in _mappings(children)],
        attributes={key: value for key, value in node.items() if key not in _STRUCTURAL_KEYS},
    )


def _parse_blocks(nodes: Iterable[Any]) -> list[Block]:
    blocks: list[Block] = []
    for node in _mappings(nodes):
        parsed = parse_block(node)
        if isinstance(parsed, (TextLeaf, Link)):
            logger.debug("Skipping inline node in block position: %r", node)
            continue
        blocks.append(parsed)
    return blocks


def _parse_inline(nodes: Iterable[Any]) -> list[InlineNode]:
    inline: list[InlineNode] = []
    for node in _mappings(nodes):
        parsed = parse_block(node)
        if isinstance(parsed, (TextLeaf, Link)):
            inline.append(parsed)
        else:
            # Unmodelled inline elements (relationships, mentions) keep their text.
            inline.extend(_parse_leaves(_raw_children(node)))
    return inline


def _parse_leaves(nodes: Iterable[Any]) -> list[TextLeaf]:
    leaves: list[TextLeaf] = []
    for node in _mappings(nodes):
        if node.get("type") is None and "text" in node:
            leaves.append(_parse_leaf(node))
        else:
            leaves.extend(_parse_leaves(_raw_children(node)))
    return leaves


def _parse_leaf(node: Mapping[str, Any]) -> TextLeaf:
    text = node.get("text")
    return TextLeaf(
        text=text if isinstance(text, str) else "",
        bold=bool(node.get("bold")),
        italic=bool(node.get("italic")),
        underline=bool(node.get("underline")),
    )


def _parse_areas(nodes: Iterable[Any]) -> list[LayoutArea]:
    areas: list[LayoutArea] = []
    for node in _mappings(nodes):
        if node.get("type") != "layout-area":
            logger.debug("Skipping non-area child of layout: %r", node.get("type"))
            continue
        areas.append(LayoutArea(children=_parse_blocks(_raw_children(node))))
    return areas


def _parse_level(raw: Any) -> int | None:
    # Some serializers write integral levels as floats (2.0).
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    if isinstance(raw, float) and not raw.is_integer():
        return None
    level = int(raw)
    return level if 1 <= level <= 6 else None


def _parse_columns(raw: Any) -> list[float]:
    if not isinstance(raw, list):
        return []
    return [
        float(weight)
        for weight in raw
        if isinstance(weight, (int, float)) and not isinstance(weight, bool)
    ]


def _raw_children(node: Mapping[str, Any]) -> list[Any]:
    children = node.get("children")
    return children if isinstance(children, list) else []


def _mappings(nodes: Iterable[Any]) -> Iterable[Mapping[str, Any]]:
    for node in nodes:
        if not isinstance(node, Mapping):
            logger.debug("Skipping non-object node: %r", node)
            continue
        yield node
