"""Block tree models for editor documents."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    """Immutable base for every node in the block tree."""

    model_config = ConfigDict(frozen=True)


class TextLeaf(_Node):
    """A terminal run of text with optional marks."""

    text: str = ""
    bold: bool = False
    italic: bool = False
    underline: bool = False


class Link(_Node):
    """An inline link wrapping text runs."""

    type: Literal["link"] = "link"
    href: str = ""
    children: list[TextLeaf] = Field(default_factory=list)


InlineNode = Union[TextLeaf, Link]


class Paragraph(_Node):
    type: Literal["paragraph"] = "paragraph"
    children: list[InlineNode] = Field(default_factory=list)
    text_align: str | None = None


class Heading(_Node):
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    children: list[InlineNode] = Field(default_factory=list)
    text_align: str | None = None


class Divider(_Node):
    """Horizontal separator; never carries content."""

    type: Literal["divider"] = "divider"


class CodeMarker(_Node):
    """The editor's code node.

    Inside a blockquote it forms the section title marker; on its own it is an
    ordinary code block.
    """

    type: Literal["code"] = "code"
    children: list[TextLeaf] = Field(default_factory=list)


class Blockquote(_Node):
    type: Literal["blockquote"] = "blockquote"
    children: list[Block] = Field(default_factory=list)


class ComponentBlock(_Node):
    """A named widget invocation with opaque props."""

    type: Literal["component-block"] = "component-block"
    component: str
    props: dict[str, Any] = Field(default_factory=dict)


class LayoutArea(_Node):
    """One column of a multi-column layout."""

    type: Literal["layout-area"] = "layout-area"
    children: list[Block] = Field(default_factory=list)


class Layout(_Node):
    """A multi-column layout.

    Attributes:
        columns: Relative column weights, one per area (e.g. ``[2, 1, 1]``).
        children: The layout areas, in column order.
    """

    type: Literal["layout"] = "layout"
    columns: list[float] = Field(default_factory=list)
    children: list[LayoutArea] = Field(default_factory=list)


class GenericBlock(_Node):
    """Any editor node kind without a dedicated model (lists, list items, ...).

    Attributes:
        type: The editor's node type string.
        children: Parsed child nodes, block or inline.
        attributes: Remaining keys of the raw node, kept verbatim.
    """

    type: str
    children: list[Node] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)


Block = Union[
    Paragraph,
    Heading,
    Divider,
    Blockquote,
    CodeMarker,
    ComponentBlock,
    Layout,
    GenericBlock,
]

Node = Union[Block, TextLeaf, Link]

for _model in (Blockquote, LayoutArea, Layout, GenericBlock):
    _model.model_rebuild()
