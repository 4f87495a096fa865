"""Section models produced by the segmenter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from blockplan.schemas.blocks import Block, ComponentBlock


class Section(BaseModel):
    """A titled run of document content.

    Pre-form sections carry a display ``title``. Post-form sections carry an
    ``id`` taken from their title marker, which is never displayed.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    id: str | None = None
    content: list[Block] = Field(default_factory=list)


class SegmentationResult(BaseModel):
    """Output of a single segmentation pass.

    Attributes:
        pre: Sections before the form anchor, in document order.
        anchor: The form anchor block, if the document has one.
        post: Sections after the form anchor, in document order.
        discarded: Content blocks dropped because no section was open yet.
    """

    model_config = ConfigDict(frozen=True)

    pre: list[Section] = Field(default_factory=list)
    anchor: ComponentBlock | None = None
    post: list[Section] = Field(default_factory=list)
    discarded: list[Block] = Field(default_factory=list)
