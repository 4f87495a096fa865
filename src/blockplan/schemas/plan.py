"""Render plan models."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from blockplan.schemas.blocks import Block, ComponentBlock


class Alignment(str, Enum):
    """Text alignment for a layout column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class RenderGroup(BaseModel):
    """A run of blocks painted together.

    Boxed groups are drawn inside a bordered panel; breakout groups hold a
    single block drawn edge to edge. ``alignments`` is only set for breakout
    groups wrapping a layout block.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["boxed", "breakout"]
    blocks: list[Block] = Field(default_factory=list)
    alignments: list[Alignment] | None = None


class PlannedSection(BaseModel):
    """A section with its content already partitioned into render groups."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    id: str | None = None
    groups: list[RenderGroup] = Field(default_factory=list)


class RenderPlan(BaseModel):
    """Everything a presentation layer needs to paint one document."""

    model_config = ConfigDict(frozen=True)

    pre: list[PlannedSection] = Field(default_factory=list)
    anchor: ComponentBlock | None = None
    post: list[PlannedSection] = Field(default_factory=list)
