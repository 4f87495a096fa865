"""Markdown preview output model."""

from __future__ import annotations

from pydantic import BaseModel


class PlanPreview(BaseModel):
    """Text preview of a render plan."""

    summary: str
    sections_tree: str
    content: str
