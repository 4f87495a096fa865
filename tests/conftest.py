"""Test setup for blockplan."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _marker(text: str) -> dict:
    return {"type": "blockquote", "children": [{"type": "code", "children": [{"text": text}]}]}


def _paragraph(text: str) -> dict:
    return {"type": "paragraph", "children": [{"text": text}]}


_DIVIDER = {"type": "divider", "children": [{"text": ""}]}


@pytest.fixture
def product_document() -> list[dict]:
    """A product page document as stored by the editor."""
    return [
        _paragraph(""),
        _marker("Describe"),
        _paragraph("hello"),
        _DIVIDER,
        _marker("Tech"),
        _paragraph("specs"),
        _DIVIDER,
        {
            "type": "component-block",
            "component": "formBlock",
            "props": {"formConfig": {"value": {"id": "contact"}}},
            "children": [{"type": "component-inline-prop", "children": [{"text": ""}]}],
        },
        _DIVIDER,
        _marker("detail"),
        _paragraph("more"),
    ]


@pytest.fixture
def rich_post_document(product_document: list[dict]) -> list[dict]:
    """The product document with breakout content in a second post-form section."""
    return product_document + [
        _DIVIDER,
        _marker("gallery"),
        _paragraph("intro"),
        {
            "type": "component-block",
            "component": "carousel",
            "props": {"items": []},
            "children": [],
        },
        {
            "type": "layout",
            "layout": [1, 2, 1],
            "children": [
                {"type": "layout-area", "children": [_paragraph("left")]},
                {"type": "layout-area", "children": [_paragraph("middle")]},
                {"type": "layout-area", "children": [_paragraph("right")]},
            ],
        },
        _paragraph(""),
        _paragraph("outro"),
    ]
