"""Tests for the section segmenter."""

from __future__ import annotations

from blockplan.document import load_document
from blockplan.schemas import (
    Blockquote,
    CodeMarker,
    ComponentBlock,
    Divider,
    Paragraph,
    TextLeaf,
)
from blockplan.segmenter import segment


def _p(text: str) -> Paragraph:
    return Paragraph(children=[TextLeaf(text=text)])


def _marker(text: str) -> Blockquote:
    return Blockquote(children=[CodeMarker(children=[TextLeaf(text=text)])])


def _form() -> ComponentBlock:
    return ComponentBlock(component="formBlock", props={})


class TestSegmentDocument:
    """End-to-end segmentation of a stored product document."""

    def test_product_document(self, product_document: list[dict]) -> None:
        """Pre-form sections are titled, the form is extracted, post-form sections carry ids."""
        result = segment(load_document(product_document))

        assert [section.title for section in result.pre] == ["Describe", "Tech"]
        assert result.pre[0].content == [_p("hello")]
        assert result.pre[1].content == [_p("specs")]
        assert result.anchor is not None
        assert result.anchor.component == "formBlock"
        assert result.anchor.props == {"formConfig": {"value": {"id": "contact"}}}
        assert len(result.post) == 1
        assert result.post[0].id == "detail"
        assert result.post[0].title is None
        assert result.post[0].content == [_p("more")]
        assert result.discarded == [_p("")]

    def test_is_idempotent(self, product_document: list[dict]) -> None:
        """Segmenting the same blocks twice gives equal results."""
        blocks = load_document(product_document)

        assert segment(blocks) == segment(blocks)

    def test_conserves_blocks(self, rich_post_document: list[dict]) -> None:
        """Every block is content, discarded, a divider, a consumed marker, or the anchor."""
        blocks = load_document(rich_post_document)
        result = segment(blocks)

        sections = result.pre + result.post
        content_count = sum(len(section.content) for section in sections)
        divider_count = sum(1 for block in blocks if isinstance(block, Divider))
        anchor_count = 1 if result.anchor else 0

        assert len(blocks) == (
            content_count + len(result.discarded) + divider_count + len(sections) + anchor_count
        )

    def test_does_not_mutate_input(self) -> None:
        """The input list is left untouched."""
        blocks = [_marker("A"), _p("a"), Divider(), _form(), Divider(), _marker("b"), _p("b")]
        snapshot = list(blocks)

        segment(blocks)

        assert blocks == snapshot


class TestAnchor:
    """Tests for form anchor handling."""

    def test_no_anchor_puts_everything_in_pre(self) -> None:
        """Without a form block, all sections land in pre and post is empty."""
        result = segment([_marker("A"), _p("a"), Divider(), _marker("B"), _p("b")])

        assert result.anchor is None
        assert result.post == []
        assert [(s.title, s.content) for s in result.pre] == [("A", [_p("a")]), ("B", [_p("b")])]

    def test_second_anchor_is_ordinary_content(self) -> None:
        """Only the first form block is the anchor."""
        first = ComponentBlock(component="formBlock", props={"n": 1})
        second = ComponentBlock(component="formBlock", props={"n": 2})
        blocks = [_marker("A"), _p("a"), first, Divider(), _marker("b"), _p("b"), second, _p("c")]

        result = segment(blocks)

        assert result.anchor == first
        assert result.post[0].content == [_p("b"), second, _p("c")]

    def test_anchor_closes_open_section(self) -> None:
        """Content after the anchor never joins the last pre-form section."""
        result = segment([_marker("A"), _p("a"), _form(), _p("stray")])

        assert result.pre[0].content == [_p("a")]
        assert result.post == []
        assert result.discarded == [_p("stray")]

    def test_content_before_first_post_section_is_discarded(self) -> None:
        """Post-form content needs a divider and marker before it is kept."""
        blocks = [_marker("A"), _form(), _p("orphan"), Divider(), _marker("b"), _p("kept")]

        result = segment(blocks)

        assert result.discarded == [_p("orphan")]
        assert result.post[0].content == [_p("kept")]

    def test_custom_anchor_component(self) -> None:
        """The anchor component name can be overridden."""
        inquiry = ComponentBlock(component="inquiry", props={})
        blocks = [_marker("A"), _p("a"), _form(), inquiry, Divider(), _marker("b"), _p("b")]

        result = segment(blocks, anchor_component="inquiry")

        assert result.anchor == inquiry
        assert result.pre[0].content == [_p("a"), _form()]
        assert result.post[0].id == "b"

    def test_anchor_only_document(self) -> None:
        """A lone anchor yields no sections."""
        result = segment([_form()])

        assert result.pre == []
        assert result.post == []
        assert result.anchor == _form()


class TestTitleMarkers:
    """Tests for title marker recognition."""

    def test_no_markers_discards_all_content(self) -> None:
        """Sections only exist when explicitly titled."""
        blocks = [_p(""), _p("a"), Divider(), _p("b")]

        result = segment(blocks)

        assert result.pre == []
        assert result.post == []
        assert result.discarded == [_p(""), _p("a"), _p("b")]

    def test_empty_document(self) -> None:
        """An empty document gives an empty result."""
        result = segment([])

        assert result.pre == [] and result.post == [] and result.anchor is None

    def test_dividers_are_never_content(self) -> None:
        """Dividers inside pre-form sections are dropped."""
        result = segment([_marker("A"), Divider(), _p("a"), Divider(), Divider()])

        assert result.pre[0].content == [_p("a")]

    def test_malformed_blockquote_is_content(self) -> None:
        """A blockquote without a code child is ordinary content."""
        quote = Blockquote(children=[_p("not a title")])

        result = segment([_marker("A"), quote])

        assert len(result.pre) == 1
        assert result.pre[0].content == [quote]

    def test_marker_with_extra_children_is_content(self) -> None:
        """The code node must be the blockquote's only child."""
        quote = Blockquote(children=[CodeMarker(children=[TextLeaf(text="B")]), _p("x")])

        result = segment([_marker("A"), quote])

        assert [section.title for section in result.pre] == ["A"]
        assert result.pre[0].content == [quote]

    def test_empty_marker_text_is_content(self) -> None:
        """A title marker needs non-empty text."""
        empty = _marker("")

        result = segment([_marker("A"), empty])

        assert result.pre[0].content == [empty]

    def test_post_marker_without_divider_is_content(self) -> None:
        """After the anchor a marker only opens a section when a divider precedes it."""
        blocks = [_form(), Divider(), _marker("a"), _p("x"), _marker("b"), _p("y")]

        result = segment(blocks)

        assert len(result.post) == 1
        assert result.post[0].content == [_p("x"), _marker("b"), _p("y")]

    def test_divider_and_marker_consumed_together(self) -> None:
        """Repeated dividers before a marker still open exactly one section."""
        blocks = [_form(), Divider(), Divider(), _marker("a"), _p("x"), Divider()]

        result = segment(blocks)

        assert [section.id for section in result.post] == ["a"]
        assert result.post[0].content == [_p("x")]

    def test_post_sections_keep_order(self) -> None:
        """Post-form sections are emitted in document order."""
        blocks = [
            _form(),
            Divider(), _marker("one"), _p("1"),
            Divider(), _marker("two"), _p("2"),
            Divider(), _marker("three"),
        ]

        result = segment(blocks)

        assert [section.id for section in result.post] == ["one", "two", "three"]
        assert result.post[2].content == []

    def test_raw_node_outside_section_does_not_raise(self) -> None:
        """Unparsed nodes outside the block model are discarded without raising."""
        result = segment([{"type": "paragraph"}])

        assert result.pre == []
        assert result.anchor is None
        assert len(result.discarded) == 1
