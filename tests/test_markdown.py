"""Tests for deckpad.markdown — serializing and parsing slide markdown."""

from __future__ import annotations

from deckpad.markdown import (
    SEPARATOR,
    parse_block,
    parse_markdown,
    serialize_markdown,
    serialize_slide,
)
from deckpad.models import ContentSlide, ListSlide, TitleSlide


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

class TestSerializeSlide:
    def test_title(self):
        assert serialize_slide(TitleSlide("Hello", "World")) == "# Hello\n## World"

    def test_title_multiline_subtitle_unescaped(self):
        assert serialize_slide(TitleSlide("T", "one\ntwo")) == "# T\n## one\ntwo"

    def test_list(self):
        md = serialize_slide(ListSlide("Agenda", ["a", "b"]))
        assert md == "# Agenda\n\n- a\n- b"

    def test_list_without_points_is_heading_only(self):
        assert serialize_slide(ListSlide("Title", [])) == "# Title"

    def test_content(self):
        md = serialize_slide(ContentSlide("T", "Body text.", ["x", "y"]))
        assert md == "# T\n\nBody text.\n\n- x\n- y"

    def test_content_without_points(self):
        assert serialize_slide(ContentSlide("T", "Body text.", [])) == "# T\n\nBody text."

    def test_inline_markdown_untouched(self):
        md = serialize_slide(ListSlide("T", ["*bold* and [link](http://x)"]))
        assert md.endswith("- *bold* and [link](http://x)")


class TestSerializeMarkdown:
    def test_separator(self):
        assert SEPARATOR == "\n\n---\n\n"

    def test_joined_with_separator(self):
        md = serialize_markdown([TitleSlide("A", "B"), ListSlide("C", ["d"])])
        assert md == "# A\n## B\n\n---\n\n# C\n\n- d"

    def test_empty_sequence(self):
        assert serialize_markdown([]) == ""

    def test_matches_sample_document(self, deck, markdown_deck):
        assert serialize_markdown(deck[:3]) + "\n" == markdown_deck


# ---------------------------------------------------------------------------
# Block parsing
# ---------------------------------------------------------------------------

class TestParseBlock:
    def test_empty_block(self):
        assert parse_block("") is None

    def test_whitespace_block(self):
        assert parse_block("  \n\t\n   ") is None

    def test_title_slide(self):
        assert parse_block("# A\n## B") == TitleSlide("A", "B")

    def test_title_priority_over_bullets(self):
        assert parse_block("# A\n## B\n- C") == TitleSlide(title="A", subtitle="B")

    def test_title_needs_h1_first(self):
        slide = parse_block("Plain\n## Sub")
        assert slide == ContentSlide("Plain", "## Sub", [])

    def test_h2_first_line_kept_verbatim(self):
        slide = parse_block("## Not a title slide\n## Still not")
        assert slide.title == "## Not a title slide"
        assert isinstance(slide, ContentSlide)

    def test_empty_title_on_title_slide(self):
        assert parse_block("#\n## Sub") == TitleSlide("", "Sub")

    def test_content_only(self):
        assert parse_block("# T\n\nSome text.") == ContentSlide("T", "Some text.", [])

    def test_heading_only_is_content(self):
        assert parse_block("# Title") == ContentSlide(title="Title", content="", points=[])

    def test_content_lines_joined_with_space(self):
        slide = parse_block("# T\n\nFirst paragraph.\n\nSecond paragraph.")
        assert slide.content == "First paragraph. Second paragraph."

    def test_content_with_points(self):
        slide = parse_block("# T\n\nBody.\n\n- a\n- b")
        assert slide == ContentSlide("T", "Body.", ["a", "b"])

    def test_bullets_only_is_list(self):
        assert parse_block("# T\n\n- a\n- b") == ListSlide("T", ["a", "b"])

    def test_title_without_marker(self):
        assert parse_block("Agenda\n- a") == ListSlide("Agenda", ["a"])

    def test_lines_after_first_bullet_are_points(self):
        slide = parse_block("# T\n- a\ntrailing text\n- b")
        assert slide == ListSlide("T", ["a", "trailing text", "b"])

    def test_repeated_bullet_markers_stripped(self):
        slide = parse_block("# T\n- - nested")
        assert slide.points == ["nested"]

    def test_dash_without_space_is_not_bullet(self):
        slide = parse_block("# T\n-5 degrees")
        assert slide == ContentSlide("T", "-5 degrees", [])

    def test_lines_trimmed(self):
        slide = parse_block("   # T   \n   body   \n   - a   ")
        assert slide == ContentSlide("T", "body", ["a"])

    def test_first_line_bullet_is_title(self):
        slide = parse_block("- not a point\n- point")
        assert slide == ListSlide("- not a point", ["point"])


# ---------------------------------------------------------------------------
# Document parsing
# ---------------------------------------------------------------------------

class TestParseMarkdown:
    def test_sample_document(self, deck, markdown_deck):
        assert parse_markdown(markdown_deck) == deck[:3]

    def test_empty_document(self):
        assert parse_markdown("") == []

    def test_whitespace_document(self):
        assert parse_markdown("   \n\n  ") == []

    def test_separator_only(self):
        assert parse_markdown("---") == []
        assert parse_markdown("\n\n---\n\n") == []

    def test_blank_block_dropped(self):
        md = "# A\n\n---\n\n   \n\n---\n\n# B"
        slides = parse_markdown(md)
        assert [s.title for s in slides] == ["A", "B"]

    def test_adjacent_separators(self):
        slides = parse_markdown("# A\n---\n---\n# B")
        assert [s.title for s in slides] == ["A", "B"]

    def test_leading_separator(self):
        slides = parse_markdown("---\n# A\n## B")
        assert slides == [TitleSlide("A", "B")]

    def test_separator_trailing_spaces(self):
        slides = parse_markdown("# A\n---   \n# B")
        assert len(slides) == 2

    def test_crlf_line_endings(self):
        slides = parse_markdown("# A\r\n## B\r\n\r\n---\r\n\r\n# C\r\n\r\n- d")
        assert slides == [TitleSlide("A", "B"), ListSlide("C", ["d"])]

    def test_longer_rule_is_not_separator(self):
        slides = parse_markdown("# A\n----\n# B")
        assert len(slides) == 1

    def test_never_raises_on_junk(self):
        slides = parse_markdown("\x00\n---\n###\n- \n---\n-")
        assert slides == [
            ContentSlide("\x00", "", []),
            ListSlide("###", [""]),
            ContentSlide("-", "", []),
        ]


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------

class TestRoundTrip:
    def test_well_formed_round_trip(self, deck):
        assert parse_markdown(serialize_markdown(deck)) == deck

    def test_reserialization_stable(self, deck):
        md = serialize_markdown(deck)
        assert serialize_markdown(parse_markdown(md)) == md

    def test_single_slides(self):
        for slide in (
            TitleSlide("Only", "Sub"),
            ContentSlide("C", "Text with _emphasis_.", ["p"]),
            ListSlide("L", ["one", "two", "three"]),
        ):
            assert parse_markdown(serialize_markdown([slide])) == [slide]

    def test_empty_list_becomes_content(self):
        md = serialize_markdown([ListSlide("Title", [])])
        assert md == "# Title"
        assert parse_markdown(md) == [ContentSlide(title="Title", content="", points=[])]

    def test_empty_content_with_points_becomes_list(self):
        slides = parse_markdown(serialize_markdown([ContentSlide("T", "", ["a"])]))
        assert slides == [ListSlide("T", ["a"])]

    def test_multiline_subtitle_collapses(self):
        slides = parse_markdown(serialize_markdown([TitleSlide("T", "one\ntwo")]))
        assert slides == [TitleSlide("T", "one")]

    def test_multi_paragraph_content_collapses(self):
        slides = parse_markdown(serialize_markdown([ContentSlide("T", "one\n\ntwo", [])]))
        assert slides == [ContentSlide("T", "one two", [])]

    def test_literal_leading_dash_in_point_lost(self):
        slides = parse_markdown(serialize_markdown([ListSlide("T", ["- odd"])]))
        assert slides == [ListSlide("T", ["odd"])]
