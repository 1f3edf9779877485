#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Org block parser and document entry points."""

import pytest

from orglens import parse_document, safe_parse_document
from orglens.ast import (
    Code,
    CodeBlock,
    Document,
    Emphasis,
    ErrorBlock,
    Heading,
    Link,
    List,
    ListItem,
    Paragraph,
    SourceLocation,
    Strong,
    Text,
    ThematicBreak,
)
from orglens.exceptions import InvalidOptionsError, ParsingError, ValidationError
from orglens.options import LogbookParserOptions, OrgParserOptions
from orglens.parsers.org import BlockParser, OrgParser


def block_types(doc: Document) -> list[str]:
    return [type(block).__name__ for block in doc.children]


@pytest.mark.unit
class TestHeadings:
    """Heading detection and level handling."""

    def test_single_star_heading(self):
        doc = parse_document("* Title")
        assert doc.children == (Heading(level=1, content=(Text("Title"),), source_location=SourceLocation(line=1)),)

    @pytest.mark.parametrize("stars,expected_level", [(1, 1), (2, 2), (6, 6), (7, 6), (12, 6)])
    def test_level_is_capped_at_six(self, stars, expected_level):
        heading = parse_document("*" * stars + " Text").children[0]
        assert isinstance(heading, Heading)
        assert heading.level == expected_level
        assert heading.content == (Text("Text"),)

    def test_max_heading_level_option(self):
        doc = parse_document("**** Deep", OrgParserOptions(max_heading_level=3))
        assert doc.children[0].level == 3

    def test_heading_with_inline_markup(self):
        heading = parse_document("** Read *this* now").children[0]
        assert heading.content == (Text("Read "), Strong((Text("this"),)), Text(" now"))

    def test_bare_star_is_empty_heading(self):
        heading = parse_document("*").children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.content == ()

    def test_heading_flushes_pending_list(self):
        doc = parse_document("- one\n* Heading")
        assert block_types(doc) == ["List", "Heading"]


@pytest.mark.unit
class TestLists:
    """List item grouping."""

    def test_contiguous_items_form_one_list(self):
        doc = parse_document("- first\n- second\n- third")
        assert block_types(doc) == ["List"]
        items = doc.children[0].items
        assert [item.content for item in items] == [(Text("first"),), (Text("second"),), (Text("third"),)]
        assert doc.children[0].ordered is False

    def test_blank_line_ends_list(self):
        doc = parse_document("- a\n- b\n\n- c")
        assert block_types(doc) == ["List", "List"]
        assert len(doc.children[0].items) == 2
        assert len(doc.children[1].items) == 1

    def test_paragraph_line_ends_list(self):
        doc = parse_document("- a\nplain text\n- b")
        assert block_types(doc) == ["List", "Paragraph", "List"]

    def test_ordered_list(self):
        doc = parse_document("1. one\n2. two\n10. ten")
        lst = doc.children[0]
        assert isinstance(lst, List)
        assert lst.ordered is True
        assert [item.content for item in lst.items] == [(Text("one"),), (Text("two"),), (Text("ten"),)]

    def test_ordered_flag_follows_first_item(self):
        lst = parse_document("- bullet\n1. number").children[0]
        assert lst.ordered is False
        assert len(lst.items) == 2

    def test_indented_items_are_trimmed(self):
        lst = parse_document("  - nested looking").children[0]
        assert lst.items == (ListItem(content=(Text("nested looking"),), source_location=SourceLocation(line=1)),)

    def test_item_inline_markup(self):
        lst = parse_document("- read =parser.py= and /relax/").children[0]
        assert lst.items[0].content == (
            Text("read "),
            Code("parser.py"),
            Text(" and "),
            Emphasis((Text("relax"),)),
        )

    def test_dash_without_space_is_paragraph(self):
        doc = parse_document("-not a list")
        assert block_types(doc) == ["Paragraph"]


@pytest.mark.unit
class TestCodeBlocks:
    """Source block handling."""

    def test_code_block_content_is_verbatim(self):
        doc = parse_document("#+BEGIN_SRC python\n* not a heading\n\n  - not a list\n#+END_SRC")
        assert block_types(doc) == ["CodeBlock"]
        block = doc.children[0]
        assert block.language == "python"
        assert block.content == "* not a heading\n\n  - not a list"

    def test_code_block_without_language(self):
        block = parse_document("#+BEGIN_SRC\nx = 1\n#+END_SRC").children[0]
        assert block.language is None
        assert block.content == "x = 1"

    def test_header_arguments_are_not_part_of_language(self):
        block = parse_document("#+BEGIN_SRC python :results output\npass\n#+END_SRC").children[0]
        assert block.language == "python"

    def test_unterminated_code_block_is_emitted(self):
        doc = parse_document("#+BEGIN_SRC sh\nls -la\necho done")
        assert doc.children == (
            CodeBlock(content="ls -la\necho done", language="sh", source_location=SourceLocation(line=1)),
        )

    def test_code_block_flushes_list(self):
        doc = parse_document("- item\n#+BEGIN_SRC sh\nls\n#+END_SRC\nafter")
        assert block_types(doc) == ["List", "CodeBlock", "Paragraph"]

    def test_empty_code_block(self):
        block = parse_document("#+BEGIN_SRC js\n#+END_SRC").children[0]
        assert block.content == ""
        assert block.language == "js"

    def test_nested_begin_is_content(self):
        block = parse_document("#+BEGIN_SRC org\n#+BEGIN_SRC sh\n#+END_SRC").children[0]
        assert block.content == "#+BEGIN_SRC sh"


@pytest.mark.unit
class TestParagraphsAndRules:
    """Paragraph, rule and blank line handling."""

    def test_each_line_is_its_own_paragraph(self):
        doc = parse_document("first line\nsecond line")
        assert block_types(doc) == ["Paragraph", "Paragraph"]

    def test_paragraph_text_is_trimmed(self):
        para = parse_document("   padded text   ").children[0]
        assert para.content == (Text("padded text"),)

    @pytest.mark.parametrize("rule", ["---", "-----", "  ----------  "])
    def test_horizontal_rule(self, rule):
        doc = parse_document(rule)
        assert block_types(doc) == ["ThematicBreak"]

    def test_rule_flushes_list(self):
        doc = parse_document("- a\n---")
        assert block_types(doc) == ["List", "ThematicBreak"]

    def test_blank_lines_emit_nothing(self):
        assert parse_document("\n\n   \n").children == ()

    def test_empty_input(self):
        doc = parse_document("")
        assert doc.children == ()
        assert doc.metadata.is_empty()

    def test_paragraph_with_link(self):
        para = parse_document("see [[https://orgmode.org][Org manual]]").children[0]
        assert para.content == (
            Text("see "),
            Link(url="https://orgmode.org", content=(Text("Org manual"),), external=True),
        )

    def test_source_locations_are_body_lines(self):
        doc = parse_document("* Heading\n\nbody text\n- item")
        assert [block.source_location.line for block in doc.children] == [1, 3, 4]


@pytest.mark.unit
class TestBlockParser:
    """BlockParser used directly on a metadata-free body."""

    def test_parse_returns_list_of_blocks(self):
        blocks = BlockParser().parse("* H\ntext")
        assert [type(b) for b in blocks] == [Heading, Paragraph]

    def test_parser_keeps_no_state_between_calls(self):
        parser = BlockParser()
        parser.parse("- dangling item\n#+BEGIN_SRC\nunterminated")
        assert parser.parse("plain") == [Paragraph(content=(Text("plain"),), source_location=SourceLocation(line=1))]

    def test_directive_lines_are_not_special(self):
        blocks = BlockParser().parse("#+title: stays")
        assert isinstance(blocks[0], Paragraph)


@pytest.mark.unit
class TestOrgParser:
    """Full pipeline behaviour of OrgParser."""

    def test_sample_note(self, sample_note):
        doc = parse_document(sample_note)

        assert doc.metadata.title == "Project Ideas"
        assert doc.metadata.category == "work"
        assert doc.metadata.author == "Sam"
        assert doc.metadata.tags == ("planning", "emacs")
        assert doc.metadata.id == "4f9c2a1e-note"
        assert doc.metadata.scheduled == "<2024-01-20 Sat>"

        types = block_types(doc)
        assert types[0] == "Heading"
        assert "CodeBlock" in types
        assert "ThematicBreak" in types
        assert types.count("Heading") == 2

        paragraph = next(b for b in doc.children if isinstance(b, Paragraph) and len(b.content) > 1)
        assert paragraph.content == (
            Text("Write the "),
            Strong((Text("draft"),)),
            Text(" and check "),
            Emphasis((Text("typos"),)),
            Text("."),
        )

    def test_blocks_alias(self):
        doc = parse_document("* a\nb")
        assert doc.blocks == doc.children

    def test_metadata_lines_never_reach_blocks(self):
        doc = parse_document("#+title: T\n#+author: A\n:PROPERTIES:\n:ID: x\n:END:\ntext")
        assert block_types(doc) == ["Paragraph"]

    def test_extract_metadata_disabled(self):
        doc = parse_document("#+title: Hidden\nbody", OrgParserOptions(extract_metadata=False))
        assert doc.metadata.is_empty()
        assert block_types(doc) == ["Paragraph"]

    def test_extract_planning_disabled(self):
        doc = parse_document("SCHEDULED: <2024-01-20 Sat>", OrgParserOptions(extract_planning=False))
        assert doc.metadata.scheduled is None
        assert block_types(doc) == ["Paragraph"]

    def test_bytes_input_with_bom(self):
        doc = parse_document("\ufeff* Title".encode("utf-8"))
        assert doc.children[0].content == (Text("Title"),)

    def test_invalid_input_type(self):
        with pytest.raises(ValidationError):
            parse_document(42)  # type: ignore[arg-type]

    def test_wrong_options_class(self):
        with pytest.raises(InvalidOptionsError):
            OrgParser(LogbookParserOptions())  # type: ignore[arg-type]

    def test_invalid_heading_level_option(self):
        with pytest.raises(ValueError):
            OrgParserOptions(max_heading_level=0)

    def test_unexpected_failure_is_wrapped(self, monkeypatch):
        def explode(self, body):
            raise RuntimeError("boom")

        monkeypatch.setattr(BlockParser, "parse", explode)
        with pytest.raises(ParsingError) as exc_info:
            parse_document("* Heading")

        assert exc_info.value.parsing_stage == "blocks"
        assert isinstance(exc_info.value.original_error, RuntimeError)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert "boom" in str(exc_info.value)

    def test_parsing_is_deterministic(self, sample_note):
        assert parse_document(sample_note) == parse_document(sample_note)


@pytest.mark.unit
class TestSafeParseDocument:
    """The render-path boundary never raises."""

    def test_success_matches_parse_document(self, sample_note):
        assert safe_parse_document(sample_note) == parse_document(sample_note)
        assert safe_parse_document(sample_note).error is None

    def test_internal_failure_yields_single_error_block(self, monkeypatch):
        def explode(self, body):
            raise RuntimeError("boom")

        monkeypatch.setattr(BlockParser, "parse", explode)
        doc = safe_parse_document("#+title: Lost\n* Heading")

        assert len(doc.children) == 1
        assert isinstance(doc.children[0], ErrorBlock)
        assert "boom" in doc.children[0].message
        assert doc.error == doc.children[0].message
        assert doc.metadata.is_empty()

    def test_invalid_input_yields_error_block(self):
        doc = safe_parse_document(None)  # type: ignore[arg-type]
        assert isinstance(doc.children[0], ErrorBlock)
        assert "Expected str or bytes" in doc.error

    def test_rule_only_document_is_not_an_error(self):
        doc = safe_parse_document("---")
        assert doc.children == (ThematicBreak(source_location=SourceLocation(line=1)),)
        assert doc.error is None
