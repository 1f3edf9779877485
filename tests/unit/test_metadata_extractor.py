#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for metadata extraction and the DocumentMetadata container."""

import pytest

from orglens.parsers.metadata import MetadataExtractor, extract_metadata
from orglens.utils.metadata import DocumentMetadata, format_yaml_frontmatter


@pytest.mark.unit
class TestDirectives:
    """#+ directive handling."""

    def test_all_fields(self):
        metadata, body = extract_metadata(
            "#+title: Notes\n#+category: home\n#+author: Riley\n#+date: 2024-01-15\n#+tags: a b\ntext"
        )
        assert metadata == DocumentMetadata(
            title="Notes", category="home", author="Riley", date="2024-01-15", tags=("a", "b")
        )
        assert body == "text"

    def test_first_title_wins(self):
        metadata, body = extract_metadata("#+title: First\n#+title: Second")
        assert metadata.title == "First"
        assert body == ""

    @pytest.mark.parametrize("directive", ["category", "author", "date"])
    def test_last_value_wins(self, directive):
        metadata, _ = extract_metadata(f"#+{directive}: one\n#+{directive}: two")
        assert getattr(metadata, directive) == "two"

    def test_tags_split_on_any_whitespace(self):
        metadata, _ = extract_metadata("#+tags:   org  mode\tnotes  ")
        assert metadata.tags == ("org", "mode", "notes")

    def test_empty_tags(self):
        metadata, _ = extract_metadata("#+tags:")
        assert metadata.tags == ()

    def test_last_tags_directive_wins(self):
        metadata, _ = extract_metadata("#+tags: a\n#+tags: b c")
        assert metadata.tags == ("b", "c")

    def test_values_are_trimmed(self):
        metadata, _ = extract_metadata("   #+title:    Spaced Out   ")
        assert metadata.title == "Spaced Out"

    def test_unknown_directives_are_dropped(self):
        metadata, body = extract_metadata("#+startup: overview\n#+options: toc:nil\nkept")
        assert metadata.is_empty()
        assert body == "kept"

    def test_source_block_fences_pass_through(self):
        raw = "#+BEGIN_SRC sh\nls\n#+END_SRC"
        _, body = extract_metadata(raw)
        assert body == raw

    def test_directives_are_case_sensitive(self):
        metadata, body = extract_metadata("#+TITLE: Upper")
        assert metadata.title is None
        assert body == ""


@pytest.mark.unit
class TestPropertiesDrawer:
    """:PROPERTIES: drawer handling."""

    def test_id_is_captured_and_drawer_removed(self):
        metadata, body = extract_metadata(":PROPERTIES:\n:CREATED: today\n:ID: abc-123\n:END:\nbody")
        assert metadata.id == "abc-123"
        assert body == "body"

    def test_second_drawer_is_dropped_without_reparsing(self):
        raw = ":PROPERTIES:\n:ID: one\n:END:\ntext\n:PROPERTIES:\n:ID: two\n:END:"
        metadata, body = extract_metadata(raw)
        assert metadata.id == "one"
        assert body == "text"

    def test_stray_end_before_any_drawer_is_kept(self):
        _, body = extract_metadata(":END:\ntext")
        assert body == ":END:\ntext"

    def test_other_drawers_survive_until_properties_seen(self):
        _, body = extract_metadata(":LOGBOOK:\nCLOCK: [2024-01-15 Mon 10:00]\n:END:")
        assert body == ":LOGBOOK:\nCLOCK: [2024-01-15 Mon 10:00]\n:END:"


@pytest.mark.unit
class TestBodyPreservation:
    """Non-metadata lines pass through untouched."""

    def test_blank_lines_and_order_are_preserved(self):
        _, body = extract_metadata("a\n\n  indented\n\nb")
        assert body == "a\n\n  indented\n\nb"

    def test_no_metadata(self):
        metadata, body = extract_metadata("* Heading\ntext")
        assert metadata == DocumentMetadata()
        assert body == "* Heading\ntext"

    def test_empty_input(self):
        metadata, body = extract_metadata("")
        assert metadata.is_empty()
        assert body == ""


@pytest.mark.unit
class TestPlanning:
    """SCHEDULED and DEADLINE capture."""

    def test_planning_line_is_captured_and_kept(self):
        line = "SCHEDULED: <2024-01-20 Sat> DEADLINE: <2024-01-25 Thu 17:00>"
        metadata, body = extract_metadata(line)
        assert metadata.scheduled == "<2024-01-20 Sat>"
        assert metadata.deadline == "<2024-01-25 Thu 17:00>"
        assert body == line

    def test_inactive_timestamp(self):
        metadata, _ = extract_metadata("DEADLINE: [2024-02-01 Thu]")
        assert metadata.deadline == "[2024-02-01 Thu]"

    def test_planning_can_be_disabled(self):
        metadata, body = MetadataExtractor(extract_planning=False).extract("SCHEDULED: <2024-01-20 Sat>")
        assert metadata.scheduled is None
        assert body == "SCHEDULED: <2024-01-20 Sat>"


@pytest.mark.unit
class TestDocumentMetadata:
    """DocumentMetadata helpers."""

    def test_to_dict_skips_unset_fields(self):
        metadata = DocumentMetadata(title="Notes", tags=("a", "b"))
        assert metadata.to_dict() == {"title": "Notes", "tags": ["a", "b"]}

    def test_is_empty(self):
        assert DocumentMetadata().is_empty()
        assert not DocumentMetadata(id="x").is_empty()

    def test_frontmatter(self):
        text = format_yaml_frontmatter(DocumentMetadata(title="Notes", tags=("org", "emacs")))
        assert text == "---\ntitle: Notes\ntags:\n- org\n- emacs\n---\n"

    def test_frontmatter_empty_metadata(self):
        assert format_yaml_frontmatter(DocumentMetadata()) == ""

    def test_metadata_is_frozen(self):
        metadata = DocumentMetadata(title="Fixed")
        with pytest.raises(AttributeError):
            metadata.title = "Changed"  # type: ignore[misc]
