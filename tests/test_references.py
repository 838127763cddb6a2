"""Tests for canonical reference parsing."""

from verse_detect.data.types import ParsedChapter, ParsedVerseReference
from verse_detect.detection.references import (
    format_reference,
    parse_reference,
    parse_section_id,
    reference_from_detection,
)


class TestParseReference:
    """Test parse_reference."""

    def test_single_verse(self):
        """Single verse should address the chapter and fragment."""
        ref = parse_reference("John 3:16")
        assert ref.book == "John"
        assert ref.book_code == "JN"
        assert ref.chapter == 3
        assert ref.start_verse == 16
        assert ref.end_verse == 16
        assert ref.section_id == "JN3"
        assert ref.fragment_id == "JN3_16"

    def test_range(self):
        """Range should keep both ends."""
        ref = parse_reference("1 John 2:3-4")
        assert ref.book_code == "J1"
        assert ref.start_verse == 3
        assert ref.end_verse == 4
        assert ref.section_id == "J12"

    def test_chapter_only(self):
        """Chapter reference has no fragment."""
        ref = parse_reference("Psalms 23")
        assert ref.is_chapter
        assert ref.section_id == "PS23"
        assert ref.fragment_id == ""

    def test_unknown_book(self):
        """Non-canonical book names should not parse."""
        assert parse_reference("Juan 3:16") is None
        assert parse_reference("Hezekiah 1:1") is None

    def test_malformed(self):
        """Strings that are not references should not parse."""
        assert parse_reference("") is None
        assert parse_reference("John") is None
        assert parse_reference("John 3:") is None

    def test_surrounding_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert parse_reference("  Romans 8:28 ").fragment_id == "RM8_28"

    def test_format_round_trip(self):
        """Formatted references parse back to the same values."""
        for text in ("John 3:16", "1 John 2:3-4", "Psalms 23"):
            ref = parse_reference(text)
            assert format_reference(ref.book, ref.chapter, ref.start_verse, ref.end_verse) == text
            assert ref.reference == text

    def test_format_collapses_single_verse_range(self):
        """A range ending on its start verse is written as one verse."""
        assert format_reference("John", 3, 16, 16) == "John 3:16"


class TestParseSectionId:
    """Test parse_section_id."""

    def test_chapter(self):
        """Section id gives a chapter reference."""
        ref = parse_section_id("JN3")
        assert ref.book == "John"
        assert ref.chapter == 3
        assert ref.is_chapter

    def test_fragment(self):
        """Fragment id gives a single verse."""
        ref = parse_section_id("JN3_16")
        assert ref.reference == "John 3:16"

    def test_lowercase(self):
        """Ids are matched case-insensitively."""
        assert parse_section_id("gn1_1").reference == "Genesis 1:1"

    def test_unknown_code(self):
        """Unknown book codes give None."""
        assert parse_section_id("XX3") is None
        assert parse_section_id("John 3") is None


class TestReferenceFromDetection:
    """Test building a fetchable reference from a detection."""

    def test_first_chapter_group(self):
        """Cross-chapter detection uses its first chapter."""
        verse = ParsedVerseReference(
            original="Genesis 1:31-2:3",
            book="Genesis",
            book_variation="Genesis",
            detected_language="en",
            chapter_verse="1:31-2:3",
            chapters=(ParsedChapter(1, 31, 31), ParsedChapter(2, 3, 3)),
        )
        ref = reference_from_detection(verse)
        assert ref.reference == "Genesis 1:31"
        assert ref.section_id == "GN1"

    def test_no_chapters(self):
        """Detection without chapter groups gives None."""
        verse = ParsedVerseReference(
            original="John",
            book="John",
            book_variation="John",
            detected_language="en",
            chapter_verse="",
        )
        assert reference_from_detection(verse) is None
