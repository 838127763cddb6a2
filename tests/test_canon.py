"""Tests for canon module."""

import pytest

from verse_detect.data.canon import (
    BOOK_CODES,
    BOOK_ORDER,
    book_by_code,
    book_chapters,
    book_code,
    book_index,
    get_book,
    is_canonical,
)


class TestBookOrder:
    """Test book order and indexing."""

    def test_book_order_length(self):
        """Should have 66 books."""
        assert len(BOOK_ORDER) == 66

    def test_first_book(self):
        """First book should be Genesis."""
        assert BOOK_ORDER[0] == "Genesis"

    def test_last_book(self):
        """Last book should be Revelation."""
        assert BOOK_ORDER[-1] == "Revelation"

    def test_book_index(self):
        """Test book index lookup."""
        assert book_index("Genesis") == 0
        assert book_index("Psalms") == 18
        assert book_index("Matthew") == 39
        assert book_index("Revelation") == 65
        assert book_index("NonExistent") == -1

    def test_is_canonical(self):
        """Only the English canonical names are canonical."""
        assert is_canonical("1 Samuel")
        assert not is_canonical("1 Sam")
        assert not is_canonical("Juan")


class TestBookChapters:
    """Test chapter count lookup."""

    def test_genesis_chapters(self):
        """Genesis should have 50 chapters."""
        assert book_chapters("Genesis") == 50

    def test_psalms_chapters(self):
        """Psalms should have 150 chapters."""
        assert book_chapters("Psalms") == 150

    def test_single_chapter_book(self):
        """Jude should have 1 chapter."""
        assert get_book("Jude").chapters == 1

    def test_unknown_book(self):
        """Unknown book should return 0."""
        assert book_chapters("NonExistent") == 0


class TestBookCodes:
    """Test section id book codes."""

    def test_every_book_has_a_code(self):
        """Every canonical book should have a two-character code."""
        assert set(BOOK_CODES) == set(BOOK_ORDER)
        assert all(len(code) == 2 for code in BOOK_CODES.values())

    def test_codes_are_unique(self):
        """No two books should share a code."""
        assert len(set(BOOK_CODES.values())) == 66

    @pytest.mark.parametrize(
        "name,code",
        [
            ("Genesis", "GN"),
            ("John", "JN"),
            ("1 Samuel", "S1"),
            ("1 Corinthians", "C1"),
            ("1 John", "J1"),
            ("Revelation", "RV"),
        ],
    )
    def test_known_codes(self, name, code):
        """Known books should map to their codes."""
        assert book_code(name) == code

    def test_unknown_book_code(self):
        """Unknown book should return an empty code."""
        assert book_code("Hezekiah") == ""

    def test_reverse_lookup(self):
        """Codes should map back to books, case-insensitively."""
        assert book_by_code("JN").name == "John"
        assert book_by_code("s1").name == "1 Samuel"
        assert book_by_code("XX") is None
