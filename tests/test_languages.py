"""Tests for the per-language book name registry."""

import pytest

from verse_detect.data.canon import BOOK_ORDER
from verse_detect.data.langcodes import get_language_name, normalize_lang_code
from verse_detect.data.languages import (
    BOOK_NAMES_BY_LANGUAGE,
    LANGUAGE_INFO,
    SUPPORTED_LANGUAGES,
    get_book_names,
    get_combined_book_names,
    is_language_supported,
)
from verse_detect.detection import VerseDetector


def _registered_spellings():
    for lang, patterns in BOOK_NAMES_BY_LANGUAGE.items():
        for book, spellings in patterns.items():
            for spelling in spellings:
                yield lang, book, spelling


class TestRegistry:
    """Test the shape of the registry."""

    def test_ten_languages(self):
        """Ten languages should be supported."""
        assert set(SUPPORTED_LANGUAGES) == {"en", "es", "pt", "fr", "de", "ru", "ar", "hi", "zh", "id"}
        assert set(LANGUAGE_INFO) == set(SUPPORTED_LANGUAGES)

    @pytest.mark.parametrize("lang", sorted(BOOK_NAMES_BY_LANGUAGE))
    def test_every_book_covered(self, lang):
        """Each language should list spellings for all 66 books."""
        patterns = BOOK_NAMES_BY_LANGUAGE[lang]
        assert set(patterns) == set(BOOK_ORDER)
        assert all(patterns[book] for book in BOOK_ORDER)

    @pytest.mark.parametrize("lang", sorted(BOOK_NAMES_BY_LANGUAGE))
    def test_no_spelling_shared_between_books(self, lang):
        """A spelling should name one book only within a language."""
        seen = {}
        for book, spellings in BOOK_NAMES_BY_LANGUAGE[lang].items():
            for spelling in spellings:
                key = spelling.lower().rstrip(".")
                assert seen.setdefault(key, book) == book, f"{spelling!r} used for {seen[key]} and {book}"

    def test_is_language_supported(self):
        """Only registry languages should be supported."""
        assert is_language_supported("es")
        assert not is_language_supported("nl")

    def test_get_book_names_strips_region(self):
        """Region suffixes should be ignored."""
        assert get_book_names("es-MX") is BOOK_NAMES_BY_LANGUAGE["es"]

    def test_get_book_names_falls_back_to_english(self):
        """Unknown languages should get English names."""
        assert get_book_names("nl") is BOOK_NAMES_BY_LANGUAGE["en"]
        assert get_book_names(None) is BOOK_NAMES_BY_LANGUAGE["en"]

    def test_combined_names_keep_language_order(self):
        """Combined spellings should list the first language first."""
        combined = get_combined_book_names(["es", "en"])
        assert combined["John"][0] == "Juan"
        assert "John" in combined["John"]
        assert list(combined) == BOOK_ORDER

    def test_combined_names_skip_unknown(self):
        """Unsupported codes should be skipped."""
        assert get_combined_book_names(["xx", "en"]) == get_combined_book_names(["en"])


class TestEverySpellingDetected:
    """Every registered spelling should be found in running text."""

    @pytest.mark.parametrize("lang,book,spelling", list(_registered_spellings()))
    def test_spelling(self, lang, book, spelling):
        """'<spelling> 3:16' should resolve to its book and language."""
        detector = VerseDetector(lang)
        verses = detector.detect_verses(f"{spelling} 3:16")
        assert len(verses) == 1
        assert verses[0].book == book
        assert verses[0].detected_language == lang
        assert verses[0].chapter_verse == "3:16"


class TestLangCodes:
    """Test catalog language code normalization."""

    def test_iso_639_3(self):
        """Three-letter codes should map to two letters."""
        assert normalize_lang_code("eng") == "en"
        assert normalize_lang_code("SPA") == "es"
        assert normalize_lang_code("ind") == "id"

    def test_language_name_fallback(self):
        """Unknown codes should fall back to the language name."""
        assert normalize_lang_code("xyz", "Indonesian (Terjemahan Baru)") == "id"

    def test_unmapped_code(self):
        """Unmapped codes should be returned lower-cased."""
        assert normalize_lang_code("XYZ") == "xyz"
        assert normalize_lang_code("") is None
        assert normalize_lang_code(None) is None

    def test_language_names(self):
        """Display names should name the language."""
        assert get_language_name("id") == "Indonesian"
        assert get_language_name("es") == "Spanish"
        assert get_language_name("") == "this language"
        assert get_language_name("xx") == "xx"
