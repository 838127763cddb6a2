"""Data types, canon metadata and book name registry."""

from verse_detect.data.types import (
    BookNamePatterns,
    ExtractedFootnote,
    ParsedChapter,
    ParsedReference,
    ParsedVerseReference,
    TextInfo,
    VerseContent,
)
from verse_detect.data.canon import (
    CanonBook,
    BOOK_CODES,
    BOOK_ORDER,
    book_by_code,
    book_chapters,
    book_code,
    book_index,
    get_book,
    is_canonical,
)
from verse_detect.data.langcodes import get_language_name, normalize_lang_code

__all__ = [
    "BookNamePatterns",
    "ExtractedFootnote",
    "ParsedChapter",
    "ParsedReference",
    "ParsedVerseReference",
    "TextInfo",
    "VerseContent",
    "CanonBook",
    "BOOK_CODES",
    "BOOK_ORDER",
    "book_by_code",
    "book_chapters",
    "book_code",
    "book_index",
    "get_book",
    "is_canonical",
    "get_language_name",
    "normalize_lang_code",
]
