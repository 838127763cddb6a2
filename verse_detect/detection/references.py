"""Parsing of canonical reference strings into fetchable addresses."""

import re
from typing import Optional

from verse_detect.data.canon import BOOK_CODES, book_by_code
from verse_detect.data.types import ParsedReference, ParsedVerseReference

# "John 3:16", "1 John 2:3-4", "Psalms 23"
_REFERENCE = re.compile(
    r"^(?P<book>.+?)\s+(?P<chapter>[0-9]+)"
    r"(?::(?P<verse>[0-9]+)(?:-(?P<end>[0-9]+))?)?$"
)

# "JN3" or "JN3_16"
_SECTION = re.compile(r"^(?P<code>[A-Z0-9]{2})(?P<chapter>[0-9]+)(?:_(?P<verse>[0-9]+))?$")


def parse_reference(reference: str) -> Optional[ParsedReference]:
    """Parse a canonical reference string.

    The book must be one of the canonical English names.

    Args:
        reference: Reference such as "John 3:16-18"

    Returns:
        ParsedReference, or None when the string is not a canonical reference
    """
    match = _REFERENCE.match(reference.strip())
    if not match:
        return None

    book = match.group("book")
    code = BOOK_CODES.get(book)
    if not code:
        return None

    verse = match.group("verse")
    end = match.group("end")
    start_verse = int(verse) if verse else None
    end_verse = int(end) if end else start_verse
    return ParsedReference(
        book=book,
        book_code=code,
        chapter=int(match.group("chapter")),
        start_verse=start_verse,
        end_verse=end_verse,
    )


def format_reference(
    book: str,
    chapter: int,
    start_verse: Optional[int] = None,
    end_verse: Optional[int] = None,
) -> str:
    """Build a reference string that parse_reference() accepts."""
    if start_verse is None:
        return f"{book} {chapter}"
    if end_verse is not None and end_verse != start_verse:
        return f"{book} {chapter}:{start_verse}-{end_verse}"
    return f"{book} {chapter}:{start_verse}"


def parse_section_id(section_id: str) -> Optional[ParsedReference]:
    """Parse a section or fragment id ("JN3", "JN3_16") back into a reference."""
    match = _SECTION.match(section_id.strip().upper())
    if not match:
        return None

    book = book_by_code(match.group("code"))
    if book is None:
        return None

    verse = match.group("verse")
    start_verse = int(verse) if verse else None
    return ParsedReference(
        book=book.name,
        book_code=book.code,
        chapter=int(match.group("chapter")),
        start_verse=start_verse,
        end_verse=start_verse,
    )


def reference_from_detection(verse: ParsedVerseReference) -> Optional[ParsedReference]:
    """Build the fetchable reference for a detected one.

    Only the first chapter group is used; a cross-chapter range such as
    "Genesis 1:31-2:3" previews from its first chapter.
    """
    code = BOOK_CODES.get(verse.book)
    if not code or not verse.chapters:
        return None

    first = verse.chapters[0]
    return ParsedReference(
        book=verse.book,
        book_code=code,
        chapter=first.chapter,
        start_verse=first.start_verse,
        end_verse=first.end_verse,
    )
