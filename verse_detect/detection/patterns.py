"""Regular expressions for scripture references."""

import re
from typing import Iterable, List, Mapping, Optional, Sequence

from verse_detect.data.types import ParsedChapter

# Hyphen, en dash, em dash
DASH = "[-–—]"

# ASCII digits only; \d would also accept other scripts' digits
_CHAPTER = "[0-9]{1,3}"
_VERSE = "[0-9]{1,3}"
# A range end directly followed by ":verse" starts the next chapter instead
_NOT_CHAPTER = r"(?![0-9]|[:.][0-9])"
_VERSE_RANGE = rf"{_VERSE}(?:\s*{DASH}\s*{_VERSE}{_NOT_CHAPTER})?"
_VERSE_LIST = rf"{_VERSE_RANGE}(?:\s*,\s*{_VERSE_RANGE}{_NOT_CHAPTER})*"
_CHAPTER_VERSE = rf"{_CHAPTER}(?:\s*[:.;]\s*{_VERSE_LIST})?"
CHAPTER_RANGE = rf"{_CHAPTER_VERSE}(?:\s*{DASH}\s*{_CHAPTER_VERSE})?"

# Characters that may precede or follow a reference
_LEADING = r"(?:^|[\s(\[{،。、])"
_TRAILING = r"(?=[\s.,;:!?)\]}،。、]|$)"

# One chapter group inside a matched chapter/verse string. A verse list
# after a comma is consumed but only its first range is kept.
_CHAPTER_GROUP = re.compile(
    r"(?P<chapter>[0-9]{1,3})"
    r"(?:\s*[:.;]\s*(?P<start>[0-9]{1,3})"
    rf"(?:\s*{DASH}\s*(?P<end>[0-9]{{1,3}}){_NOT_CHAPTER})?"
    rf"(?:\s*,\s*{_VERSE_RANGE}{_NOT_CHAPTER})*)?"
)


def build_book_pattern(spellings: Iterable[str]) -> str:
    """Build an alternation of book spellings, longest first.

    Args:
        spellings: Book names and abbreviations

    Returns:
        Regex alternation with every spelling escaped
    """
    unique = sorted(set(spellings), key=len, reverse=True)
    return "|".join(re.escape(spelling) for spelling in unique)


def build_verse_regex(book_patterns: Mapping[str, Sequence[str]]) -> re.Pattern[str]:
    """Compile the reference pattern for a set of book spellings.

    Group 1 is the whole reference, group 2 the book spelling and group 3
    the chapter/verse part.

    Args:
        book_patterns: Canonical book name -> spellings

    Returns:
        Compiled case-insensitive pattern
    """
    spellings: List[str] = []
    for variations in book_patterns.values():
        spellings.extend(variations)
    book_pattern = build_book_pattern(spellings)
    full = rf"{_LEADING}(({book_pattern})\.?\s*({CHAPTER_RANGE})){_TRAILING}"
    return re.compile(full, re.IGNORECASE)


def parse_chapter_verse(chapter_verse: Optional[str]) -> List[ParsedChapter]:
    """Split a chapter/verse string into chapter groups.

    "3:16" -> [3:16-16], "1:1-2:3" -> [1:1-1, 2:3-3], "23" -> [23].
    For comma lists such as "5:3, 6, 9" only the first range is kept.
    """
    if not chapter_verse:
        return []

    chapters: List[ParsedChapter] = []
    for match in _CHAPTER_GROUP.finditer(chapter_verse):
        chapter = int(match.group("chapter"))
        start = match.group("start")
        if start is None:
            chapters.append(ParsedChapter(chapter=chapter))
            continue
        end = match.group("end")
        start_verse = int(start)
        end_verse = int(end) if end else start_verse
        chapters.append(ParsedChapter(chapter, start_verse, end_verse))
    return chapters
