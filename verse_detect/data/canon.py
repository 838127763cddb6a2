"""Bible canon metadata - canonical book names, book codes, chapters."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


@dataclass(frozen=True)
class CanonBook:
    """Metadata for a Bible book."""

    name: str
    code: str  # Two-character code used in section ids, e.g. "JN"
    chapters: int


# The 66 canonical books, keyed by their English names
_CANON_TABLE: Sequence[CanonBook] = (
    # Old Testament
    CanonBook("Genesis", "GN", 50),
    CanonBook("Exodus", "EX", 40),
    CanonBook("Leviticus", "LV", 27),
    CanonBook("Numbers", "NU", 36),
    CanonBook("Deuteronomy", "DT", 34),
    CanonBook("Joshua", "JS", 24),
    CanonBook("Judges", "JG", 21),
    CanonBook("Ruth", "RT", 4),
    CanonBook("1 Samuel", "S1", 31),
    CanonBook("2 Samuel", "S2", 24),
    CanonBook("1 Kings", "K1", 22),
    CanonBook("2 Kings", "K2", 25),
    CanonBook("1 Chronicles", "R1", 29),
    CanonBook("2 Chronicles", "R2", 36),
    CanonBook("Ezra", "ER", 10),
    CanonBook("Nehemiah", "NH", 13),
    CanonBook("Esther", "ES", 10),
    CanonBook("Job", "JB", 42),
    CanonBook("Psalms", "PS", 150),
    CanonBook("Proverbs", "PR", 31),
    CanonBook("Ecclesiastes", "EC", 12),
    CanonBook("Song of Solomon", "SS", 8),
    CanonBook("Isaiah", "IS", 66),
    CanonBook("Jeremiah", "JR", 52),
    CanonBook("Lamentations", "LM", 5),
    CanonBook("Ezekiel", "EK", 48),
    CanonBook("Daniel", "DN", 12),
    CanonBook("Hosea", "HO", 14),
    CanonBook("Joel", "JL", 3),
    CanonBook("Amos", "AM", 9),
    CanonBook("Obadiah", "OB", 1),
    CanonBook("Jonah", "JH", 4),
    CanonBook("Micah", "MC", 7),
    CanonBook("Nahum", "NM", 3),
    CanonBook("Habakkuk", "HK", 3),
    CanonBook("Zephaniah", "ZP", 3),
    CanonBook("Haggai", "HG", 2),
    CanonBook("Zechariah", "ZC", 14),
    CanonBook("Malachi", "ML", 4),
    # New Testament
    CanonBook("Matthew", "MT", 28),
    CanonBook("Mark", "MK", 16),
    CanonBook("Luke", "LK", 24),
    CanonBook("John", "JN", 21),
    CanonBook("Acts", "AC", 28),
    CanonBook("Romans", "RM", 16),
    CanonBook("1 Corinthians", "C1", 16),
    CanonBook("2 Corinthians", "C2", 13),
    CanonBook("Galatians", "GL", 6),
    CanonBook("Ephesians", "EP", 6),
    CanonBook("Philippians", "PP", 4),
    CanonBook("Colossians", "CL", 4),
    CanonBook("1 Thessalonians", "H1", 5),
    CanonBook("2 Thessalonians", "H2", 3),
    CanonBook("1 Timothy", "T1", 6),
    CanonBook("2 Timothy", "T2", 4),
    CanonBook("Titus", "TT", 3),
    CanonBook("Philemon", "PM", 1),
    CanonBook("Hebrews", "HB", 13),
    CanonBook("James", "JM", 5),
    CanonBook("1 Peter", "P1", 5),
    CanonBook("2 Peter", "P2", 3),
    CanonBook("1 John", "J1", 5),
    CanonBook("2 John", "J2", 1),
    CanonBook("3 John", "J3", 1),
    CanonBook("Jude", "JD", 1),
    CanonBook("Revelation", "RV", 22),
)

# Book order list
BOOK_ORDER: List[str] = [book.name for book in _CANON_TABLE]

# Lookup tables
_BOOK_BY_NAME: Dict[str, CanonBook] = {book.name: book for book in _CANON_TABLE}
_BOOK_BY_CODE: Dict[str, CanonBook] = {book.code: book for book in _CANON_TABLE}

# Canonical name -> section id prefix
BOOK_CODES: Dict[str, str] = {book.name: book.code for book in _CANON_TABLE}


def is_canonical(name: str) -> bool:
    """Check whether a name is one of the 66 canonical book names."""
    return name in _BOOK_BY_NAME


def book_chapters(name: str) -> int:
    """Return the number of chapters in a book."""
    book = _BOOK_BY_NAME.get(name)
    return book.chapters if book else 0


def book_index(name: str) -> int:
    """Return the index of a book in the canon (0-based)."""
    try:
        return BOOK_ORDER.index(name)
    except ValueError:
        return -1


def get_book(name: str) -> Optional[CanonBook]:
    """Get a CanonBook by canonical name."""
    return _BOOK_BY_NAME.get(name)


def book_code(name: str) -> str:
    """Return the section id book code, or "" for unknown books."""
    book = _BOOK_BY_NAME.get(name)
    return book.code if book else ""


def book_by_code(code: str) -> Optional[CanonBook]:
    """Reverse lookup from a book code ("JN") to its CanonBook."""
    return _BOOK_BY_CODE.get(code.upper())
