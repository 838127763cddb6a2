"""Data types for verse-detect."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

# Canonical book name -> accepted spellings for one language
BookNamePatterns = Dict[str, Tuple[str, ...]]


@dataclass(frozen=True)
class ParsedChapter:
    """One chapter group of a detected reference."""

    chapter: int
    start_verse: Optional[int] = None
    end_verse: Optional[int] = None  # Equal to start_verse for a single verse


@dataclass(frozen=True)
class ParsedVerseReference:
    """A scripture reference found in a block of text."""

    original: str  # Matched text, e.g. "1 Juan 2:3-4"
    book: str  # Canonical book name
    book_variation: str  # Spelling as it appeared in the text
    detected_language: str
    chapter_verse: str  # Raw chapter/verse part, e.g. "2:3-4"
    chapters: Tuple[ParsedChapter, ...] = ()
    start_index: int = 0
    end_index: int = 0  # Half-open

    @property
    def span(self) -> Tuple[int, int]:
        """Return the (start, end) offsets of the match."""
        return (self.start_index, self.end_index)

    @property
    def reference(self) -> str:
        """Return the reference with the canonical book name."""
        return f"{self.book} {self.chapter_verse}"


@dataclass(frozen=True)
class ParsedReference:
    """A single-chapter reference in the addressing scheme used for fetching."""

    book: str
    book_code: str
    chapter: int
    start_verse: Optional[int] = None
    end_verse: Optional[int] = None

    @property
    def section_id(self) -> str:
        """Return the chapter address, e.g. "JN3"."""
        return f"{self.book_code}{self.chapter}"

    @property
    def fragment_id(self) -> str:
        """Return the verse address, e.g. "JN3_16", or "" for a whole chapter."""
        if self.start_verse is None:
            return ""
        return f"{self.section_id}_{self.start_verse}"

    @property
    def is_chapter(self) -> bool:
        """Check whether this reference covers a whole chapter."""
        return self.start_verse is None

    @property
    def reference(self) -> str:
        """Return formatted reference string."""
        if self.start_verse is None:
            return f"{self.book} {self.chapter}"
        if self.end_verse and self.end_verse != self.start_verse:
            return f"{self.book} {self.chapter}:{self.start_verse}-{self.end_verse}"
        return f"{self.book} {self.chapter}:{self.start_verse}"


@dataclass(frozen=True)
class TextInfo:
    """An edition listed in the texts catalog."""

    id: str
    name: str = ""
    lang: str = ""  # Usually a 3-letter ISO 639-3 code
    lang_name: str = ""
    lang_name_english: str = ""
    type: str = "bible"
    has_text: bool = True

    @property
    def is_eligible(self) -> bool:
        """Check whether the edition can be used for verse content."""
        return self.type == "bible" and self.has_text

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextInfo":
        """Create from a catalog entry."""
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            lang=data.get("lang") or "",
            lang_name=data.get("langName") or "",
            lang_name_english=data.get("langNameEnglish") or "",
            type=data.get("type") or "bible",
            has_text=data.get("hasText") is not False,
        )


@dataclass(frozen=True)
class ExtractedFootnote:
    """A footnote pulled out of verse content."""

    key: str  # Marker shown in the verse body, e.g. "*" or "a"
    text: str


@dataclass(frozen=True)
class VerseContent:
    """Extracted verse HTML together with its footnotes."""

    html: str
    footnotes: Tuple[ExtractedFootnote, ...] = field(default_factory=tuple)

    @property
    def has_footnotes(self) -> bool:
        """Check if any footnotes were collected."""
        return bool(self.footnotes)
