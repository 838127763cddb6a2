"""Scripture reference detection across the supported languages."""

import logging
import re
from dataclasses import dataclass
from html import escape
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import quote

from bs4 import BeautifulSoup

from verse_detect.data.languages import (
    BOOK_NAMES_BY_LANGUAGE,
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    get_combined_book_names,
)
from verse_detect.data.types import ParsedVerseReference
from verse_detect.detection.patterns import build_verse_regex, parse_chapter_verse

logger = logging.getLogger(__name__)

Languages = Union[str, Sequence[str]]


@dataclass(frozen=True)
class VariationLookup:
    """Canonical book and source language for a spelling."""

    canonical: str
    language: str


@dataclass(frozen=True)
class _DetectorState:
    """Everything derived from one language set, swapped as a unit."""

    languages: Tuple[str, ...]
    regex: re.Pattern[str]
    variations: Dict[str, VariationLookup]


def _variation_key(spelling: str) -> str:
    return spelling.lower().rstrip(".")


def build_variation_map(languages: Sequence[str]) -> Dict[str, VariationLookup]:
    """Map lower-cased spellings to their canonical book and language.

    Languages are visited in order and the first one to claim a spelling
    keeps it.
    """
    variations: Dict[str, VariationLookup] = {}
    for lang in languages:
        patterns = BOOK_NAMES_BY_LANGUAGE.get(lang)
        if not patterns:
            continue
        for canonical, spellings in patterns.items():
            for spelling in spellings:
                key = _variation_key(spelling)
                if key not in variations:
                    variations[key] = VariationLookup(canonical, lang)
    return variations


def detect_document_language(html: Optional[str]) -> str:
    """Detect the language of an HTML document.

    Uses ``<html lang>``, then ``<meta http-equiv="content-language">``.
    Region suffixes are dropped ("en-US" -> "en").

    Args:
        html: Document markup

    Returns:
        2-letter code, or DEFAULT_LANGUAGE when nothing is declared
    """
    if not html:
        return DEFAULT_LANGUAGE

    soup = BeautifulSoup(html, "html.parser")
    root = soup.find("html")
    if root is not None and root.get("lang"):
        return str(root["lang"]).lower().split("-")[0]

    for meta in soup.find_all("meta"):
        if str(meta.get("http-equiv", "")).lower() == "content-language" and meta.get("content"):
            return str(meta["content"]).lower().split("-")[0]

    return DEFAULT_LANGUAGE


class VerseDetector:
    """Finds scripture references in text for an active set of languages.

    The compiled pattern and the spelling lookup are always rebuilt
    together by set_languages(), so a scan never sees one without the
    other.
    """

    def __init__(
        self,
        language: Optional[str] = None,
        additional_languages: Optional[Languages] = None,
        *,
        document_html: Optional[str] = None,
        include_english: bool = True,
    ):
        """Initialize the detector.

        Args:
            language: Primary language; detected from document_html when None
            additional_languages: Extra language codes, or "all"
            document_html: Markup used to detect the primary language
            include_english: Keep English spellings active as a fallback
        """
        primary = language or detect_document_language(document_html)
        if primary not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported language '%s', falling back to English", primary)
            primary = DEFAULT_LANGUAGE

        languages = [primary]
        if additional_languages == "all":
            extra: Sequence[str] = SUPPORTED_LANGUAGES
        elif isinstance(additional_languages, str):
            extra = [additional_languages]
        else:
            extra = additional_languages or []
        for lang in extra:
            if lang in SUPPORTED_LANGUAGES and lang not in languages:
                languages.append(lang)
            elif lang not in SUPPORTED_LANGUAGES:
                logger.warning("Ignoring unsupported language '%s'", lang)

        self._include_english = include_english
        self._state = self._build_state(languages)

    def _build_state(self, languages: Sequence[str]) -> _DetectorState:
        langs = list(languages)
        if self._include_english and DEFAULT_LANGUAGE not in langs:
            langs.append(DEFAULT_LANGUAGE)
        return _DetectorState(
            languages=tuple(langs),
            regex=build_verse_regex(get_combined_book_names(langs)),
            variations=build_variation_map(langs),
        )

    # ==================== Languages ====================

    def set_languages(self, languages: Languages) -> None:
        """Switch the active language set.

        Unsupported codes are dropped. If nothing valid remains the current
        set is kept. English is appended unless turned off.
        """
        requested = [languages] if isinstance(languages, str) else list(languages)
        valid: List[str] = []
        for lang in requested:
            if lang in SUPPORTED_LANGUAGES:
                if lang not in valid:
                    valid.append(lang)
            else:
                logger.warning("Ignoring unsupported language '%s'", lang)

        if not valid:
            logger.warning("No valid languages provided, keeping %s", ", ".join(self.current_languages))
            return

        self._state = self._build_state(valid)
        logger.debug("Active languages: %s", ", ".join(self._state.languages))

    @property
    def current_languages(self) -> List[str]:
        """Get the active languages, primary first."""
        return list(self._state.languages)

    @staticmethod
    def supported_languages() -> List[str]:
        """Get all language codes with a book name registry."""
        return list(SUPPORTED_LANGUAGES)

    @property
    def verse_regex(self) -> re.Pattern[str]:
        """Get the compiled pattern for the active languages."""
        return self._state.regex

    def get_book_patterns(self) -> Dict[str, List[str]]:
        """Get the combined spellings per book for the active languages."""
        return get_combined_book_names(self._state.languages)

    def get_canonical_book_name(self, variation: str) -> Optional[VariationLookup]:
        """Look up a spelling ("Jn", "Juan") in the active languages."""
        return self._state.variations.get(_variation_key(variation))

    # ==================== Detection ====================

    def detect_verses(self, text: Optional[str]) -> List[ParsedVerseReference]:
        """Find every reference in a block of text.

        Args:
            text: Text to scan

        Returns:
            References in order of appearance; empty when there are none
        """
        if not text or not isinstance(text, str):
            return []

        state = self._state
        return [self._parse_match(match, state) for match in state.regex.finditer(text)]

    @staticmethod
    def _parse_match(match: re.Match[str], state: _DetectorState) -> ParsedVerseReference:
        variation = match.group(2).rstrip(".")
        chapter_verse = match.group(3)
        lookup = state.variations.get(_variation_key(variation))
        return ParsedVerseReference(
            original=match.group(1),
            book=lookup.canonical if lookup else variation,
            book_variation=variation,
            detected_language=lookup.language if lookup else DEFAULT_LANGUAGE,
            chapter_verse=chapter_verse,
            chapters=tuple(parse_chapter_verse(chapter_verse)),
            start_index=match.start(1),
            end_index=match.end(1),
        )

    def contains_verses(self, text: Optional[str]) -> bool:
        """Check whether text holds at least one reference."""
        if not text or not isinstance(text, str):
            return False
        return self._state.regex.search(text) is not None

    def replace_verses(
        self, text: Optional[str], formatter: Callable[[ParsedVerseReference], str]
    ) -> Optional[str]:
        """Replace each reference with the formatter's output.

        Replacements are applied back to front so earlier offsets stay
        valid.
        """
        if not text or not isinstance(text, str):
            return text

        verses = self.detect_verses(text)
        result = text
        for verse in reversed(verses):
            result = result[: verse.start_index] + formatter(verse) + result[verse.end_index :]
        return result

    def link_verses(self, text: Optional[str], base_url: str = "") -> Optional[str]:
        """Wrap each reference in a plain anchor.

        Args:
            text: Text to process
            base_url: Link target; references are passed as ``?ref=``

        Returns:
            HTML with anchors around the references
        """

        def to_link(verse: ParsedVerseReference) -> str:
            ref = verse.reference
            href = f"{base_url}?ref={quote(ref, safe='')}" if base_url else "javascript:void(0)"
            return (
                f'<a href="{escape(href)}" class="verse-link" '
                f'data-verse-ref="{escape(ref)}">{escape(verse.original)}</a>'
            )

        return self.replace_verses(text, to_link)

    def normalize_reference(self, reference: str) -> Optional[str]:
        """Return the first reference in canonical form ("Jn 3:16" -> "John 3:16")."""
        verses = self.detect_verses(reference)
        if not verses:
            return None
        return verses[0].reference
