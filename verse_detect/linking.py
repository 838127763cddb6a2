"""Link annotation for detected references."""

import logging
from html import escape
from typing import Iterable, List, Mapping, Optional, Set, Tuple, Union
from urllib.parse import quote

from bs4 import BeautifulSoup, NavigableString

from verse_detect.backend.editions import EditionResolver
from verse_detect.config import Config
from verse_detect.data.types import ParsedReference, ParsedVerseReference
from verse_detect.detection.detector import VerseDetector
from verse_detect.detection.references import reference_from_detection

logger = logging.getLogger(__name__)

VOID_HREF = "javascript:void(0)"


def _join_param(url: str, param: str, value: str) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{param}={quote(value, safe='')}"


def _address(parsed: Optional[ParsedReference]) -> Tuple[str, str, str, str]:
    """Return book code, chapter, first verse and section id as strings."""
    if parsed is None:
        return "", "", "", ""
    verse_num = "" if parsed.start_verse is None else str(parsed.start_verse)
    return parsed.book_code, str(parsed.chapter), verse_num, parsed.section_id


class LinkAnnotator:
    """Turns detected references into anchors carrying their address."""

    def __init__(self, detector: VerseDetector, resolver: EditionResolver, config: Optional[Config] = None):
        self.detector = detector
        self.resolver = resolver
        self.config = config or Config()
        self._available_languages: Optional[Set[str]] = None  # None allows every language

    # ==================== Availability ====================

    def set_available_text_languages(self, languages: Union[Iterable[str], Mapping[str, str], None]) -> None:
        """Limit linking to languages that have text.

        References in other languages are still detected but left as plain
        text. A mapping of language -> edition id also replaces the link
        mapping. None lifts the limit.
        """
        if languages is None:
            self._available_languages = None
        elif isinstance(languages, Mapping):
            self._available_languages = set(languages)
            self.resolver.set_mapping(languages)
        else:
            self._available_languages = set(languages)

    def has_text_for_language(self, language: str) -> bool:
        """Check whether references in a language get linked."""
        return self._available_languages is None or language in self._available_languages

    # ==================== URLs ====================

    def build_verse_url(self, verse: ParsedVerseReference, edition: Optional[str] = None) -> str:
        """Build the link target for a detected reference.

        Args:
            verse: Detected reference
            edition: Edition override for this reference

        Returns:
            URL, or a void placeholder when nothing can be built
        """
        link = self.config.link
        text_id = self.resolver.link_text_id(verse.detected_language or "en", edition)

        parsed = reference_from_detection(verse)
        book_code, chapter, verse_num, section_id = _address(parsed)
        fragment_id = (parsed.fragment_id or parsed.section_id) if parsed else ""

        if link.url_template:
            return (
                link.url_template.replace("{ref}", quote(verse.reference, safe=""))
                .replace("{book}", quote(verse.book, safe=""))
                .replace("{bookCode}", book_code)
                .replace("{chapter}", chapter)
                .replace("{verse}", verse_num)
                .replace("{version}", text_id)
                .replace("{sectionId}", section_id)
                .replace("{fragmentId}", fragment_id)
            )

        url = self.config.app_base_url or ""
        versioning = self.config.version_linking
        if versioning.include_version and text_id:
            url = _join_param(url, versioning.version_param or "version", text_id)

        if link.use_hash_navigation and fragment_id:
            url += f"#{fragment_id}"
        else:
            url = _join_param(url, link.ref_param or "ref", verse.reference)

        return url or VOID_HREF

    # ==================== Markup ====================

    def _anchor(self, verse: ParsedVerseReference) -> str:
        link = self.config.link
        styling = self.config.styling

        classes = [link.css_class]
        if styling.highlight_verses:
            classes.append(styling.highlight_class)

        attrs: List[str] = []
        href = self.build_verse_url(verse) if self.config.navigates else VOID_HREF
        attrs.append(f'href="{escape(href)}"')
        attrs.append(f'class="{escape(" ".join(classes))}"')

        if link.add_data_attributes:
            book_code, chapter, verse_num, section_id = _address(reference_from_detection(verse))
            data = {
                "data-verse-ref": verse.reference,
                "data-book": verse.book,
                "data-book-code": book_code,
                "data-chapter": chapter,
                "data-verse": verse_num,
                "data-section-id": section_id,
                "data-detected-lang": verse.detected_language,
            }
            attrs.extend(f'{name}="{escape(value)}"' for name, value in data.items())

        if link.open_in_new_tab:
            attrs.append('target="_blank" rel="noopener"')
        if not styling.underline:
            attrs.append('style="text-decoration:none"')

        return f"<a {' '.join(attrs)}>{escape(verse.original)}</a>"

    def process_text(self, text: Optional[str]) -> str:
        """Convert plain text to HTML with anchors around references.

        Text outside references is HTML-escaped. References in languages
        without text stay plain.
        """
        if not text:
            return ""

        parts: List[str] = []
        position = 0
        for verse in self.detector.detect_verses(text):
            parts.append(escape(text[position : verse.start_index]))
            if self.has_text_for_language(verse.detected_language or "en"):
                parts.append(self._anchor(verse))
            else:
                parts.append(escape(verse.original))
            position = verse.end_index
        parts.append(escape(text[position:]))
        return "".join(parts)

    def process_html(self, html: str) -> str:
        """Annotate every text node of an HTML fragment.

        Text inside elements matching the configured exclude selectors is
        left alone.
        """
        soup = BeautifulSoup(html, "html.parser")
        selectors = self.config.detection.exclude_selectors
        excluded = {id(el) for el in soup.select(selectors)} if selectors else set()

        targets = []
        for node in soup.find_all(string=True):
            if type(node) is not NavigableString:
                continue
            if any(id(parent) in excluded for parent in node.parents):
                continue
            if self.detector.contains_verses(str(node)):
                targets.append(node)

        for node in targets:
            fragment = BeautifulSoup(self.process_text(str(node)), "html.parser")
            node.replace_with(fragment)

        return str(soup)
