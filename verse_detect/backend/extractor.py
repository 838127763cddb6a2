"""Verse extraction from chapter documents."""

import copy
from typing import List, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag

from verse_detect.data.types import ExtractedFootnote, ParsedReference, VerseContent
from verse_detect.errors import VerseNotFoundError

VERSE_NUMBER_SELECTOR = ".v-num, .verse-num"
NOTE_SELECTOR = ".note, .cf"


def _note_text(note: Tag, key_el) -> str:
    text_el = note.select_one(".text")
    if text_el is not None:
        return text_el.decode_contents().strip()

    parts: List[str] = []
    for child in note.children:
        if child is key_el:
            continue
        if isinstance(child, NavigableString):
            text = str(child).strip()
            if text:
                parts.append(text)
        elif isinstance(child, Tag):
            parts.append(child.decode_contents() or child.get_text())
    return " ".join(parts).strip()


def clean_verse(soup: BeautifulSoup, verse_el: Tag) -> Tuple[str, List[ExtractedFootnote]]:
    """Strip verse numbers and pull footnotes out of one verse element.

    Each note is replaced by ``<span class="note-marker">key</span>``.

    Args:
        soup: Document the element belongs to, used to create markers
        verse_el: Verse element; left untouched

    Returns:
        Tuple of (cleaned inner HTML, footnotes in document order)
    """
    clone = copy.copy(verse_el)

    for el in clone.select(VERSE_NUMBER_SELECTOR):
        el.decompose()

    footnotes: List[ExtractedFootnote] = []
    for note in clone.select(NOTE_SELECTOR):
        key_el = note.select_one(".key")
        key = (key_el.get_text(strip=True) if key_el is not None else "") or "*"
        text = _note_text(note, key_el)
        if text:
            footnotes.append(ExtractedFootnote(key=key, text=text))

        marker = soup.new_tag("span", attrs={"class": "note-marker"})
        marker.string = key
        note.replace_with(marker)

    return clone.decode_contents().strip(), footnotes


def _wrap(number: int, content: str, show_verse_numbers: bool) -> str:
    prefix = f'<span class="v-num">{number}</span>' if show_verse_numbers else ""
    return f'{prefix}<span class="v">{content}</span>'


def extract_verses(html: str, reference: ParsedReference, show_verse_numbers: bool = True) -> VerseContent:
    """Pull the verses of a reference out of its chapter document.

    A whole-chapter reference takes every ``.v`` inside ``.section`` in
    document order. Otherwise each verse is looked up by its fragment id,
    either as ``data-id`` or as a class; a verse split over several
    elements is joined.

    Args:
        html: Chapter document
        reference: Reference to extract
        show_verse_numbers: Prefix each verse with its number

    Returns:
        VerseContent with the verse HTML and collected footnotes

    Raises:
        VerseNotFoundError: If none of the requested verses exist
    """
    soup = BeautifulSoup(html, "html.parser")
    verses: List[str] = []
    footnotes: List[ExtractedFootnote] = []

    if reference.is_chapter:
        section = soup.select_one(".section")
        verse_els = section.select(".v") if section is not None else soup.select(".v")[:1]
        for index, verse_el in enumerate(verse_els, start=1):
            content, notes = clean_verse(soup, verse_el)
            verses.append(_wrap(index, content, show_verse_numbers and section is not None))
            footnotes.extend(notes)
    else:
        start = reference.start_verse
        end = reference.end_verse or start
        for number in range(start, end + 1):
            fragment_id = f"{reference.section_id}_{number}"
            parts = soup.select(f'[data-id="{fragment_id}"], .{fragment_id}')
            if not parts:
                continue
            contents = []
            for verse_el in parts:
                content, notes = clean_verse(soup, verse_el)
                contents.append(content)
                footnotes.extend(notes)
            verses.append(_wrap(number, " ".join(contents), show_verse_numbers))

    if not verses:
        raise VerseNotFoundError(reference.fragment_id or reference.section_id)

    return VerseContent(html=" ".join(verses), footnotes=tuple(footnotes))
