"""Reference detection, canonicalization and parsing."""

from verse_detect.detection.detector import (
    VariationLookup,
    VerseDetector,
    build_variation_map,
    detect_document_language,
)
from verse_detect.detection.patterns import build_book_pattern, build_verse_regex, parse_chapter_verse
from verse_detect.detection.references import (
    format_reference,
    parse_reference,
    parse_section_id,
    reference_from_detection,
)

__all__ = [
    "VariationLookup",
    "VerseDetector",
    "build_variation_map",
    "detect_document_language",
    "build_book_pattern",
    "build_verse_regex",
    "parse_chapter_verse",
    "format_reference",
    "parse_reference",
    "parse_section_id",
    "reference_from_detection",
]
