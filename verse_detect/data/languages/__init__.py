"""Book name registry for the supported languages."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from verse_detect.data.canon import BOOK_ORDER
from verse_detect.data.types import BookNamePatterns
from verse_detect.data.languages import ar, de, en, es, fr, hi, id, pt, ru, zh

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class LanguageInfo:
    """Metadata for a supported language."""

    code: str
    name: str
    native_name: str


BOOK_NAMES_BY_LANGUAGE: Dict[str, BookNamePatterns] = {
    "en": en.BOOK_NAMES,
    "es": es.BOOK_NAMES,
    "pt": pt.BOOK_NAMES,
    "fr": fr.BOOK_NAMES,
    "de": de.BOOK_NAMES,
    "ru": ru.BOOK_NAMES,
    "ar": ar.BOOK_NAMES,
    "hi": hi.BOOK_NAMES,
    "zh": zh.BOOK_NAMES,
    "id": id.BOOK_NAMES,
}

SUPPORTED_LANGUAGES: Tuple[str, ...] = tuple(BOOK_NAMES_BY_LANGUAGE)

LANGUAGE_INFO: Dict[str, LanguageInfo] = {
    "en": LanguageInfo("en", "English", "English"),
    "es": LanguageInfo("es", "Spanish", "Español"),
    "pt": LanguageInfo("pt", "Portuguese", "Português"),
    "fr": LanguageInfo("fr", "French", "Français"),
    "de": LanguageInfo("de", "German", "Deutsch"),
    "ru": LanguageInfo("ru", "Russian", "Русский"),
    "ar": LanguageInfo("ar", "Arabic", "العربية"),
    "hi": LanguageInfo("hi", "Hindi", "हिन्दी"),
    "zh": LanguageInfo("zh", "Chinese", "中文"),
    "id": LanguageInfo("id", "Indonesian", "Bahasa Indonesia"),
}


def is_language_supported(code: str) -> bool:
    """Check whether a language has a book name registry."""
    return code in BOOK_NAMES_BY_LANGUAGE


def get_book_names(code: Optional[str]) -> BookNamePatterns:
    """Get the book name patterns for one language.

    Region suffixes are ignored ("es-MX" -> "es"). Unknown codes get the
    English patterns.
    """
    lang = (code or DEFAULT_LANGUAGE).lower().split("-")[0]
    return BOOK_NAMES_BY_LANGUAGE.get(lang) or BOOK_NAMES_BY_LANGUAGE[DEFAULT_LANGUAGE]


def get_combined_book_names(languages: Sequence[str]) -> Dict[str, List[str]]:
    """Merge the spellings of several languages per canonical book.

    Spellings keep the order of ``languages``; duplicates are dropped.
    Unsupported codes are skipped.
    """
    combined: Dict[str, List[str]] = {book: [] for book in BOOK_ORDER}
    for code in languages:
        patterns = BOOK_NAMES_BY_LANGUAGE.get(code)
        if not patterns:
            continue
        for book, spellings in patterns.items():
            for spelling in spellings:
                if spelling not in combined[book]:
                    combined[book].append(spelling)
    return combined


__all__ = [
    "BOOK_NAMES_BY_LANGUAGE",
    "DEFAULT_LANGUAGE",
    "LANGUAGE_INFO",
    "LanguageInfo",
    "SUPPORTED_LANGUAGES",
    "get_book_names",
    "get_combined_book_names",
    "is_language_supported",
]
