"""Language code normalization and display names."""

from typing import Dict, Optional

# ISO 639-3 -> ISO 639-1
ISO_639_3_TO_1: Dict[str, str] = {
    "eng": "en",
    "spa": "es",
    "por": "pt",
    "fra": "fr",
    "deu": "de",
    "rus": "ru",
    "ara": "ar",
    "hin": "hi",
    "zho": "zh",
    "cmn": "zh",
    "ind": "id",
    "ita": "it",
    "nld": "nl",
    "pol": "pl",
    "kor": "ko",
    "jpn": "ja",
    "vie": "vi",
    "tha": "th",
    "tur": "tr",
    "ukr": "uk",
    "swe": "sv",
    "nor": "no",
    "dan": "da",
    "fin": "fi",
    "ces": "cs",
    "ell": "el",
    "heb": "he",
    "hun": "hu",
    "ron": "ro",
    "bul": "bg",
}

# Language names found in catalog entries -> ISO 639-1
LANGUAGE_NAME_TO_CODE: Dict[str, str] = {
    "english": "en",
    "spanish": "es",
    "portuguese": "pt",
    "french": "fr",
    "german": "de",
    "russian": "ru",
    "arabic": "ar",
    "hindi": "hi",
    "chinese": "zh",
    "indonesian": "id",
    "italian": "it",
    "dutch": "nl",
}

LANGUAGE_DISPLAY_NAMES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "pt": "Portuguese",
    "fr": "French",
    "de": "German",
    "ru": "Russian",
    "ar": "Arabic",
    "hi": "Hindi",
    "zh": "Chinese",
    "id": "Indonesian",
    "it": "Italian",
    "nl": "Dutch",
    "pl": "Polish",
    "ko": "Korean",
    "ja": "Japanese",
    "vi": "Vietnamese",
    "th": "Thai",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "cs": "Czech",
    "el": "Greek",
    "he": "Hebrew",
    "hu": "Hungarian",
    "ro": "Romanian",
    "bg": "Bulgarian",
}


def normalize_lang_code(lang: Optional[str], lang_name: Optional[str] = None) -> Optional[str]:
    """Normalize a catalog language code to a 2-letter code.

    Tries the ISO 639-3 table first, then looks for a known language
    name inside ``lang_name``. Codes that cannot be mapped are returned
    lower-cased as-is.

    Args:
        lang: Language code from the catalog, e.g. "eng"
        lang_name: Language name used as a fallback, e.g. "English (US)"

    Returns:
        2-letter code, the unmapped code, or None when nothing is known
    """
    if lang and lang.lower() in ISO_639_3_TO_1:
        return ISO_639_3_TO_1[lang.lower()]

    if lang_name:
        normalized = lang_name.lower()
        for name, code in LANGUAGE_NAME_TO_CODE.items():
            if name in normalized:
                return code

    return lang.lower() if lang else None


def get_language_name(code: Optional[str]) -> str:
    """Return a display name for a language code."""
    if not code:
        return "this language"
    return LANGUAGE_DISPLAY_NAMES.get(code, code)
