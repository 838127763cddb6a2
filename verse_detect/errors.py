"""Exceptions raised by verse-detect."""

from typing import Optional

from verse_detect.data.langcodes import get_language_name


class VerseDetectError(Exception):
    """Base class for verse-detect errors."""


class UnresolvedEditionError(VerseDetectError):
    """No edition is available for the detected language."""

    def __init__(self, language: Optional[str]):
        self.language = language
        super().__init__(f"No Bible text available for {get_language_name(language)}")


class FetchError(VerseDetectError):
    """A chapter document could not be retrieved or parsed."""

    def __init__(self, message: str = "Chapter not available", *, url: str = ""):
        self.url = url
        super().__init__(message)


class VerseNotFoundError(VerseDetectError):
    """The chapter was retrieved but holds none of the requested verses."""

    def __init__(self, fragment_id: str = ""):
        self.fragment_id = fragment_id
        super().__init__("Verse not found")


class InvalidReferenceError(VerseDetectError):
    """A reference string could not be parsed."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__("Invalid verse reference")


class CatalogError(VerseDetectError):
    """The texts catalog could not be loaded."""
