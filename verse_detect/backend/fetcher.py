"""Verse content retrieval with memoization."""

import logging
import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple, Union

from verse_detect.backend.editions import EditionResolver
from verse_detect.backend.extractor import extract_verses
from verse_detect.backend.sources import ChapterSource
from verse_detect.data.types import ParsedReference, VerseContent
from verse_detect.detection.references import parse_reference
from verse_detect.errors import InvalidReferenceError, UnresolvedEditionError

logger = logging.getLogger(__name__)


class VerseCache:
    """Extracted verses keyed by reference and edition or language.

    Unbounded unless a capacity or a TTL is given. With a capacity the
    least recently used entry is dropped first.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries, None for no limit
            ttl: Seconds an entry stays valid, None for no expiry
            clock: Time source in seconds
        """
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[float, VerseContent]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Optional[VerseContent]:
        """Return a live entry, or None."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, content = entry
        if self.ttl is not None and self._clock() - stored_at > self.ttl:
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return content

    def put(self, key: str, content: VerseContent) -> None:
        """Store an entry, evicting the oldest one when full."""
        self._entries[key] = (self._clock(), content)
        self._entries.move_to_end(key)
        if self.capacity is not None:
            while len(self._entries) > self.capacity:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()


def cache_key(reference: str, language: Optional[str] = None, edition: Optional[str] = None) -> str:
    """Build the cache key: the reference plus the edition override or language."""
    if edition:
        return f"{reference}:{edition}"
    if language:
        return f"{reference}:{language}"
    return reference


class VerseFetcher:
    """Resolves an edition, loads the chapter and extracts the verses."""

    def __init__(
        self,
        resolver: EditionResolver,
        source: ChapterSource,
        *,
        cache: Optional[VerseCache] = None,
        cache_content: bool = True,
        show_verse_numbers: bool = True,
    ):
        self.resolver = resolver
        self.source = source
        self.cache = cache if cache is not None else VerseCache()
        self.cache_content = cache_content
        self.show_verse_numbers = show_verse_numbers

    async def fetch_verse_content(
        self,
        reference: Union[str, ParsedReference],
        language: Optional[str] = None,
        edition: Optional[str] = None,
    ) -> VerseContent:
        """Fetch the verses of a reference.

        Args:
            reference: Canonical reference ("John 3:16") or a ParsedReference
            language: Detected language of the reference
            edition: Edition override for this reference

        Returns:
            Verse HTML with its footnotes

        Raises:
            InvalidReferenceError: If the reference cannot be parsed
            UnresolvedEditionError: If the language has no edition
            FetchError: If the chapter cannot be loaded
            VerseNotFoundError: If the chapter lacks the verses
        """
        if isinstance(reference, ParsedReference):
            parsed: Optional[ParsedReference] = reference
            ref_text = reference.reference
        else:
            ref_text = reference.strip()
            parsed = None

        key = cache_key(ref_text, language, edition)
        if self.cache_content:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %s", key)
                return cached

        if parsed is None:
            parsed = parse_reference(ref_text)
            if parsed is None:
                raise InvalidReferenceError(ref_text)

        text_id = self.resolver.resolve_edition(language, edition)
        if not text_id:
            raise UnresolvedEditionError(language)

        html = await self.source.load_chapter(text_id, parsed.section_id)
        content = extract_verses(html, parsed, self.show_verse_numbers)

        if self.cache_content:
            self.cache.put(key, content)
        return content

    def clear_cache(self) -> None:
        """Drop every cached result."""
        self.cache.clear()
