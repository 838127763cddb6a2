"""Edition catalog, chapter sources and verse retrieval."""

from verse_detect.backend.catalog import EditionCatalog, build_text_ids_by_language, parse_catalog
from verse_detect.backend.editions import EditionResolver
from verse_detect.backend.extractor import clean_verse, extract_verses
from verse_detect.backend.fetcher import VerseCache, VerseFetcher, cache_key
from verse_detect.backend.sources import (
    AppChapterSource,
    ChapterSource,
    LocalChapterSource,
    RemoteChapterSource,
    make_chapter_source,
)

__all__ = [
    "EditionCatalog",
    "build_text_ids_by_language",
    "parse_catalog",
    "EditionResolver",
    "clean_verse",
    "extract_verses",
    "VerseCache",
    "VerseFetcher",
    "cache_key",
    "AppChapterSource",
    "ChapterSource",
    "LocalChapterSource",
    "RemoteChapterSource",
    "make_chapter_source",
]
