"""Edition selection per detected language."""

import asyncio
import logging
from typing import Dict, List, Mapping, Optional, Sequence, Union

import requests

from verse_detect.backend.catalog import (
    EditionCatalog,
    build_text_ids_by_language,
    preferred_fallback_mapping,
)
from verse_detect.config import ContentSourceConfig
from verse_detect.data.languages import DEFAULT_LANGUAGE
from verse_detect.data.types import TextInfo
from verse_detect.errors import CatalogError

logger = logging.getLogger(__name__)


class EditionResolver:
    """Decides which edition to fetch or link for a language.

    Content display and link building follow different rules:
    resolve_edition() never substitutes another language's edition, while
    link_text_id() falls back to the configured default and then English.
    """

    def __init__(
        self,
        content_source: Optional[ContentSourceConfig] = None,
        *,
        default_text_id: Optional[str] = None,
        primary_language: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the resolver.

        Args:
            content_source: Content source settings
            default_text_id: Edition used when no language is known
            primary_language: Language used for auto-selection without a language
            session: HTTP session for loading the catalog
        """
        self._source = content_source or ContentSourceConfig()
        self._default_text_id = default_text_id
        self._primary_language = primary_language or DEFAULT_LANGUAGE
        self._session = session
        self._preferred: Dict[str, Union[str, List[str]]] = dict(self._source.preferred_text_ids_by_language)
        self._catalog: Optional[EditionCatalog] = None
        self._mapping: Dict[str, str] = preferred_fallback_mapping(self._preferred)

    # ==================== Catalog ====================

    @property
    def catalog(self) -> Optional[EditionCatalog]:
        """Get the loaded catalog, if any."""
        return self._catalog

    @property
    def catalog_loaded(self) -> bool:
        """Check whether a catalog has been loaded."""
        return self._catalog is not None

    def set_catalog(self, catalog: Optional[EditionCatalog]) -> None:
        """Use a catalog and rebuild the language mapping from it."""
        self._catalog = catalog
        self._rebuild()

    def load_catalog_sync(self) -> Optional[EditionCatalog]:
        """Load the configured catalog, falling back to the preferred ids.

        Returns:
            The catalog, or None when none is configured or it failed to load
        """
        url = self._source.texts_index_url
        if not url:
            logger.warning("No texts_index_url configured, using preferred text ids only")
            self.set_catalog(None)
            return None

        try:
            catalog = EditionCatalog.load(url, session=self._session)
        except CatalogError as exc:
            logger.error("Error loading texts catalog: %s", exc)
            self.set_catalog(None)
            return None

        self.set_catalog(catalog)
        logger.info("Loaded texts catalog, language mapping: %s", self._mapping)
        return catalog

    async def load_catalog(self) -> Optional[EditionCatalog]:
        """Load the catalog without blocking the event loop."""
        return await asyncio.to_thread(self.load_catalog_sync)

    def _rebuild(self) -> None:
        if self._catalog is None:
            self._mapping = preferred_fallback_mapping(self._preferred)
        else:
            self._mapping = build_text_ids_by_language(self._catalog.texts, self._preferred)

    # ==================== Preferences ====================

    def set_preferred_text(self, language: str, text_ids: Union[str, Sequence[str]]) -> None:
        """Set the preferred edition id(s) for a language, in priority order."""
        self._preferred[language] = text_ids if isinstance(text_ids, str) else list(text_ids)
        self._rebuild()

    def set_mapping(self, mapping: Mapping[str, str]) -> None:
        """Replace the language mapping directly."""
        self._mapping = dict(mapping)

    def text_id_mapping(self) -> Dict[str, str]:
        """Get a copy of the language -> edition id mapping."""
        return dict(self._mapping)

    def texts_for_language(self, language: str) -> List[TextInfo]:
        """Get the catalog editions for a language."""
        return self._catalog.texts_for_language(language) if self._catalog else []

    def available_languages(self) -> Dict[str, int]:
        """Count catalog editions per language."""
        return self._catalog.available_languages() if self._catalog else {}

    def has_text_for_language(self, language: str) -> bool:
        """Check whether content can be shown for a language."""
        return language in self._mapping

    # ==================== Resolution ====================

    def resolve_edition(self, language: Optional[str] = None, override: Optional[str] = None) -> Optional[str]:
        """Choose the edition used to display content.

        Args:
            language: Detected language of the reference
            override: Edition requested for this specific reference

        Returns:
            Edition id, or None when the language has no edition
        """
        if override:
            return override

        if language:
            return self._mapping.get(language)

        if self._source.text_id:
            return self._source.text_id

        if self._default_text_id:
            return self._default_text_id

        if self._source.auto_select_by_language:
            if self._primary_language in self._mapping:
                return self._mapping[self._primary_language]
            if DEFAULT_LANGUAGE in self._mapping:
                return self._mapping[DEFAULT_LANGUAGE]
            for text_id in self._mapping.values():
                return text_id

        return None

    def link_text_id(self, language: Optional[str] = None, override: Optional[str] = None) -> str:
        """Choose the edition put into links.

        Returns:
            Edition id, or "" when nothing is configured
        """
        if override:
            return override
        if language and language in self._mapping:
            return self._mapping[language]
        if self._default_text_id:
            return self._default_text_id
        return self._mapping.get(DEFAULT_LANGUAGE, "")
