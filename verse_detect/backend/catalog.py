"""Texts catalog: the editions available and their languages."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

import requests

from verse_detect.data.langcodes import normalize_lang_code
from verse_detect.data.types import TextInfo
from verse_detect.errors import CatalogError

logger = logging.getLogger(__name__)

PreferredIds = Mapping[str, Union[str, Sequence[str]]]

HEADERS = {"User-Agent": "verse-detect/0.1 (+https://inscript.org)"}
CATALOG_TIMEOUT = 30  # seconds


def _text_language(text: TextInfo) -> Optional[str]:
    return normalize_lang_code(text.lang, text.lang_name_english or text.lang_name)


def parse_catalog(data: Any) -> List[TextInfo]:
    """Read catalog JSON, either ``{"textInfoData": [...]}`` or a bare list.

    Raises:
        CatalogError: If the data has neither shape
    """
    if isinstance(data, dict):
        data = data.get("textInfoData")
    if not isinstance(data, list):
        raise CatalogError("Texts catalog must be a list or hold 'textInfoData'")

    texts: List[TextInfo] = []
    for entry in data:
        if not isinstance(entry, dict) or not entry.get("id"):
            logger.debug("Skipping catalog entry without id: %r", entry)
            continue
        texts.append(TextInfo.from_dict(entry))
    return texts


def build_text_ids_by_language(
    texts: Optional[Iterable[TextInfo]], preferred: Optional[PreferredIds] = None
) -> Dict[str, str]:
    """Choose one edition id per language.

    Only eligible editions (type "bible" with text) are considered. For each
    language the preferred ids are tried in order, case-insensitively;
    otherwise the edition whose name sorts first is used.

    Args:
        texts: Catalog entries
        preferred: Language code -> preferred id or ids in priority order

    Returns:
        Language code -> edition id
    """
    if not texts:
        return {}
    preferred = preferred or {}

    by_language: Dict[str, List[TextInfo]] = {}
    for text in texts:
        if not text.is_eligible:
            continue
        code = _text_language(text)
        if not code:
            continue
        by_language.setdefault(code, []).append(text)

    mapping: Dict[str, str] = {}
    for code, candidates in by_language.items():
        wanted = preferred.get(code) or ()
        if isinstance(wanted, str):
            wanted = [wanted]

        selected: Optional[str] = None
        for pref_id in wanted:
            for text in candidates:
                if text.id.upper() == pref_id.upper():
                    selected = text.id
                    break
            if selected:
                break

        if not selected:
            selected = sorted(candidates, key=lambda t: t.name)[0].id
        mapping[code] = selected

    return mapping


def preferred_fallback_mapping(preferred: Optional[PreferredIds]) -> Dict[str, str]:
    """Mapping used when no catalog is available: first preferred id per language."""
    mapping: Dict[str, str] = {}
    for code, ids in (preferred or {}).items():
        if isinstance(ids, str):
            if ids:
                mapping[code] = ids
        elif ids:
            mapping[code] = ids[0]
    return mapping


class EditionCatalog:
    """The list of editions published by a content server."""

    def __init__(self, texts: Optional[Iterable[TextInfo]] = None):
        self._texts: List[TextInfo] = list(texts or [])

    @property
    def texts(self) -> List[TextInfo]:
        """Get all catalog entries."""
        return list(self._texts)

    def __len__(self) -> int:
        return len(self._texts)

    @classmethod
    def from_json(cls, data: Any) -> "EditionCatalog":
        """Create from decoded catalog JSON."""
        return cls(parse_catalog(data))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EditionCatalog":
        """Load a catalog from a local JSON file.

        Raises:
            CatalogError: If the file cannot be read or parsed
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Could not read texts catalog {path}: {exc}") from exc
        return cls.from_json(data)

    @classmethod
    def from_url(
        cls, url: str, session: Optional[requests.Session] = None, timeout: float = CATALOG_TIMEOUT
    ) -> "EditionCatalog":
        """Download a catalog.

        Raises:
            CatalogError: On network, HTTP or JSON errors
        """
        session = session or requests.Session()
        try:
            resp = session.get(url, headers=HEADERS, timeout=timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise CatalogError(f"Could not load texts catalog {url}: {exc}") from exc
        return cls.from_json(data)

    @classmethod
    def load(cls, source: str, session: Optional[requests.Session] = None) -> "EditionCatalog":
        """Load from an http(s) URL or a file path."""
        if source.startswith(("http://", "https://")):
            return cls.from_url(source, session=session)
        return cls.from_file(source)

    def texts_for_language(self, code: str) -> List[TextInfo]:
        """Get the eligible editions for a 2-letter language code."""
        return [t for t in self._texts if t.is_eligible and _text_language(t) == code]

    def available_languages(self) -> Dict[str, int]:
        """Count eligible editions per language."""
        counts: Dict[str, int] = {}
        for text in self._texts:
            if not text.is_eligible:
                continue
            code = _text_language(text)
            if code:
                counts[code] = counts.get(code, 0) + 1
        return counts

    def build_text_ids_by_language(self, preferred: Optional[PreferredIds] = None) -> Dict[str, str]:
        """Choose one edition id per language, see build_text_ids_by_language()."""
        return build_text_ids_by_language(self._texts, preferred)

    def get(self, text_id: str) -> Optional[TextInfo]:
        """Look up an edition by id (case-insensitive)."""
        for text in self._texts:
            if text.id.upper() == text_id.upper():
                return text
        return None
