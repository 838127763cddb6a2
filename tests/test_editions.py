"""Tests for edition resolution."""

import asyncio
import json

import requests

from verse_detect.backend.catalog import EditionCatalog
from verse_detect.backend.editions import EditionResolver
from verse_detect.config import ContentSourceConfig

CATALOG = [
    {"id": "ENGKJV", "name": "King James Version", "lang": "eng"},
    {"id": "ENGWEB", "name": "World English Bible", "lang": "eng"},
    {"id": "SPNRVG", "name": "Reina Valera Gomez", "lang": "spa"},
    {"id": "FRNLSG", "name": "Louis Segond", "lang": "fra"},
]


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self._payload


class FakeSession:
    """Records requested URLs and returns a canned response."""

    def __init__(self, response):
        self.response = response
        self.urls = []

    def get(self, url, headers=None, timeout=None):
        self.urls.append(url)
        return self.response


def make_resolver(**source):
    source.setdefault("texts_index_url", None)
    return EditionResolver(ContentSourceConfig(**source))


class TestResolveEdition:
    """Test edition choice for content."""

    def test_catalog_preferred(self):
        """English maps to the preferred edition from the catalog."""
        resolver = make_resolver()
        resolver.set_catalog(EditionCatalog.from_json(CATALOG))
        assert resolver.resolve_edition("en") == "ENGWEB"

    def test_language_without_edition(self):
        """A language missing from the catalog resolves to None."""
        resolver = make_resolver()
        resolver.set_catalog(EditionCatalog.from_json(CATALOG))
        assert resolver.resolve_edition("id") is None
        assert not resolver.has_text_for_language("id")

    def test_no_substitution_across_languages(self):
        """An unmapped language never borrows another language's edition."""
        resolver = make_resolver(text_id="ENGKJV")
        assert resolver.resolve_edition("de") is None

    def test_override(self):
        """A per-reference override wins over everything."""
        resolver = make_resolver()
        assert resolver.resolve_edition("id", override="INDTB") == "INDTB"

    def test_fallback_mapping_without_catalog(self):
        """Without a catalog the first preferred ids are used."""
        resolver = make_resolver()
        assert resolver.resolve_edition("en") == "ENGWEB"
        assert resolver.resolve_edition("es") == "SPNRVG"

    def test_no_language_uses_configured_text(self):
        """Without a language the configured text id is used."""
        resolver = make_resolver(text_id="ENGKJV")
        assert resolver.resolve_edition() == "ENGKJV"

    def test_no_language_uses_default_text(self):
        """Without a language or text id the default text id is used."""
        resolver = EditionResolver(ContentSourceConfig(texts_index_url=None), default_text_id="ENGDRA")
        assert resolver.resolve_edition() == "ENGDRA"

    def test_no_language_auto_select(self):
        """Auto-selection prefers the primary language."""
        resolver = EditionResolver(ContentSourceConfig(texts_index_url=None), primary_language="es")
        assert resolver.resolve_edition() == "SPNRVG"

    def test_no_language_without_auto_select(self):
        """Nothing is chosen when auto-selection is off."""
        resolver = make_resolver(auto_select_by_language=False)
        assert resolver.resolve_edition() is None

    def test_set_preferred_text(self):
        """Changing a preference rebuilds the mapping."""
        resolver = make_resolver()
        resolver.set_catalog(EditionCatalog.from_json(CATALOG))
        resolver.set_preferred_text("en", ["ENGKJV"])
        assert resolver.resolve_edition("en") == "ENGKJV"


class TestLinkTextId:
    """Test edition choice for links."""

    def test_language_mapping(self):
        """Mapped languages use their edition."""
        assert make_resolver().link_text_id("es") == "SPNRVG"

    def test_falls_back_to_english(self):
        """Unmapped languages fall back to English in links."""
        assert make_resolver().link_text_id("id") == "ENGWEB"

    def test_default_text_id(self):
        """The default text id comes before English."""
        resolver = EditionResolver(ContentSourceConfig(texts_index_url=None), default_text_id="ENGDRA")
        assert resolver.link_text_id("id") == "ENGDRA"

    def test_nothing_configured(self):
        """No mapping at all gives an empty id."""
        resolver = make_resolver(preferred_text_ids_by_language={})
        assert resolver.link_text_id("id") == ""


class TestLoadCatalog:
    """Test catalog loading."""

    def test_no_url(self):
        """Without a URL the fallback mapping stays in place."""
        resolver = make_resolver()
        assert resolver.load_catalog_sync() is None
        assert not resolver.catalog_loaded
        assert resolver.text_id_mapping() == {"en": "ENGWEB", "es": "SPNRVG"}

    def test_bad_file(self, tmp_path):
        """A corrupt catalog file is logged and ignored."""
        path = tmp_path / "texts.json"
        path.write_text("[")
        resolver = make_resolver(texts_index_url=str(path))
        assert resolver.load_catalog_sync() is None
        assert resolver.resolve_edition("en") == "ENGWEB"

    def test_file(self, tmp_path):
        """A catalog file rebuilds the mapping."""
        path = tmp_path / "texts.json"
        path.write_text(json.dumps(CATALOG))
        resolver = make_resolver(texts_index_url=str(path))
        catalog = resolver.load_catalog_sync()
        assert len(catalog) == 4
        assert resolver.resolve_edition("fr") == "FRNLSG"

    def test_url(self):
        """A catalog URL is downloaded through the session."""
        session = FakeSession(FakeResponse(payload={"textInfoData": CATALOG}))
        resolver = EditionResolver(
            ContentSourceConfig(texts_index_url="https://example.org/texts.json"),
            session=session,
        )
        asyncio.run(resolver.load_catalog())
        assert session.urls == ["https://example.org/texts.json"]
        assert resolver.resolve_edition("fr") == "FRNLSG"

    def test_url_http_error(self):
        """An HTTP error keeps the fallback mapping."""
        session = FakeSession(FakeResponse(status_code=500))
        resolver = EditionResolver(
            ContentSourceConfig(texts_index_url="https://example.org/texts.json"),
            session=session,
        )
        assert resolver.load_catalog_sync() is None
        assert resolver.resolve_edition("en") == "ENGWEB"
        assert resolver.resolve_edition("fr") is None
