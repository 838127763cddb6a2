"""Tests for chapter document sources."""

import asyncio
import logging

import pytest
import requests

from verse_detect.app import VerseDetectApp
from verse_detect.backend.sources import (
    AppChapterSource,
    LocalChapterSource,
    RemoteChapterSource,
    build_chapter_path,
    make_chapter_source,
)
from verse_detect.config import ContentSourceConfig, merge_config
from verse_detect.errors import FetchError


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, text="", content_type="text/html"):
        self.status_code = status_code
        self.text = text
        self.headers = {"Content-Type": content_type}
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class FakeSession:
    """Records requested URLs and returns a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.urls = []

    def get(self, url, headers=None, timeout=None):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.response


class TestBuildChapterPath:
    """Test path template filling."""

    def test_placeholders(self):
        """All placeholders are replaced."""
        path = build_chapter_path("{baseUrl}/{textId}/{sectionId}.html", "https://example.org/", "ENGWEB", "JN3")
        assert path == "https://example.org/ENGWEB/JN3.html"


class TestRemoteChapterSource:
    """Test RemoteChapterSource."""

    def test_load(self):
        """Chapter is downloaded from the templated URL."""
        session = FakeSession(FakeResponse(text="<div>chapter</div>"))
        source = RemoteChapterSource("https://example.org/texts", session=session)
        html = asyncio.run(source.load_chapter("ENGWEB", "JN3"))
        assert html == "<div>chapter</div>"
        assert session.urls == ["https://example.org/texts/ENGWEB/JN3.html"]

    def test_missing_charset_defaults_to_utf8(self):
        """Responses without a charset are decoded as UTF-8."""
        response = FakeResponse(text="ok")
        source = RemoteChapterSource("https://example.org", session=FakeSession(response))
        asyncio.run(source.load_chapter("ENGWEB", "JN3"))
        assert response.encoding == "utf-8"

    def test_not_found(self):
        """A 404 raises FetchError carrying the URL."""
        session = FakeSession(FakeResponse(status_code=404))
        source = RemoteChapterSource("https://example.org", session=session)
        with pytest.raises(FetchError) as exc:
            asyncio.run(source.load_chapter("ENGWEB", "JN3"))
        assert exc.value.url == "https://example.org/ENGWEB/JN3.html"
        assert str(exc.value) == "Chapter not available"

    def test_network_error(self):
        """Connection errors raise FetchError."""
        session = FakeSession(error=requests.ConnectionError("refused"))
        source = RemoteChapterSource("https://example.org", session=session)
        with pytest.raises(FetchError):
            asyncio.run(source.load_chapter("ENGWEB", "JN3"))


class TestLocalChapterSource:
    """Test LocalChapterSource."""

    def test_load(self, tmp_path):
        """Chapter is read from the directory tree."""
        (tmp_path / "ENGWEB").mkdir()
        (tmp_path / "ENGWEB" / "JN3.html").write_text("<div>local</div>", encoding="utf-8")
        source = make_chapter_source(ContentSourceConfig(type="local", base_url=str(tmp_path)))
        assert isinstance(source, LocalChapterSource)
        assert asyncio.run(source.load_chapter("ENGWEB", "JN3")) == "<div>local</div>"

    def test_missing(self, tmp_path):
        """A missing file raises FetchError."""
        source = LocalChapterSource(tmp_path)
        with pytest.raises(FetchError):
            asyncio.run(source.load_chapter("ENGWEB", "JN3"))


class TestAppChapterSource:
    """Test AppChapterSource."""

    def test_sync_loader(self):
        """A plain function loader is called."""
        calls = []

        def loader(text_id, section_id):
            calls.append((text_id, section_id))
            return "<div>app</div>"

        source = AppChapterSource(loader)
        assert asyncio.run(source.load_chapter("ENGWEB", "JN3")) == "<div>app</div>"
        assert calls == [("ENGWEB", "JN3")]

    def test_async_loader(self):
        """A coroutine loader is awaited."""

        async def loader(text_id, section_id):
            return f"<div>{text_id} {section_id}</div>"

        source = AppChapterSource(loader)
        assert asyncio.run(source.load_chapter("ENGWEB", "JN3")) == "<div>ENGWEB JN3</div>"

    def test_loader_failure(self):
        """Loader exceptions become FetchError."""

        def loader(text_id, section_id):
            raise KeyError(section_id)

        source = AppChapterSource(loader)
        with pytest.raises(FetchError) as exc:
            asyncio.run(source.load_chapter("ENGWEB", "JN3"))
        assert str(exc.value) == "Failed to load chapter"


class TestMakeChapterSource:
    """Test make_chapter_source."""

    def test_remote(self):
        """Remote type builds a RemoteChapterSource."""
        source = make_chapter_source(ContentSourceConfig(base_url="https://example.org"))
        assert isinstance(source, RemoteChapterSource)
        assert source.chapter_url("ENGWEB", "JN3") == "https://example.org/ENGWEB/JN3.html"

    def test_app_without_loader(self):
        """App type without a loader fails each fetch instead of at startup."""
        source = make_chapter_source(ContentSourceConfig(type="app"))
        assert isinstance(source, AppChapterSource)
        with pytest.raises(FetchError) as exc:
            asyncio.run(source.load_chapter("ENGWEB", "JN3"))
        assert str(exc.value) == "App text loader not available"

    def test_app(self):
        """App type wraps the loader."""
        source = make_chapter_source(ContentSourceConfig(type="app"), app_loader=lambda t, s: "")
        assert isinstance(source, AppChapterSource)

    def test_unknown_type(self, caplog):
        """Unknown types fall back to remote with a warning."""
        with caplog.at_level(logging.WARNING):
            source = make_chapter_source(ContentSourceConfig(type="Remote", base_url="https://example.org"))
        assert isinstance(source, RemoteChapterSource)
        assert source.chapter_url("ENGWEB", "JN3") == "https://example.org/ENGWEB/JN3.html"
        assert "Remote" in caplog.text


class TestReaderStartup:
    """Test that content source settings never stop the reader from starting."""

    def test_app_type_without_loader(self):
        """The reader starts and the fetch reports the missing loader."""
        config = merge_config({"content_source": {"type": "app", "texts_index_url": None}})
        app = VerseDetectApp(None, config=config)
        with pytest.raises(FetchError) as exc:
            asyncio.run(app.fetcher.source.load_chapter("ENGWEB", "JN3"))
        assert str(exc.value) == "App text loader not available"

    def test_unknown_type(self):
        """An unrecognised type starts with the remote source."""
        config = merge_config({"content_source": {"type": "Remote", "texts_index_url": None}})
        app = VerseDetectApp(None, config=config)
        assert isinstance(app.fetcher.source, RemoteChapterSource)
