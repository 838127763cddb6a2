"""Chapter document sources: remote server, local directory, host loader."""

import asyncio
import inspect
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, Protocol, Union

import requests

from verse_detect.config import ContentSourceConfig
from verse_detect.errors import FetchError

logger = logging.getLogger(__name__)

CHAPTER_TIMEOUT = 30  # seconds
HEADERS = {"User-Agent": "verse-detect/0.1 (+https://inscript.org)"}

# Host-supplied loader: (text_id, section_id) -> chapter HTML, sync or async
ChapterLoader = Callable[[str, str], Union[str, Awaitable[str]]]


class ChapterSource(Protocol):
    """Anything that can produce the HTML of one chapter."""

    async def load_chapter(self, text_id: str, section_id: str) -> str:
        """Return the chapter document for an edition and section id."""
        ...


def build_chapter_path(template: str, base_url: str, text_id: str, section_id: str) -> str:
    """Fill the {baseUrl}, {textId} and {sectionId} placeholders."""
    return (
        template.replace("{baseUrl}", base_url.rstrip("/"))
        .replace("{textId}", text_id)
        .replace("{sectionId}", section_id)
    )


class RemoteChapterSource:
    """Fetches chapter documents over HTTP."""

    def __init__(
        self,
        base_url: str,
        path_template: str = "{baseUrl}/{textId}/{sectionId}.html",
        *,
        session: Optional[requests.Session] = None,
        timeout: float = CHAPTER_TIMEOUT,
    ):
        self.base_url = base_url
        self.path_template = path_template
        self.timeout = timeout
        self._session = session or requests.Session()

    def chapter_url(self, text_id: str, section_id: str) -> str:
        """Build the URL of a chapter document."""
        return build_chapter_path(self.path_template, self.base_url, text_id, section_id)

    def _get(self, url: str) -> str:
        try:
            resp = self._session.get(url, headers=HEADERS, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Chapter fetch failed for %s: %s", url, exc)
            raise FetchError(url=url) from exc
        if "charset" not in resp.headers.get("Content-Type", "").lower():
            resp.encoding = "utf-8"
        return resp.text

    async def load_chapter(self, text_id: str, section_id: str) -> str:
        """Download a chapter without blocking the event loop.

        Raises:
            FetchError: On network or HTTP errors
        """
        url = self.chapter_url(text_id, section_id)
        logger.debug("Fetching %s", url)
        return await asyncio.to_thread(self._get, url)


class LocalChapterSource:
    """Reads chapter documents from a directory tree."""

    def __init__(self, root: Union[str, Path], path_template: str = "{textId}/{sectionId}.html"):
        self.root = Path(root)
        self.path_template = path_template

    def chapter_path(self, text_id: str, section_id: str) -> Path:
        """Build the file path of a chapter document."""
        relative = build_chapter_path(self.path_template, "", text_id, section_id).lstrip("/")
        return self.root / relative

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Chapter read failed for %s: %s", path, exc)
            raise FetchError(url=str(path)) from exc

    async def load_chapter(self, text_id: str, section_id: str) -> str:
        """Read a chapter file.

        Raises:
            FetchError: If the file is missing or unreadable
        """
        return await asyncio.to_thread(self._read, self.chapter_path(text_id, section_id))


def _missing_app_loader(text_id: str, section_id: str) -> str:
    raise FetchError("App text loader not available")


class AppChapterSource:
    """Delegates to a loader supplied by the host application."""

    def __init__(self, loader: ChapterLoader):
        self._loader = loader

    async def load_chapter(self, text_id: str, section_id: str) -> str:
        """Call the host loader.

        Raises:
            FetchError: If the loader fails
        """
        try:
            result = self._loader(text_id, section_id)
            if inspect.isawaitable(result):
                result = await result
        except FetchError:
            raise
        except Exception as exc:
            logger.warning("App loader failed for %s/%s: %s", text_id, section_id, exc)
            raise FetchError("Failed to load chapter") from exc
        return result


def make_chapter_source(
    config: ContentSourceConfig,
    *,
    app_loader: Optional[ChapterLoader] = None,
    session: Optional[requests.Session] = None,
) -> ChapterSource:
    """Create the chapter source for a content source type.

    Unknown types fall back to remote. "app" without a loader gives a
    source that fails each fetch, so the error shows in the popup.
    """
    if config.type == "local":
        template = config.path_template.replace("{baseUrl}/", "").replace("{baseUrl}", "")
        return LocalChapterSource(config.base_url, template)
    if config.type == "app":
        if app_loader is None:
            logger.warning("Content source is \"app\" but no text loader was given")
            return AppChapterSource(_missing_app_loader)
        return AppChapterSource(app_loader)
    if config.type != "remote":
        logger.warning("Unknown content source type %r, using remote", config.type)
    return RemoteChapterSource(config.base_url, config.path_template, session=session)
