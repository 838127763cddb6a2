"""Floating verse preview widget."""

import re
from html import escape
from typing import Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from rich.style import Style
from rich.text import Text
from textual.events import Click, Enter, Leave
from textual.message import Message
from textual.widgets import Static

from verse_detect.config import PopupConfig
from verse_detect.data.types import VerseContent
from verse_detect.popup.render import LOADING_HTML, build_error_html, build_popup_html

_WHITESPACE = re.compile(r"\s+")

# Blocks that start on a new line
_BLOCK_CLASSES = (
    "verse-popup-content",
    "verse-popup-footnotes",
    "verse-popup-footnote",
    "verse-popup-social",
)


def _classes(tag: Tag) -> list:
    return tag.get("class") or []


def _append_html(text: Text, node: Tag, style: Style) -> None:
    """Append the rendering of node's children to text."""
    for child in node.children:
        if isinstance(child, NavigableString):
            text.append(_WHITESPACE.sub(" ", str(child)), style=style)
            continue
        if not isinstance(child, Tag):
            continue

        classes = _classes(child)
        if any(cls in classes for cls in _BLOCK_CLASSES) and text.plain and not text.plain.endswith("\n"):
            text.append("\n")

        if "verse-popup-header" in classes:
            text.append(child.get_text(strip=True), style=style + Style(bold=True, color="cyan"))
            text.append("\n")
        elif "v-num" in classes:
            text.append(child.get_text(strip=True), style=style + Style(bold=True, color="yellow"))
            text.append(" ")
        elif "note-marker" in classes:
            text.append(child.get_text(strip=True), style=style + Style(dim=True, italic=True))
        elif "fn-key" in classes:
            text.append(child.get_text(strip=True), style=style + Style(bold=True))
            text.append(" ")
        elif "bibleref" in classes or "xt" in classes:
            ref = child.get("data-id") or child.get("title") or child.get_text(strip=True)
            link = Style(underline=True, color="cyan") + Style.from_meta({"xref": ref})
            text.append(child.get_text(), style=style + link)
        elif "verse-popup-social-btn" in classes:
            platform = child.get("data-platform", "")
            text.append(f"[{platform}]", style=Style(color="magenta") + Style.from_meta({"share": platform}))
            text.append(" ")
        elif "verse-popup-logo" in classes:
            text.append("\n")
            text.append(child.get_text(strip=True), style=Style(dim=True) + Style.from_meta({"url": child.get("href", "")}))
        elif "verse-popup-error" in classes:
            text.append(child.get_text(strip=True), style=Style(color="red"))
        elif "verse-popup-loading" in classes:
            text.append(child.get_text(strip=True) + "...", style=Style(dim=True, italic=True))
        elif child.name in ("i", "em"):
            _append_html(text, child, style + Style(italic=True))
        elif child.name in ("b", "strong"):
            _append_html(text, child, style + Style(bold=True))
        elif child.name == "br":
            text.append("\n")
        else:
            _append_html(text, child, style)


def html_to_rich(html: str) -> Text:
    """Render popup markup as rich Text.

    Cross-references carry an "xref" meta value and share buttons a
    "share" meta value so clicks can be traced back to them.
    """
    text = Text()
    _append_html(text, BeautifulSoup(html, "html.parser"), Style())
    text.rstrip()
    return text


class VersePopup(Static):
    """Overlay showing the text of the reference under the pointer or focus."""

    DEFAULT_CSS = """
    VersePopup {
        layer: overlay;
        width: 60;
        max-height: 16;
        height: auto;
        overflow-y: auto;
        padding: 0 1;
        background: $panel;
        border: round $accent;
    }
    VersePopup.error {
        border: round $error;
    }
    """

    class PopupEntered(Message):
        """Pointer moved onto the popup."""

    class PopupLeft(Message):
        """Pointer left the popup."""

    class CrossReferenceClicked(Message):
        """A cross-reference in a footnote was clicked."""

        def __init__(self, reference: str) -> None:
            self.reference = reference
            super().__init__()

    class ShareRequested(Message):
        """A share button was clicked."""

        def __init__(self, platform: str) -> None:
            self.platform = platform
            super().__init__()

    class LinkClicked(Message):
        """The attribution link was clicked."""

        def __init__(self, url: str) -> None:
            self.url = url
            super().__init__()

    def __init__(self, config: Optional[PopupConfig] = None, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.config = config or PopupConfig()
        self.reference = ""
        self.content: Optional[VerseContent] = None
        self._text = Text()

    def show_loading(self, reference: str) -> None:
        """Show the loading indicator for a reference."""
        self.reference = reference
        self.content = None
        self._show(LOADING_HTML, error=False)

    def show_content(self, reference: str, content: VerseContent) -> None:
        """Show verse text, footnotes and the optional share row."""
        self.reference = reference
        self.content = content
        self._show(build_popup_html(reference, content, self.config), error=False)

    def show_error(self, reference: str, message: str) -> None:
        """Show an inline error."""
        self.reference = reference
        self.content = None
        header = ""
        if self.config.show_header:
            header = f'<div class="verse-popup-header">{escape(reference)}</div>'
        self._show(header + build_error_html(message), error=True)

    def close(self) -> None:
        """Hide the popup."""
        self.display = False
        self.content = None

    def move_to(self, x: int, y: int) -> None:
        """Place the popup at screen coordinates."""
        self.styles.offset = (x, y)

    def estimated_size(self, max_height: int = 16) -> Tuple[int, int]:
        """Size of the popup for the text last shown, before layout catches up."""
        width = self.outer_size.width or 60
        inner = max(1, width - 4)  # Border and padding
        lines = len(self._text.wrap(self.app.console, inner))
        return width, min(lines + 2, max_height)

    def _show(self, html: str, error: bool) -> None:
        self.set_class(error, "error")
        self._text = html_to_rich(html)
        self.update(self._text)
        self.display = True
        self.scroll_home(animate=False)

    # ==================== Events ====================

    def on_enter(self, event: Enter) -> None:
        """Keep the popup open while the pointer is over it."""
        self.post_message(self.PopupEntered())

    def on_leave(self, event: Leave) -> None:
        """Start the hide delay."""
        self.post_message(self.PopupLeft())

    def on_click(self, event: Click) -> None:
        """Dispatch clicks on cross-references, share buttons and links."""
        meta = event.style.meta
        if "xref" in meta:
            event.stop()
            self.post_message(self.CrossReferenceClicked(meta["xref"]))
        elif "share" in meta:
            event.stop()
            self.post_message(self.ShareRequested(meta["share"]))
        elif meta.get("url"):
            event.stop()
            self.post_message(self.LinkClicked(meta["url"]))
