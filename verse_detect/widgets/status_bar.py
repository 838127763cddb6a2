"""Status bar widget."""

from typing import List, Optional, Tuple

from rich.text import Text
from textual.widgets import Static

# Display mode -> (badge, style)
MODE_BADGES = {
    "link": ("LINK", "bold black on green"),
    "popup": ("POPUP", "bold black on cyan"),
    "both": ("BOTH", "bold black on yellow"),
}

LINK_HINTS: List[Tuple[str, str]] = [("Tab", "next"), ("Enter", "open"), (":", "cmd"), ("q", "quit")]
PREVIEW_HINTS: List[Tuple[str, str]] = [
    ("Tab", "next"),
    ("Enter", "preview"),
    ("o", "open"),
    ("Esc", "close"),
    (":", "cmd"),
]


class StatusBar(Static):
    """One line showing the document, languages, display mode and either a message or key hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._document = ""
        self._reference_count = 0
        self._languages: List[str] = []
        self._display_mode = "both"
        self._focused: Optional[str] = None
        self._message: Optional[str] = None

    @property
    def message(self) -> Optional[str]:
        """Get the message currently shown."""
        return self._message

    def set_document(self, name: str, reference_count: int) -> None:
        self._document = name
        self._reference_count = reference_count
        self._refresh_text()

    def set_languages(self, languages: List[str]) -> None:
        self._languages = list(languages)
        self._refresh_text()

    def set_display_mode(self, mode: str) -> None:
        self._display_mode = mode
        self._refresh_text()

    def set_focused(self, reference: Optional[str]) -> None:
        """Show the focused reference; this also drops any message."""
        self._focused = reference
        self._message = None
        self._refresh_text()

    def show_message(self, message: str) -> None:
        """Replace the key hints with a message until cleared."""
        self._message = message
        self._refresh_text()

    def clear_message(self) -> None:
        self._message = None
        self._refresh_text()

    def render_status(self) -> Text:
        """Build the status line."""
        parts: List[Text] = []
        if self._document:
            parts.append(
                Text.assemble((self._document, "bold"), (f" ({self._reference_count} refs)", "dim"))
            )
        if self._languages:
            parts.append(Text(f"[{' '.join(self._languages)}]", style="cyan"))
        badge, badge_style = MODE_BADGES.get(self._display_mode, MODE_BADGES["both"])
        mode = Text(badge, style=badge_style)
        if self._focused:
            mode.append(f" {self._focused}", style="bold")
        parts.append(mode)

        line = Text(" | ").join(parts)
        line.append("  ")
        if self._message:
            line.append(self._message, style="yellow")
            return line

        hints = LINK_HINTS if self._display_mode == "link" else PREVIEW_HINTS
        line.append_text(
            Text(" ", style="dim").join(
                Text.assemble((key, "bold yellow"), (f" {desc}", "dim")) for key, desc in hints
            )
        )
        return line

    def _refresh_text(self) -> None:
        self.update(self.render_status())
