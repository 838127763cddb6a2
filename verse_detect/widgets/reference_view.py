"""Document view with highlighted scripture references."""

from typing import List, Optional, Set

from rich.style import Style
from rich.text import Text
from textual.events import Click, Leave, MouseMove
from textual.message import Message
from textual.widgets import Static

from verse_detect.data.types import ParsedVerseReference
from verse_detect.popup.position import Rect

_REF_META = "verse_ref"


class ReferenceView(Static, can_focus=True):
    """Renders prose with each detected reference as a hoverable span.

    Keyboard focus moves between references with Tab / Shift+Tab; the
    focused reference is drawn reversed.
    """

    DEFAULT_CSS = """
    ReferenceView {
        width: 100%;
        height: auto;
        padding: 1 2;
        background: $surface;
    }
    """

    class ReferenceEntered(Message):
        """Pointer moved onto a reference."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    class ReferenceLeft(Message):
        """Pointer left a reference."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    class ReferenceClicked(Message):
        """A reference was clicked."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    class ReferenceKey(Message):
        """Enter, Space or Escape pressed while a reference has focus."""

        def __init__(self, index: Optional[int], key: str) -> None:
            self.index = index
            self.key = key
            super().__init__()

    class FocusMoved(Message):
        """Keyboard focus moved to another reference."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._text = ""
        self._verses: List[ParsedVerseReference] = []
        self._linked: Optional[Set[int]] = None
        self._focused: Optional[int] = None
        self._hovered: Optional[int] = None
        self._expanded: Optional[int] = None
        self._highlight = True
        self._underline = True
        self._rendered = Text()

    @property
    def verses(self) -> List[ParsedVerseReference]:
        """Get the references shown in the document."""
        return self._verses

    @property
    def focused_index(self) -> Optional[int]:
        """Get the reference holding keyboard focus."""
        return self._focused

    def set_document(
        self,
        text: str,
        verses: List[ParsedVerseReference],
        linked: Optional[Set[int]] = None,
    ) -> None:
        """Show a document and its detected references.

        Args:
            text: Plain text of the document
            verses: References found in text, in order
            linked: Indexes of references that have an edition; None for all
        """
        self._text = text
        self._verses = verses
        self._linked = linked
        self._focused = None
        self._hovered = None
        self._expanded = None
        self._render_document()

    def set_styling(self, highlight: bool = True, underline: bool = True) -> None:
        """Set how references are drawn."""
        self._highlight = highlight
        self._underline = underline
        self._render_document()

    def set_expanded(self, index: int, expanded: bool) -> None:
        """Mark the reference that owns the open popup."""
        if expanded:
            self._expanded = index
        elif self._expanded == index:
            self._expanded = None
        self._render_document()

    def focus_reference(self, index: int) -> None:
        """Move keyboard focus to a reference."""
        if not self._verses:
            return
        self._focused = max(0, min(index, len(self._verses) - 1))
        self.focus()
        self._render_document()

    # ==================== Rendering ====================

    def _reference_style(self, index: int) -> Style:
        linked = self._linked is None or index in self._linked
        color = "cyan" if linked else "bright_black"
        style = Style(
            color=color if self._highlight else None,
            underline=self._underline and linked,
            bold=index == self._expanded,
            reverse=index == self._focused,
        )
        return style + Style.from_meta({_REF_META: index})

    def _render_document(self) -> None:
        """Build the rich Text with one styled span per reference."""
        text = Text()
        last_end = 0
        for index, verse in enumerate(self._verses):
            start, end = verse.span
            if start > last_end:
                text.append(self._text[last_end:start])
            text.append(self._text[start:end], style=self._reference_style(index))
            last_end = end
        if last_end < len(self._text):
            text.append(self._text[last_end:])
        self._rendered = text
        self.update(text)

    def reference_rect(self, index: int) -> Rect:
        """Approximate screen box of a reference, from the wrapped layout."""
        region = self.content_region
        if not 0 <= index < len(self._verses):
            return Rect(region.x, region.y, 1, 1)

        start, end = self._verses[index].span
        width = max(1, region.width)
        offset = 0
        row = 0
        for paragraph in self._rendered.split("\n", allow_blank=True):
            for line in paragraph.wrap(self.app.console, width):
                length = len(line.plain)
                if offset <= start < offset + max(length, 1):
                    column = start - offset
                    span_width = min(end - start, width - column)
                    return Rect(region.x + column, region.y + row, max(span_width, 1), 1)
                offset += length
                row += 1
            offset += 1  # The newline removed by split()
        return Rect(region.x, region.y, 1, 1)

    # ==================== Events ====================

    def _index_at(self, style: Style) -> Optional[int]:
        index = style.meta.get(_REF_META)
        return index if isinstance(index, int) else None

    def on_mouse_move(self, event: MouseMove) -> None:
        """Track which reference is under the pointer."""
        index = self._index_at(event.style)
        if index == self._hovered:
            return
        if self._hovered is not None:
            self.post_message(self.ReferenceLeft(self._hovered))
        self._hovered = index
        if index is not None:
            self.post_message(self.ReferenceEntered(index))

    def on_leave(self, event: Leave) -> None:
        """Pointer left the view."""
        if self._hovered is not None:
            self.post_message(self.ReferenceLeft(self._hovered))
            self._hovered = None

    def on_click(self, event: Click) -> None:
        """Forward clicks on references."""
        index = self._index_at(event.style)
        if index is not None:
            event.stop()
            self._focused = index
            self._render_document()
            self.post_message(self.ReferenceClicked(index))

    def on_key(self, event) -> None:
        """Handle reference focus keys."""
        key = event.key

        if key in ("tab", "shift+tab"):
            if not self._verses:
                return
            event.prevent_default()
            event.stop()
            step = 1 if key == "tab" else -1
            if self._focused is None:
                self._focused = 0 if step == 1 else len(self._verses) - 1
            else:
                self._focused = (self._focused + step) % len(self._verses)
            self._render_document()
            self.post_message(self.FocusMoved(self._focused))
        elif key in ("enter", "space", "escape"):
            event.prevent_default()
            event.stop()
            self.post_message(self.ReferenceKey(self._focused, key))
