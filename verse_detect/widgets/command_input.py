"""Ex-style command line widget."""

from typing import Dict, List, Optional, Sequence

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static

HISTORY_SIZE = 100


def common_prefix(words: Sequence[str]) -> str:
    """Return the longest prefix shared by all words."""
    if not words:
        return ""
    shortest = min(words, key=len)
    for i, char in enumerate(shortest):
        if any(word[i] != char for word in words):
            return shortest[:i]
    return shortest


def complete_line(line: str, commands: Sequence[str], arguments: Dict[str, List[str]]) -> str:
    """Complete the last word of a command line.

    The first word completes against command names; later words against
    the argument choices of that command, e.g. language codes for :lang.

    Returns:
        The completed line, or the line unchanged when nothing matches
    """
    head, _, last = line.rpartition(" ")
    if head:
        choices = arguments.get(head.split(" ", 1)[0], [])
        head += " "
    else:
        choices = commands
    matches = [choice for choice in choices if choice.startswith(last)]

    if len(matches) == 1:
        return f"{head}{matches[0]} "
    completed = common_prefix(matches)
    if len(completed) > len(last):
        return head + completed
    return line


class CommandHistory:
    """Previously submitted command lines, browsed newest first."""

    def __init__(self, size: int = HISTORY_SIZE) -> None:
        self.size = size
        self.entries: List[str] = []
        self._cursor: Optional[int] = None
        self._draft = ""

    def add(self, line: str) -> None:
        """Remember a submitted line unless it repeats the last one."""
        self.rewind()
        if self.entries[-1:] == [line]:
            return
        self.entries.append(line)
        del self.entries[:-self.size]

    def rewind(self) -> None:
        """Stop browsing and forget the draft."""
        self._cursor = None
        self._draft = ""

    def older(self, current: str) -> Optional[str]:
        """Step back one entry; None when there is nothing to show."""
        if not self.entries:
            return None
        if self._cursor is None:
            self._draft = current
            self._cursor = len(self.entries) - 1
        else:
            self._cursor = max(self._cursor - 1, 0)
        return self.entries[self._cursor]

    def newer(self) -> Optional[str]:
        """Step forward one entry, ending at the line being typed."""
        if self._cursor is None:
            return None
        self._cursor += 1
        if self._cursor < len(self.entries):
            return self.entries[self._cursor]
        draft = self._draft
        self.rewind()
        return draft


class CommandInput(Widget):
    """The ':' line with history and Tab completion."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > #cmd-prefix {
        width: 1;
    }

    CommandInput > #cmd-input {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }
    """

    class CommandSubmitted(Message):
        """A command line was entered."""

        def __init__(self, command: str) -> None:
            self.command = command
            super().__init__()

    class CommandCancelled(Message):
        """The command line was dismissed with Escape."""

    def __init__(
        self,
        commands: Optional[List[str]] = None,
        arguments: Optional[Dict[str, List[str]]] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._commands = commands or []
        self._arguments = arguments or {}
        self.history = CommandHistory()

    def compose(self) -> ComposeResult:
        yield Static(":", id="cmd-prefix")
        yield Input(id="cmd-input")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    def reset(self) -> None:
        """Clear the line and leave history browsing."""
        self.input_widget.value = ""
        self.history.rewind()

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def _show(self, line: Optional[str]) -> None:
        if line is None:
            return
        self.input_widget.value = line
        self.input_widget.cursor_position = len(line)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        command = event.value.strip()
        if command:
            self.history.add(command)
        self.post_message(self.CommandSubmitted(command))

    def on_key(self, event) -> None:
        """Escape cancels, Up/Down browse history, Tab completes."""
        if event.key not in ("escape", "up", "down", "tab"):
            return
        event.prevent_default()
        event.stop()

        if event.key == "escape":
            self.post_message(self.CommandCancelled())
        elif event.key == "up":
            self._show(self.history.older(self.input_widget.value))
        elif event.key == "down":
            self._show(self.history.newer())
        else:
            line = self.input_widget.value.lstrip()
            if line:
                self._show(complete_line(line, self._commands, self._arguments))
