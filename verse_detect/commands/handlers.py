"""Command handlers for the verse-detect reader."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from verse_detect.commands.parser import ParsedCommand, command_help
from verse_detect.config import DISPLAY_MODES
from verse_detect.data.langcodes import get_language_name
from verse_detect.data.languages import SUPPORTED_LANGUAGES

if TYPE_CHECKING:
    from verse_detect.app import VerseDetectApp


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    action: str = ""  # Special action to take: "quit", "set_languages", etc.
    data: Optional[dict] = None


HELP_TEXT = command_help() + """

Keys:
  Tab/Shift+Tab  - Next/previous reference
  Enter/Space    - Toggle preview
  o              - Open reference
  Escape         - Close preview
  :              - Command line
  q              - Quit
"""


class CommandHandler:
    """Handles command execution."""

    def __init__(self, app: "VerseDetectApp") -> None:
        self.app = app

    def execute(self, cmd: ParsedCommand) -> CommandResult:
        """Execute a parsed command.

        Args:
            cmd: Parsed command

        Returns:
            CommandResult with status and message
        """
        if not cmd.name:
            return CommandResult(success=False, message="No command")

        handler_name = f"_cmd_{cmd.name.replace('-', '_')}"
        handler = getattr(self, handler_name, None)

        if handler:
            return handler(cmd)
        else:
            return CommandResult(
                success=False,
                message=f"Unknown command: {cmd.name}"
            )

    def _cmd_quit(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :quit command."""
        return CommandResult(success=True, action="quit")

    def _cmd_help(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :help command."""
        return CommandResult(success=True, message=HELP_TEXT)

    def _cmd_lang(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :lang command."""
        if not cmd.args:
            current = ", ".join(self.app.detector.current_languages)
            return CommandResult(success=True, message=f"Languages: {current}")

        if cmd.first_arg.lower() == "all":
            return CommandResult(
                success=True,
                action="set_languages",
                data={"languages": list(SUPPORTED_LANGUAGES)},
            )

        requested = [arg.lower() for arg in cmd.args]
        valid: List[str] = [code for code in requested if code in SUPPORTED_LANGUAGES]
        invalid = [code for code in requested if code not in SUPPORTED_LANGUAGES]

        if not valid:
            return CommandResult(
                success=False,
                message=f"Unsupported language: {', '.join(invalid)}"
            )

        message = f"Ignored: {', '.join(invalid)}" if invalid else ""
        return CommandResult(
            success=True,
            message=message,
            action="set_languages",
            data={"languages": valid},
        )

    def _cmd_edition(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :edition command."""
        resolver = self.app.resolver

        if not cmd.args:
            mapping = resolver.text_id_mapping()
            if not mapping:
                return CommandResult(success=True, message="No editions mapped")
            listing = " ".join(f"{lang}={text_id}" for lang, text_id in sorted(mapping.items()))
            return CommandResult(success=True, message=listing)

        language = cmd.first_arg.lower()
        if len(cmd.args) == 1:
            text_id = resolver.resolve_edition(language)
            if text_id is None:
                return CommandResult(
                    success=True,
                    message=f"No Bible text available for {get_language_name(language)}"
                )
            return CommandResult(success=True, message=f"{language}: {text_id}")

        return CommandResult(
            success=True,
            action="set_edition",
            data={"language": language, "text_ids": cmd.args[1:]},
        )

    def _cmd_mode(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :mode command."""
        if not cmd.args:
            return CommandResult(success=True, message=f"Mode: {self.app.config.display_mode}")

        mode = cmd.first_arg.lower()
        if mode not in DISPLAY_MODES:
            return CommandResult(
                success=False,
                message=f"Usage: :mode {'|'.join(DISPLAY_MODES)}"
            )
        return CommandResult(success=True, action="set_mode", data={"mode": mode})

    def _cmd_open(self, cmd: ParsedCommand) -> CommandResult:
        """Handle :open command."""
        if "sample" in cmd.flags:
            return CommandResult(success=True, action="open", data={"path": None})

        if not cmd.args:
            return CommandResult(success=False, message="Usage: :open <file>")

        path = Path(cmd.rest_args).expanduser()
        if not path.is_file():
            return CommandResult(success=False, message=f"File not found: {path}")

        return CommandResult(success=True, action="open", data={"path": str(path)})
