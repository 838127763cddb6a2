"""Command parsing and handling for the verse-detect reader."""

from verse_detect.commands.parser import parse_command, get_command_names, ParsedCommand
from verse_detect.commands.handlers import CommandHandler, CommandResult

__all__ = ["parse_command", "get_command_names", "ParsedCommand", "CommandHandler", "CommandResult"]
