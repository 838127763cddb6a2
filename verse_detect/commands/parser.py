"""Ex-style command line parsing for the reader."""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class ParsedCommand:
    """A command line split into name, arguments and --flags."""

    name: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str] = field(default_factory=dict)
    raw: str = ""

    @property
    def first_arg(self) -> str:
        """Get the first argument or empty string."""
        return self.args[0] if self.args else ""

    @property
    def rest_args(self) -> str:
        """Get all arguments as a single string."""
        return " ".join(self.args)


# Command name -> (usage, summary), in help order
COMMANDS: Dict[str, Tuple[str, str]] = {
    "quit": (":quit, :q", "Quit"),
    "lang": (":lang <codes|all>", "Set detection languages, e.g. :lang es,en"),
    "edition": (":edition [lang] [ids]", "Show the edition mapping or prefer ids for a language"),
    "mode": (":mode link|popup|both", "Set the display mode"),
    "open": (":open <file>|--sample", "Open a text or HTML document"),
    "help": (":help", "This help"),
}

COMMAND_ALIASES: Dict[str, str] = {
    "q": "quit",
    "h": "help",
    "l": "lang",
    "language": "lang",
    "languages": "lang",
    "ed": "edition",
    "version": "edition",
    "m": "mode",
    "o": "open",
    "e": "open",
    "edit": "open",
}

# Commands whose arguments may be given as a comma-separated list
_LIST_COMMANDS = ("lang", "edition")


def _split_flag(token: str) -> Tuple[str, str]:
    """Split "--key=value", "--key" or "-k" into (key, value)."""
    body = token.lstrip("-")
    if "=" in body:
        key, value = body.split("=", 1)
        return key, value
    return body, "true"


def parse_command(command_str: str) -> ParsedCommand:
    """Parse a command line typed after ":".

    Aliases resolve to their command name. Tokens starting with "-" are
    flags; for :lang and :edition, "es,en" counts as two arguments.

    Args:
        command_str: Raw command string (without leading :)

    Returns:
        ParsedCommand; the name is "" for a blank line
    """
    command_str = command_str.strip()
    try:
        tokens = shlex.split(command_str)
    except ValueError:
        # Unbalanced quotes
        tokens = command_str.split()

    if not tokens:
        return ParsedCommand(name="", raw=command_str)

    name = tokens[0].lower()
    name = COMMAND_ALIASES.get(name, name)
    command = ParsedCommand(name=name, raw=command_str)

    for token in tokens[1:]:
        if token.startswith("-") and len(token) > 1:
            key, value = _split_flag(token)
            command.flags[key] = value
        elif name in _LIST_COMMANDS and "," in token:
            command.args.extend(part for part in token.split(",") if part)
        else:
            command.args.append(token)

    return command


def get_command_names() -> List[str]:
    """Get the command names offered for completion."""
    return list(COMMANDS)


def command_help() -> str:
    """Format the command section of the help text."""
    width = max(len(usage) for usage, _ in COMMANDS.values())
    lines = ["Commands:"]
    for usage, summary in COMMANDS.values():
        lines.append(f"  {usage.ljust(width)}  - {summary}")
    return "\n".join(lines)
