"""Tests for command parsing and handling."""

from types import SimpleNamespace

import pytest

from verse_detect.backend import EditionResolver
from verse_detect.commands.handlers import CommandHandler
from verse_detect.commands.parser import (
    COMMAND_ALIASES,
    command_help,
    get_command_names,
    parse_command,
)
from verse_detect.config import Config, ContentSourceConfig
from verse_detect.detection import VerseDetector


class TestParseCommand:
    """Test command parsing."""

    def test_simple_command(self):
        """Simple command should parse."""
        cmd = parse_command("quit")
        assert cmd.name == "quit"
        assert cmd.args == []
        assert cmd.flags == {}

    def test_command_with_args(self):
        """Command with arguments should parse."""
        cmd = parse_command("lang es en")
        assert cmd.name == "lang"
        assert cmd.args == ["es", "en"]

    def test_command_alias(self):
        """Command aliases should resolve."""
        assert parse_command("q").name == "quit"

        cmd = parse_command("l es")
        assert cmd.name == "lang"
        assert cmd.args == ["es"]

    def test_command_with_flags(self):
        """Command with flags should parse."""
        cmd = parse_command("open --sample")
        assert cmd.name == "open"
        assert cmd.flags == {"sample": "true"}

        cmd = parse_command("open --enc=utf-8 notes.txt")
        assert cmd.flags == {"enc": "utf-8"}
        assert cmd.args == ["notes.txt"]

    def test_quoted_args(self):
        """Quoted arguments should be preserved."""
        cmd = parse_command('open "My Notes.html"')
        assert cmd.args == ["My Notes.html"]

    def test_unbalanced_quotes(self):
        """Unbalanced quotes should fall back to whitespace splitting."""
        cmd = parse_command('open "My Notes.html')
        assert cmd.name == "open"
        assert cmd.args == ['"My', "Notes.html"]

    def test_empty_command(self):
        """Empty command should return empty name."""
        assert parse_command("").name == ""
        assert parse_command("   ").name == ""

    def test_first_arg_property(self):
        """first_arg property should work."""
        assert parse_command("mode popup").first_arg == "popup"
        assert parse_command("quit").first_arg == ""

    def test_rest_args_property(self):
        """rest_args property should work."""
        assert parse_command("edition es SPNRVG SPNBES").rest_args == "es SPNRVG SPNBES"

    def test_comma_list(self):
        """Language lists may be comma-separated."""
        assert parse_command("lang es,en").args == ["es", "en"]
        assert parse_command("lang es, fr").args == ["es", "fr"]
        assert parse_command("edition es SPNRVG,SPNBLM").args == ["es", "SPNRVG", "SPNBLM"]

    def test_comma_kept_in_paths(self):
        """Commas stay inside file names."""
        assert parse_command("open a,b.txt").args == ["a,b.txt"]

    def test_command_help(self):
        """Help lists every command with its usage."""
        text = command_help()
        assert text.startswith("Commands:")
        for name in get_command_names():
            assert f":{name}" in text


class TestCommandAliases:
    """Test command aliases."""

    def test_common_aliases(self):
        """Common aliases should be defined."""
        assert COMMAND_ALIASES["q"] == "quit"
        assert COMMAND_ALIASES["h"] == "help"
        assert COMMAND_ALIASES["language"] == "lang"
        assert COMMAND_ALIASES["ed"] == "edition"

    def test_get_command_names(self):
        """Should return the reader commands."""
        names = get_command_names()
        for name in ("quit", "help", "lang", "edition", "mode", "open"):
            assert name in names


@pytest.fixture
def handler():
    config = Config(content_source=ContentSourceConfig(texts_index_url=None))
    app = SimpleNamespace(
        config=config,
        detector=VerseDetector("en"),
        resolver=EditionResolver(config.content_source),
    )
    return CommandHandler(app)


class TestCommandHandler:
    """Test command execution."""

    def test_unknown_command(self, handler):
        """Unknown commands should fail with a message."""
        result = handler.execute(parse_command("frobnicate"))
        assert not result.success
        assert "frobnicate" in result.message

    def test_empty_command(self, handler):
        """Empty commands should fail."""
        assert not handler.execute(parse_command("")).success

    def test_quit(self, handler):
        """:quit should request the quit action."""
        assert handler.execute(parse_command("q")).action == "quit"

    def test_help(self, handler):
        """:help should list the commands."""
        result = handler.execute(parse_command("help"))
        assert result.success
        assert ":lang" in result.message

    def test_lang_shows_current(self, handler):
        """:lang without args should show the active languages."""
        result = handler.execute(parse_command("lang"))
        assert result.success
        assert result.message == "Languages: en"

    def test_lang_sets_valid_codes(self, handler):
        """:lang should keep supported codes and report the rest."""
        result = handler.execute(parse_command("lang ES xx en"))
        assert result.action == "set_languages"
        assert result.data == {"languages": ["es", "en"]}
        assert "xx" in result.message

    def test_lang_all(self, handler):
        """:lang all should select every supported language."""
        result = handler.execute(parse_command("lang all"))
        assert "zh" in result.data["languages"]
        assert len(result.data["languages"]) == 10

    def test_lang_rejects_only_invalid(self, handler):
        """:lang with only unsupported codes should fail."""
        result = handler.execute(parse_command("lang xx"))
        assert not result.success
        assert result.action == ""

    def test_edition_mapping(self, handler):
        """:edition without args should list the mapping."""
        result = handler.execute(parse_command("edition"))
        assert "en=ENGWEB" in result.message
        assert "es=SPNRVG" in result.message

    def test_edition_for_language(self, handler):
        """:edition <lang> should show the resolved edition."""
        assert handler.execute(parse_command("edition en")).message == "en: ENGWEB"

    def test_edition_unresolved(self, handler):
        """:edition for a language without text should name the language."""
        result = handler.execute(parse_command("edition id"))
        assert result.message == "No Bible text available for Indonesian"

    def test_edition_set(self, handler):
        """:edition <lang> <ids> should request the change."""
        result = handler.execute(parse_command("edition fr FRNLSG FRNPDC"))
        assert result.action == "set_edition"
        assert result.data == {"language": "fr", "text_ids": ["FRNLSG", "FRNPDC"]}

    def test_mode(self, handler):
        """:mode should accept the display modes only."""
        result = handler.execute(parse_command("mode popup"))
        assert result.action == "set_mode"
        assert result.data == {"mode": "popup"}
        assert not handler.execute(parse_command("mode hover")).success

    def test_mode_shows_current(self, handler):
        """:mode without args should show the current mode."""
        assert handler.execute(parse_command("mode")).message == "Mode: both"

    def test_open_missing_file(self, handler, tmp_path):
        """:open should reject missing files."""
        result = handler.execute(parse_command(f"open {tmp_path / 'missing.txt'}"))
        assert not result.success

    def test_open_file(self, handler, tmp_path):
        """:open should request opening an existing file."""
        path = tmp_path / "notes.txt"
        path.write_text("See John 3:16.")
        result = handler.execute(parse_command(f"open {path}"))
        assert result.action == "open"
        assert result.data == {"path": str(path)}

    def test_open_sample(self, handler):
        """:open --sample should request the built-in sample."""
        result = handler.execute(parse_command("open --sample"))
        assert result.data == {"path": None}
