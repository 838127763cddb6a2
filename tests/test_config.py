"""Tests for configuration loading and merging."""

import json

from verse_detect import config as config_module
from verse_detect.config import Config, merge_config


class TestMergeConfig:
    """Test merge_config."""

    def test_defaults(self):
        """No data gives the defaults."""
        config = merge_config()
        assert config.display_mode == "both"
        assert config.popup.show_delay == 300
        assert config.popup.hide_delay == 200
        assert config.content_source.preferred_text_ids_by_language["en"] == "ENGWEB"

    def test_nested_keys_merged(self):
        """Nested groups keep the keys that are not given."""
        config = merge_config({"popup": {"show_delay": 500}})
        assert config.popup.show_delay == 500
        assert config.popup.hide_delay == 200
        assert config.popup.max_width == 450

    def test_unknown_keys_ignored(self):
        """Unknown keys are dropped."""
        config = merge_config({"colour": "red", "popup": {"sparkle": True}})
        assert not hasattr(config, "colour")
        assert not hasattr(config.popup, "sparkle")

    def test_group_must_be_object(self):
        """A scalar for a group keeps the group's defaults."""
        config = merge_config({"popup": 5})
        assert config.popup.show_delay == 300

    def test_base_not_modified(self):
        """Merging onto a base leaves the base unchanged."""
        base = Config()
        merged = merge_config({"display_mode": "link"}, base)
        assert merged.display_mode == "link"
        assert base.display_mode == "both"

    def test_display_mode_flags(self):
        """Display mode decides popup and navigation."""
        assert not merge_config({"display_mode": "link"}).shows_popup
        assert merge_config({"display_mode": "link"}).navigates
        assert merge_config({"display_mode": "popup"}).shows_popup
        assert not merge_config({"display_mode": "popup"}).navigates

    def test_defaults_not_shared(self):
        """Each config owns its preference mapping."""
        first = Config()
        first.content_source.preferred_text_ids_by_language["fr"] = "FRNLSG"
        assert "fr" not in Config().content_source.preferred_text_ids_by_language


class TestConfigFile:
    """Test loading and saving."""

    def test_missing_file(self, tmp_path, monkeypatch):
        """A missing file gives the defaults."""
        monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.json")
        assert Config.load() == Config()

    def test_corrupt_file(self, tmp_path, monkeypatch):
        """A corrupt file is logged and ignored."""
        path = tmp_path / "config.json"
        path.write_text("{broken")
        monkeypatch.setattr(config_module, "CONFIG_FILE", path)
        assert Config.load() == Config()

    def test_not_an_object(self, tmp_path, monkeypatch):
        """A JSON list is ignored."""
        path = tmp_path / "config.json"
        path.write_text("[]")
        monkeypatch.setattr(config_module, "CONFIG_FILE", path)
        assert Config.load() == Config()

    def test_partial_file(self, tmp_path, monkeypatch):
        """A partial file is merged onto the defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"display_mode": "popup", "language": {"additional": "all"}}))
        monkeypatch.setattr(config_module, "CONFIG_FILE", path)
        config = Config.load()
        assert config.display_mode == "popup"
        assert config.language.additional == "all"
        assert config.language.always_include_english

    def test_save_and_load(self, tmp_path, monkeypatch):
        """Saved config loads back unchanged."""
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path / "verse-detect")
        monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "verse-detect" / "config.json")
        config = merge_config({"popup": {"show_social_share": True}, "default_text_id": "ENGKJV"})
        config.save()
        assert Config.load() == config
