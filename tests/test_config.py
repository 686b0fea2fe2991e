"""
Tests for settings loading.
"""

import gettext
import json

from resw_sync.config import (
    DEFAULT_LOCALIZABLE, TEXT_DOMAIN, UID, Settings, load_settings,
    save_settings, settings_path
)
from resw_sync.model import Report


class TestSettings:
    """Settings defaults and persistence."""

    def test_defaults(self):
        """Test default settings initialization."""
        settings = Settings()
        assert settings.identifier_attribute == UID
        assert settings.localizable_attributes == DEFAULT_LOCALIZABLE
        assert settings.is_localizable("ToolTipService.ToolTip")
        assert not settings.is_localizable("Width")

    def test_defaults_are_not_shared(self):
        """Test defaults are not shared."""
        a, b = Settings(), Settings()
        a.localizable_attributes.append("Title")
        assert "Title" not in b.localizable_attributes

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test missing file gives defaults."""
        assert load_settings(str(tmp_path / "nope.json")) == Settings()

    def test_round_trip(self, tmp_path):
        """Test saving and loading settings."""
        path = str(tmp_path / "conf" / "settings.json")
        settings = Settings(localizable_attributes=["Text", "Title"],
                            resource_patterns=["*.resw"])
        save_settings(settings, path)
        assert load_settings(path) == settings

    def test_unknown_keys_ignored(self, tmp_path):
        """Test unknown keys ignored."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"indent": "    ", "theme": "dark"}))
        settings = load_settings(str(path))
        assert settings.indent == "    "
        assert settings.localizable_attributes == DEFAULT_LOCALIZABLE

    def test_default_location(self, tmp_path, monkeypatch):
        """Test the XDG settings location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert settings_path() == str(tmp_path / "resw-sync" / "settings.json")
        save_settings(Settings(indent="\t"))
        assert load_settings().indent == "\t"

    def test_messages_use_own_text_domain(self, monkeypatch):
        """Test messages use own text domain."""
        calls = []

        def dgettext(domain, message):
            calls.append(domain)
            return message

        monkeypatch.setattr(gettext, "dgettext", dgettext)
        assert Report(nothing_to_do=True).summary() == \
            "No x:Uid strings found, nothing to do"
        assert calls == [TEXT_DOMAIN] and TEXT_DOMAIN == "resw-sync"
