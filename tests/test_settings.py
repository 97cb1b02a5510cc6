# -*- coding: utf-8 -*-
"""
Tests for settings persistence.
"""

import json

import locforge_config as config
from locforge_settings import default_settings, load_settings, save_settings


class TestLoadSettings:

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "settings.json") == default_settings()

    def test_corrupt_file_gives_defaults(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text("{not json", encoding='utf-8')

        assert load_settings(settings_file) == default_settings()

    def test_non_object_gives_defaults(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text("[1, 2]", encoding='utf-8')

        assert load_settings(settings_file) == default_settings()

    def test_invalid_values_are_replaced(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({
            "engine": "",
            "model": 5,
            "target_language": 3,
            "target_countries": "AT",
        }), encoding='utf-8')

        settings = load_settings(settings_file)

        assert settings["engine"] == config.DEFAULT_ENGINE_ID
        assert settings["model"] == config.DEFAULT_MODEL_NAME
        assert settings["target_language"] is None
        assert settings["target_countries"] == []

    def test_valid_values_are_kept(self, tmp_path):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text(json.dumps({
            "engine": "locforge.engine.google_free",
            "target_language": "German",
            "target_countries": ["AT", "CH"],
        }), encoding='utf-8')

        settings = load_settings(settings_file)

        assert settings["engine"] == "locforge.engine.google_free"
        assert settings["target_language"] == "German"
        assert settings["target_countries"] == ["AT", "CH"]
        assert settings["model"] == config.DEFAULT_MODEL_NAME


class TestSaveSettings:

    def test_save_then_load(self, tmp_path):
        settings_file = tmp_path / "nested" / "settings.json"
        data = default_settings()
        data["api_key"] = "secret"

        assert save_settings(data, settings_file) is True
        assert load_settings(settings_file)["api_key"] == "secret"

    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        assert save_settings(default_settings(), blocker / "settings.json") is False
