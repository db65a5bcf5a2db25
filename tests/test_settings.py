"""Tests for JSON settings persistence."""

from __future__ import annotations

import json

import pytest

from pomodoro.settings import Settings, load_settings, save_settings


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setattr("pomodoro.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("pomodoro.settings.APP_SUPPORT_DIR", tmp_path)
    return path


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.work_duration == 25 * 60
        assert s.break_duration == 5 * 60
        assert s.tick_interval_ms == 1000

    def test_missing_file_gives_defaults(self, settings_path):
        assert load_settings() == Settings()

    def test_round_trip(self, settings_path):
        save_settings(Settings(work_duration=10, break_duration=5, window_width=400))
        loaded = load_settings()
        assert loaded.work_duration == 10
        assert loaded.break_duration == 5
        assert loaded.window_width == 400

    def test_saved_file_is_indented_json(self, settings_path):
        save_settings(Settings())
        text = settings_path.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text)["work_duration"] == 1500

    def test_unknown_keys_ignored(self, settings_path):
        settings_path.write_text(json.dumps({"work_duration": 60, "theme": "red"}))
        loaded = load_settings()
        assert loaded.work_duration == 60
        assert not hasattr(loaded, "theme")

    def test_corrupt_file_gives_defaults(self, settings_path):
        settings_path.write_text("{not json")
        assert load_settings() == Settings()

    def test_non_object_gives_defaults(self, settings_path):
        settings_path.write_text("[1, 2, 3]")
        assert load_settings() == Settings()

    @pytest.mark.parametrize("value", [0, -30, "ten"])
    def test_invalid_duration_replaced(self, settings_path, value):
        settings_path.write_text(json.dumps({"work_duration": value, "break_duration": 7}))
        loaded = load_settings()
        assert loaded.work_duration == 25 * 60
        assert loaded.break_duration == 7

    @pytest.mark.parametrize("value", [True, False, 2.5, None])
    def test_non_integer_duration_replaced(self, settings_path, value):
        settings_path.write_text(json.dumps({"break_duration": value}))
        assert load_settings().break_duration == 5 * 60
