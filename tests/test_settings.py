"""Tests for JSON settings access."""

import json

import pytest

from infrastructure.settings import JsonSettings


@pytest.fixture
def settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "index_path": "data/photos_index.json",
                "thumbnail_size": 320,
                "preview_max_side": "oops",
                "gallery": {"columns": 0},
                "logging": {"level": "DEBUG"},
            }
        ),
        encoding="utf-8",
    )
    return JsonSettings(path)


class TestJsonSettings:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonSettings(tmp_path / "settings.json")

    def test_dotted_get(self, settings):
        assert settings.get("logging.level") == "DEBUG"
        assert settings.get("logging.dir", "fallback") == "fallback"
        assert settings.get("thumbnail_size.nested") is None

    def test_get_int(self, settings):
        assert settings.get_int("thumbnail_size", 240) == 320
        assert settings.get_int("preview_max_side", 1600) == 1600
        assert settings.get_int("gallery.columns", 4) == 4
        assert settings.get_int("missing", 7) == 7

    def test_resolve_path_relative_to_settings(self, settings, tmp_path):
        expected = tmp_path / "data" / "photos_index.json"
        assert settings.resolve_path("index_path", "x.json") == expected
        default = settings.resolve_path("missing", "photos_index.json")
        assert default == tmp_path / "photos_index.json"
