"""Tests for loading and saving the settings"""

import tempfile
from pathlib import Path

from storyimport.config import Settings


class TestSettings:
    """Tests for Settings persistence"""

    def test_defaults_when_missing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            loaded = Settings.load_from_file(Path(tmpdir) / "missing.json")

        assert loaded.DESCRIPTOR_ENTRY_NAME == "config.json"
        assert loaded.ARCHIVE_MIME_TYPES == ["application/zip"]
        assert loaded.POSTER_SUFFIX == "-poster.jpeg"

    def test_save_and_load(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "config.json"
            custom = Settings(
                MAX_CONCURRENT_CONVERSIONS=2,
                ARCHIVE_MIME_TYPES=["application/zip", "application/x-zip-compressed"],
            )

            custom.save_to_file(path)
            loaded = Settings.load_from_file(path)

        assert loaded.MAX_CONCURRENT_CONVERSIONS == 2
        assert "application/x-zip-compressed" in loaded.ARCHIVE_MIME_TYPES

    def test_invalid_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text("{broken", encoding="utf-8")

            loaded = Settings.load_from_file(path)

        assert loaded.MAX_CONCURRENT_CONVERSIONS == 8

    def test_invalid_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.json"
            path.write_text('{"MAX_CONCURRENT_CONVERSIONS": "many"}', encoding="utf-8")

            loaded = Settings.load_from_file(path)

        assert loaded.MAX_CONCURRENT_CONVERSIONS == 8
