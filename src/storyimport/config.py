"""
Contains the configuration options for the story import engine
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings

USERPROFILE: Path = Path(os.getenv("userprofile", os.getenv("HOME", "")))
BASE_FOLDER: Path = (USERPROFILE / ".storyimport").resolve()
SETTINGS_FILE_PATH: Path = BASE_FOLDER / "config.json"


class Settings(BaseSettings):
    """Settings class for the story import engine"""

    DATA_DIR_PATH: Path = BASE_FOLDER / "data"
    LOGGING_DIR_PATH: Path = DATA_DIR_PATH / "logging"

    # Archive
    ARCHIVE_MIME_TYPES: list[str] = ["application/zip"]
    ARCHIVE_FILE_FILTER: str = "Story archives (*.zip)"
    DESCRIPTOR_ENTRY_NAME: str = "config.json"
    POSTER_SUFFIX: str = "-poster.jpeg"
    POSTER_MIME_TYPE: str = "image/jpeg"

    # Reconciliation
    RECONCILABLE_RESOURCE_TYPES: list[str] = ["image", "video"]
    MAX_CONCURRENT_CONVERSIONS: int = 8
    LOCAL_SRC_PREFIX: str = "blob:"

    # User facing messages
    MESSAGE_INVALID_CONTAINER: str = (
        "Please upload the zip file previously downloaded from this tool"
    )
    MESSAGE_MISSING_DESCRIPTOR: str = "Zip file is not compatible with this tool"
    MESSAGE_MALFORMED_DESCRIPTOR: str = "Invalid configuration in the uploaded zip"
    MESSAGE_PARTIAL_IMPORT: str = "Some media files could not be imported"
    MESSAGE_IMPORT_COMPLETED: str = "Story imported successfully"

    class SERIALIZATION_KEYS(Enum):
        """Value used as the keys for the descriptor serialization"""

        ELEMENT_ID = "id"
        STORY = "story"
        TITLE = "title"
        PAGES = "pages"
        ELEMENTS = "elements"
        RESOURCE = "resource"
        SRC = "src"
        TYPE = "type"
        MIME_TYPE = "mimeType"
        ALT = "alt"
        POSTER = "poster"
        CAPABILITIES = "capabilities"
        SIZE = "size"
        CHECKSUM = "checksum"

    @classmethod
    def load_from_file(cls, path: Path) -> "Settings":
        """Loads settings from a JSON file."""
        if not path.exists():
            return cls()  # Return default

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(**data)
        except (json.JSONDecodeError, ValidationError) as e:
            logging.getLogger("Config").error("Error loading settings: %s", e)
            return cls()  # Return defaults

    def save_to_file(self, path: Path):
        """Saves settings to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(path, "w", encoding="utf-8") as f:
                _ = f.write(self.model_dump_json(indent=2))
        except (FileNotFoundError, OSError, IOError) as e:
            logging.getLogger("Config").error("Error saving settings: %s", e)


settings = Settings.load_from_file(Path(SETTINGS_FILE_PATH))
