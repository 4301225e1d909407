"""Shared fixtures for the import tests"""

from typing import Callable

import pytest

from story_archives import build_zip
from storyimport.models.import_file import ImportFile
from storyimport.stores import MediaStore, StoryStatus, StoryStore
from storyimport.ui.snackbar import LoggingSnackbar


@pytest.fixture
def make_import_file() -> Callable[..., ImportFile]:
    def _make(
        entries: dict[str, bytes | str],
        mime_type: str = "application/zip",
        name: str = "story.zip",
    ) -> ImportFile:
        return ImportFile(name=name, mime_type=mime_type, data=build_zip(entries))

    return _make


@pytest.fixture
def story_store() -> StoryStore:
    return StoryStore()


@pytest.fixture
def media_store() -> MediaStore:
    return MediaStore()


@pytest.fixture
def status() -> StoryStatus:
    return StoryStatus()


@pytest.fixture
def snackbar() -> LoggingSnackbar:
    return LoggingSnackbar()
