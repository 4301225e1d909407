"""Application-wide stores the import engine reads from and writes to"""

import logging
import threading
from collections.abc import Callable, Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from storyimport.models.media_item import MediaItem
from storyimport.models.story_state import StoryState


class MediaStore:
    """The user's media library"""

    def __init__(self, media: Sequence[MediaItem] | None = None):
        self._media: list[MediaItem] = list(media or [])
        self._lock: threading.Lock = threading.Lock()

    @property
    def value(self) -> list[MediaItem]:
        with self._lock:
            return list(self._media)

    def update(
        self, updater: Callable[[list[MediaItem]], Sequence[MediaItem]]
    ) -> list[MediaItem]:
        """Replace the collection with the updater's result, atomically"""
        with self._lock:
            self._media = list(updater(list(self._media)))
            logging.getLogger("MediaStore").debug(
                "Media library now has %d items", len(self._media)
            )
            return list(self._media)


class StoryStore:
    """Holds the editable story state"""

    def __init__(self, reducer_state: StoryState | None = None):
        self._state: StoryState = reducer_state or StoryState()
        self.restore_count: int = 0

    @property
    def reducer_state(self) -> StoryState:
        return self._state

    def restore(self, state: StoryState) -> None:
        """Install a whole new story state"""
        self._state = state
        self.restore_count += 1
        logging.getLogger("StoryStore").debug(
            "Restored story '%s' with %d pages",
            state.story.get("title", ""),
            len(state.pages),
        )


class StoryStatus(QObject):
    """Observable status of the story, like an import in progress"""

    # Signals
    importing_changed: pyqtSignal = pyqtSignal(bool)

    def __init__(self):
        super().__init__()
        self._is_importing: bool = False

    @property
    def is_importing(self) -> bool:
        return self._is_importing

    def update_is_importing(self, value: bool) -> None:
        if value == self._is_importing:
            return
        self._is_importing = value
        self.importing_changed.emit(value)
