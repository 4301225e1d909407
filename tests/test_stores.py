"""Tests for the application stores"""

import unittest

from storyimport.models.media_item import MediaItem
from storyimport.models.story_state import StoryState
from storyimport.stores import MediaStore, StoryStatus, StoryStore
from storyimport.ui.snackbar import LoggingSnackbar


class TestStoryStatus(unittest.TestCase):
    """Test the importing flag"""

    def setUp(self):
        self.status = StoryStatus()
        self.changes: list[bool] = []
        _ = self.status.importing_changed.connect(self.changes.append)

    def test_signal_on_change(self):
        self.status.update_is_importing(True)
        self.status.update_is_importing(False)

        self.assertEqual(self.changes, [True, False])
        self.assertFalse(self.status.is_importing)

    def test_no_signal_without_change(self):
        self.status.update_is_importing(False)
        self.status.update_is_importing(True)
        self.status.update_is_importing(True)

        self.assertEqual(self.changes, [True])
        self.assertTrue(self.status.is_importing)


class TestMediaStore(unittest.TestCase):
    """Test the media library store"""

    def test_update_replaces_collection(self):
        store = MediaStore([MediaItem(media_id=1, src="blob:1", title="Dog")])

        result = store.update(lambda prev: [*prev, MediaItem(media_id=2, src="blob:2")])

        self.assertEqual([item.media_id for item in result], [1, 2])
        self.assertEqual(len(store.value), 2)

    def test_value_is_a_copy(self):
        store = MediaStore()
        store.value.append(MediaItem(media_id=1, src="blob:1"))

        self.assertEqual(store.value, [])


class TestStoryStore(unittest.TestCase):
    """Test the story store"""

    def test_restore(self):
        store = StoryStore()
        state = StoryState(story={"title": "New"})

        store.restore(state)

        self.assertIs(store.reducer_state, state)
        self.assertEqual(store.restore_count, 1)


class TestLoggingSnackbar(unittest.TestCase):
    def test_keeps_messages(self):
        snackbar = LoggingSnackbar()
        snackbar.show_snackbar("Hello", dismissable=True)
        snackbar.show_snackbar("Bye")

        self.assertEqual(snackbar.messages, [("Hello", True), ("Bye", False)])
