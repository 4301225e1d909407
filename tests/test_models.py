"""Tests for the descriptor models"""

import hashlib
import unittest

from storyimport.models.descriptor import ProjectDescriptor
from storyimport.models.local_file import LocalFile
from storyimport.models.media_item import MediaItem
from storyimport.models.page import Page
from storyimport.models.page_element import PageElement
from storyimport.models.resource import Resource


class TestResource(unittest.TestCase):
    """Test the Resource model"""

    def test_unknown_keys_are_preserved(self):
        data = {
            "src": "a.jpg",
            "type": "image",
            "mimeType": "image/jpeg",
            "title": "Cat",
            "width": 640,
            "sizes": {"thumbnail": {"width": 150}},
        }
        resource = Resource.from_dict(data)

        self.assertEqual(resource.src, "a.jpg")
        self.assertEqual(resource.mime_type, "image/jpeg")
        self.assertEqual(resource.properties, {"width": 640, "sizes": {"thumbnail": {"width": 150}}})
        self.assertEqual(resource.to_dict(), data)

    def test_copy_with_does_not_share_properties(self):
        resource = Resource(src="a.jpg", properties={"sizes": {"full": 1}})
        copied = resource.copy_with(src="blob:1")

        copied.properties["sizes"]["full"] = 2

        self.assertEqual(resource.src, "a.jpg")
        self.assertEqual(resource.properties["sizes"]["full"], 1)

    def test_non_string_src(self):
        self.assertEqual(Resource.from_dict({"src": 12}).src, "")

    def test_wrongly_typed_fields_are_dropped(self):
        resource = Resource.from_dict(
            {"src": "a.jpg", "mimeType": 5, "title": ["Cat"], "alt": {"x": 1}, "type": 3}
        )

        self.assertEqual(resource.mime_type, "")
        self.assertIsNone(resource.title)
        self.assertIsNone(resource.alt)
        self.assertIsNone(resource.type)


class TestPageElement(unittest.TestCase):
    """Test the PageElement model"""

    def test_roundtrip_keeps_layout_keys(self):
        data = {
            "id": "e1",
            "type": "image",
            "x": 10,
            "y": 20,
            "resource": {"src": "a.jpg", "mimeType": "image/jpeg"},
        }
        element = PageElement.from_dict(data)

        self.assertEqual(element.element_id, "e1")
        self.assertEqual(element.properties, {"x": 10, "y": 20})
        self.assertEqual(element.to_dict(), data)

    def test_with_resource_returns_copy(self):
        element = PageElement.from_dict({"id": "e1", "resource": {"src": "a.jpg"}})
        patched = element.with_resource(Resource(src="blob:1"))

        self.assertEqual(element.resource.src, "a.jpg")
        self.assertEqual(patched.resource.src, "blob:1")
        self.assertEqual(patched.element_id, "e1")

    def test_element_without_resource(self):
        element = PageElement.from_dict({"id": "t", "type": "text", "content": "Hi"})

        self.assertIsNone(element.resource)
        self.assertEqual(element.to_dict(), {"id": "t", "type": "text", "content": "Hi"})


class TestPage(unittest.TestCase):
    """Test the Page model"""

    def test_non_object_elements_are_dropped(self):
        page = Page.from_dict({"id": "p", "elements": [{"id": "e"}, "oops", 3]})

        self.assertEqual(len(page.elements), 1)

    def test_elements_not_a_list(self):
        self.assertEqual(Page.from_dict({"elements": "none"}).elements, [])

    def test_with_elements(self):
        page = Page.from_dict({"id": "p", "backgroundColor": "red", "elements": []})
        copy = page.with_elements([PageElement(element_id="e")])

        self.assertEqual(page.elements, [])
        self.assertEqual(copy.page_id, "p")
        self.assertEqual(copy.properties, {"backgroundColor": "red"})


class TestProjectDescriptor(unittest.TestCase):
    """Test the ProjectDescriptor model"""

    def test_roundtrip(self):
        data = {
            "story": {"title": "T", "status": "draft"},
            "pages": [{"id": "p", "elements": [{"id": "e"}]}],
            "version": 3,
        }
        descriptor = ProjectDescriptor.from_dict(data)

        self.assertEqual(descriptor.title, "T")
        self.assertEqual(descriptor.to_dict(), data)

    def test_wrong_types_default(self):
        descriptor = ProjectDescriptor.from_dict({"story": "x", "pages": {"a": 1}})

        self.assertEqual(descriptor.story, {})
        self.assertEqual(descriptor.pages, [])


class TestLocalFile(unittest.TestCase):
    """Test the LocalFile model"""

    def test_checksum(self):
        file = LocalFile(name="media/a.jpg", data=b"data", mime_type="image/jpeg")

        self.assertEqual(
            file.checksum,
            hashlib.sha256(b"data").hexdigest(),
        )
        self.assertEqual(file.size, 4)
        self.assertEqual(file.basename, "a.jpg")

    def test_explicit_checksum_is_kept(self):
        file = LocalFile(name="a.jpg", data=b"data", checksum="abc")

        self.assertEqual(file.checksum, "abc")


class TestMediaItem(unittest.TestCase):
    """Test the MediaItem model"""

    def test_alt_defaults_to_title(self):
        self.assertEqual(MediaItem(media_id=1, src="s", title="Cat").alt, "Cat")
        self.assertEqual(MediaItem(media_id=1, src="s", title="Cat", alt="A").alt, "A")

    def test_from_resources_prefers_archive_fields(self):
        local = Resource(
            src="blob:1",
            type="image",
            mime_type="image/png",
            title="a.png",
            properties={"size": 4, "width": 1},
        )
        archived = Resource(
            src="a.png",
            type="image",
            mime_type="image/jpeg",
            title="Cat",
            properties={"width": 640},
        )
        file = LocalFile(name="a.png", data=b"data")

        item = MediaItem.from_resources(5, local, archived, file)

        self.assertEqual(item.media_id, 5)
        self.assertEqual(item.src, "blob:1")
        self.assertFalse(item.local)
        self.assertEqual(item.title, "Cat")
        self.assertEqual(item.mime_type, "image/jpeg")
        self.assertEqual(item.properties, {"size": 4, "width": 640})
        self.assertIs(item.file, file)
        self.assertEqual(item.to_dict()["id"], 5)
        self.assertNotIn("file", item.to_dict())
