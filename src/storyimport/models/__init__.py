"""The models used to represent an imported story at a high level"""

__all__ = [
    "ImportFile",
    "LocalFile",
    "MediaItem",
    "Page",
    "PageElement",
    "ProjectDescriptor",
    "Resource",
    "ResourceType",
    "StoryState",
]

from .import_file import ImportFile
from .local_file import LocalFile
from .media_item import MediaItem
from .page import Page
from .page_element import PageElement
from .descriptor import ProjectDescriptor
from .resource import Resource, ResourceType
from .story_state import StoryState
