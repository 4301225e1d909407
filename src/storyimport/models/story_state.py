"""The editable story state owned by the story store"""

import copy
from dataclasses import dataclass, field
from typing import Any

from storyimport.config import settings
from storyimport.models.page import Page


@dataclass
class StoryState:
    """Story metadata, pages and the user's capabilities"""

    story: dict[str, Any] = field(default_factory=dict)
    pages: list[Page] = field(default_factory=list)
    capabilities: dict[str, Any] = field(default_factory=dict)
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Returns the state as a dict"""
        result: dict[str, Any] = copy.deepcopy(self.properties)
        result[settings.SERIALIZATION_KEYS.STORY.value] = copy.deepcopy(self.story)
        result[settings.SERIALIZATION_KEYS.PAGES.value] = [
            page.to_dict() for page in self.pages
        ]
        result[settings.SERIALIZATION_KEYS.CAPABILITIES.value] = copy.deepcopy(
            self.capabilities
        )
        return result
