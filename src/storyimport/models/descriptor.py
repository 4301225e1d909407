"""Project descriptor model: the config.json entry of a story archive"""

import copy
from dataclasses import dataclass, field
from typing import Any

from storyimport.config import settings
from storyimport.models.page import Page


@dataclass
class ProjectDescriptor:
    """Story metadata, pages and any other top-level key of config.json"""

    story: dict[str, Any] = field(default_factory=dict)
    pages: list[Page] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> str:
        """Story title, empty when missing or falsy"""
        return self.story.get(settings.SERIALIZATION_KEYS.TITLE.value) or ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize descriptor to dictionary"""
        result: dict[str, Any] = copy.deepcopy(self.properties)
        result[settings.SERIALIZATION_KEYS.STORY.value] = copy.deepcopy(self.story)
        result[settings.SERIALIZATION_KEYS.PAGES.value] = [
            page.to_dict() for page in self.pages
        ]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectDescriptor":
        """Deserialize descriptor from dictionary"""
        story = data.get(settings.SERIALIZATION_KEYS.STORY.value)
        pages = data.get(settings.SERIALIZATION_KEYS.PAGES.value)
        return cls(
            story=copy.deepcopy(story) if isinstance(story, dict) else {},
            pages=[Page.from_dict(page) for page in pages if isinstance(page, dict)]
            if isinstance(pages, list)
            else [],
            properties={
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key
                not in (
                    settings.SERIALIZATION_KEYS.STORY.value,
                    settings.SERIALIZATION_KEYS.PAGES.value,
                )
            },
        )
