"""
Represents a Page inside a Story
"""

import copy
import logging
from typing import Any

from typing_extensions import override

from storyimport.config import settings
from storyimport.models.page_element import PageElement


class Page:
    """Represents a Page inside a Story"""

    def __init__(
        self,
        elements: list[PageElement] | None = None,
        page_id: str | None = None,
        properties: dict[str, Any] | None = None,
    ):
        self.elements: list[PageElement] = elements if elements is not None else []
        self.page_id: str | None = page_id
        self.properties: dict[str, Any] = properties if properties is not None else {}

    def with_elements(self, elements: list[PageElement]) -> "Page":
        """Return a copy of this page holding other elements"""
        return Page(
            elements=elements,
            page_id=self.page_id,
            properties=copy.deepcopy(self.properties),
        )

    def to_dict(self) -> dict[str, Any]:
        """Returns the object as a dict"""
        result: dict[str, Any] = copy.deepcopy(self.properties)
        if self.page_id is not None:
            result[settings.SERIALIZATION_KEYS.ELEMENT_ID.value] = self.page_id
        result[settings.SERIALIZATION_KEYS.ELEMENTS.value] = [
            element.to_dict() for element in self.elements
        ]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        """Builds the object from a dictionary"""
        raw_elements = data.get(settings.SERIALIZATION_KEYS.ELEMENTS.value)
        if not isinstance(raw_elements, list):
            raw_elements = []

        elements: list[PageElement] = []
        for raw_element in raw_elements:
            if not isinstance(raw_element, dict):
                logging.getLogger("Page").warning(
                    "Dropping element that is not an object: %r", raw_element
                )
                continue
            elements.append(PageElement.from_dict(raw_element))

        return cls(
            elements=elements,
            page_id=data.get(settings.SERIALIZATION_KEYS.ELEMENT_ID.value),
            properties={
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key
                not in (
                    settings.SERIALIZATION_KEYS.ELEMENT_ID.value,
                    settings.SERIALIZATION_KEYS.ELEMENTS.value,
                )
            },
        )

    @override
    def __str__(self) -> str:
        return f"Page(Elements={len(self.elements)}; Page ID={self.page_id})"

    @override
    def __eq__(self, other: object):
        if not isinstance(other, Page):
            return False
        return self.to_dict() == other.to_dict()
