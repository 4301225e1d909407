"""An element placed on a story page"""

import copy
from typing import Any

from typing_extensions import override

from storyimport.config import settings
from storyimport.models.resource import Resource

_KNOWN_KEYS = (
    settings.SERIALIZATION_KEYS.ELEMENT_ID.value,
    settings.SERIALIZATION_KEYS.TYPE.value,
    settings.SERIALIZATION_KEYS.RESOURCE.value,
)


class PageElement:
    """
    An element of a page (image, video, text, shape, ...).

    Only the `resource` sub-object matters to the importer, every other
    key is kept in `properties` and written back unchanged.
    """

    def __init__(
        self,
        element_id: str | None = None,
        element_type: str | None = None,
        resource: Resource | None = None,
        properties: dict[str, Any] | None = None,
    ):
        self.element_id: str | None = element_id
        self.element_type: str | None = element_type
        self.resource: Resource | None = resource
        self.properties: dict[str, Any] = properties if properties is not None else {}

    def with_resource(self, resource: Resource) -> "PageElement":
        """Return a copy of this element pointing at another resource"""
        return PageElement(
            element_id=self.element_id,
            element_type=self.element_type,
            resource=resource,
            properties=copy.deepcopy(self.properties),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize this element to a dictionary for JSON storage"""
        result: dict[str, Any] = copy.deepcopy(self.properties)
        if self.element_id is not None:
            result[settings.SERIALIZATION_KEYS.ELEMENT_ID.value] = self.element_id
        if self.element_type is not None:
            result[settings.SERIALIZATION_KEYS.TYPE.value] = self.element_type
        if self.resource is not None:
            result[settings.SERIALIZATION_KEYS.RESOURCE.value] = self.resource.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageElement":
        """Deserialize this element from a dictionary loaded from JSON"""
        resource_data = data.get(settings.SERIALIZATION_KEYS.RESOURCE.value)
        return cls(
            element_id=data.get(settings.SERIALIZATION_KEYS.ELEMENT_ID.value),
            element_type=data.get(settings.SERIALIZATION_KEYS.TYPE.value),
            resource=Resource.from_dict(resource_data)
            if isinstance(resource_data, dict)
            else None,
            properties={
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key not in _KNOWN_KEYS
            },
        )

    @override
    def __str__(self) -> str:
        return f"PageElement(ID={self.element_id}; Type={self.element_type}; Resource={self.resource})"

    @override
    def __eq__(self, other: object, /) -> bool:
        if not isinstance(other, PageElement):
            return False
        return self.to_dict() == other.to_dict()
