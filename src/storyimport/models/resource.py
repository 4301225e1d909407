"""Resource model: the media asset an element points to"""

import copy
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from storyimport.config import settings

_KNOWN_KEYS = (
    settings.SERIALIZATION_KEYS.SRC.value,
    settings.SERIALIZATION_KEYS.TYPE.value,
    settings.SERIALIZATION_KEYS.MIME_TYPE.value,
    settings.SERIALIZATION_KEYS.TITLE.value,
    settings.SERIALIZATION_KEYS.ALT.value,
    settings.SERIALIZATION_KEYS.POSTER.value,
)


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class ResourceType(Enum):
    """Type of media resource"""

    IMAGE = "image"
    VIDEO = "video"


@dataclass
class Resource:
    """
    The `resource` sub-object of a story element.

    Keys the import engine does not use (width, height, id, ...) are kept
    untouched in `properties` so they travel with the element.
    """

    src: str = ""
    type: str | None = None
    mime_type: str = ""
    title: str | None = None
    alt: str | None = None
    poster: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    @property
    def is_video(self) -> bool:
        return self.type == ResourceType.VIDEO.value

    def copy_with(self, **changes: Any) -> "Resource":
        """Return a copy of this resource with the given fields replaced"""
        return replace(self, properties=copy.deepcopy(self.properties), **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize this resource to a dictionary"""
        result: dict[str, Any] = copy.deepcopy(self.properties)
        result[settings.SERIALIZATION_KEYS.SRC.value] = self.src
        result[settings.SERIALIZATION_KEYS.MIME_TYPE.value] = self.mime_type
        if self.type is not None:
            result[settings.SERIALIZATION_KEYS.TYPE.value] = self.type
        if self.title is not None:
            result[settings.SERIALIZATION_KEYS.TITLE.value] = self.title
        if self.alt is not None:
            result[settings.SERIALIZATION_KEYS.ALT.value] = self.alt
        if self.poster is not None:
            result[settings.SERIALIZATION_KEYS.POSTER.value] = self.poster
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Resource":
        """Build a resource from the descriptor's JSON object"""
        # Values of the wrong JSON type are treated as absent
        return cls(
            src=_str_or_none(data.get(settings.SERIALIZATION_KEYS.SRC.value)) or "",
            type=_str_or_none(data.get(settings.SERIALIZATION_KEYS.TYPE.value)),
            mime_type=_str_or_none(data.get(settings.SERIALIZATION_KEYS.MIME_TYPE.value))
            or "",
            title=_str_or_none(data.get(settings.SERIALIZATION_KEYS.TITLE.value)),
            alt=_str_or_none(data.get(settings.SERIALIZATION_KEYS.ALT.value)),
            poster=_str_or_none(data.get(settings.SERIALIZATION_KEYS.POSTER.value)),
            properties={
                key: copy.deepcopy(value)
                for key, value in data.items()
                if key not in _KNOWN_KEYS
            },
        )
