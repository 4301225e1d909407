"""Media item model: an entry of the user's media library"""

import copy
from dataclasses import dataclass, field
from typing import Any

from storyimport.config import settings
from storyimport.models.local_file import LocalFile
from storyimport.models.resource import Resource


@dataclass
class MediaItem:
    """Represents a media library item"""

    media_id: int
    src: str
    local: bool = False
    file: LocalFile | None = None
    title: str | None = None
    alt: str | None = None
    type: str | None = None
    mime_type: str = ""
    poster: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.alt is None:
            self.alt = self.title

    @classmethod
    def from_resources(
        cls,
        media_id: int,
        local_resource: Resource,
        archive_resource: Resource,
        file: LocalFile,
    ) -> "MediaItem":
        """
        Build an imported media item.

        The archive resource fields win over the ones derived from the local
        file, except `src` which always is the new local reference.
        """
        properties = copy.deepcopy(local_resource.properties)
        properties.update(copy.deepcopy(archive_resource.properties))
        return cls(
            media_id=media_id,
            src=local_resource.src,
            local=False,
            file=file,
            title=archive_resource.title
            if archive_resource.title is not None
            else local_resource.title,
            alt=archive_resource.alt
            if archive_resource.alt is not None
            else local_resource.alt,
            type=archive_resource.type or local_resource.type,
            mime_type=archive_resource.mime_type or local_resource.mime_type,
            properties=properties,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the item metadata, the binary payload is left out"""
        result: dict[str, Any] = copy.deepcopy(self.properties)
        result.update(
            {
                settings.SERIALIZATION_KEYS.ELEMENT_ID.value: self.media_id,
                settings.SERIALIZATION_KEYS.SRC.value: self.src,
                "local": self.local,
                settings.SERIALIZATION_KEYS.TITLE.value: self.title,
                settings.SERIALIZATION_KEYS.ALT.value: self.alt,
                settings.SERIALIZATION_KEYS.TYPE.value: self.type,
                settings.SERIALIZATION_KEYS.MIME_TYPE.value: self.mime_type,
            }
        )
        if self.poster is not None:
            result[settings.SERIALIZATION_KEYS.POSTER.value] = self.poster
        return result
