"""Turns a local file extracted from an archive into a usable resource"""

import asyncio
import logging
import uuid
from typing import Protocol

from storyimport.config import settings
from storyimport.errors import AssetConversionError
from storyimport.models.local_file import LocalFile
from storyimport.models.resource import Resource, ResourceType

GENERIC_MIME_TYPES = ("", "application/octet-stream")


def detect_image_mime_type(data: bytes) -> str:
    """Detect MIME type from image header bytes"""
    if data[:8] == b"\x89PNG\r\n\x1a\n":
        return "image/png"
    if data[:2] == b"\xff\xd8":
        return "image/jpeg"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    if data[:5] == b"<?xml" or data[:4] == b"<svg":
        return "image/svg+xml"
    return "application/octet-stream"


def detect_video_mime_type(data: bytes) -> str:
    """Detect MIME type from video header bytes"""
    if len(data) >= 12:
        # MP4/MOV (ftyp box)
        if data[4:8] == b"ftyp":
            if data[8:12] in (b"qt  ", b"MSNV"):
                return "video/quicktime"
            return "video/mp4"
        # WebM/MKV (EBML header)
        if data[:4] == b"\x1a\x45\xdf\xa3":
            if b"webm" in data[:64]:
                return "video/webm"
            return "video/x-matroska"
    if data[:4] == b"\x00\x00\x01\xba" or data[:4] == b"\x00\x00\x01\xb3":
        return "video/mpeg"
    return "application/octet-stream"


def detect_mime_type(data: bytes) -> str:
    """Sniff an image or video MIME type, generic when unknown"""
    mime_type = detect_image_mime_type(data)
    if mime_type in GENERIC_MIME_TYPES:
        mime_type = detect_video_mime_type(data)
    return mime_type


def resource_type_for(mime_type: str) -> str | None:
    """Map a MIME type onto a resource type"""
    major = mime_type.split("/", 1)[0]
    for resource_type in ResourceType:
        if resource_type.value == major:
            return resource_type.value
    return None


class ResourceConverter(Protocol):
    """Collaborator turning a local file into a resource with a local src"""

    async def convert(self, file: LocalFile) -> Resource: ...


class LocalResourceConverter:
    """
    Registers extracted files in memory under a `blob:` reference.

    The registered payloads stay available through `get()` for the rest of
    the session; they are not uploaded anywhere.
    """

    def __init__(self, src_prefix: str | None = None):
        self.src_prefix: str = (
            src_prefix if src_prefix is not None else settings.LOCAL_SRC_PREFIX
        )
        self._files: dict[str, LocalFile] = {}
        self.logger: logging.Logger = logging.getLogger("LocalResourceConverter")

    async def convert(self, file: LocalFile) -> Resource:
        if not file.data:
            raise AssetConversionError(f"{file.name} is empty")

        mime_type = file.mime_type
        if mime_type in GENERIC_MIME_TYPES:
            mime_type = await asyncio.to_thread(detect_mime_type, file.data)
        resource_type = resource_type_for(mime_type)
        if resource_type is None:
            raise AssetConversionError(
                f"{file.name} has an unsupported type '{mime_type}'"
            )

        src = f"{self.src_prefix}{uuid.uuid4()}"
        self._files[src] = file
        self.logger.debug("Registered %s as %s (%d bytes)", file.name, src, file.size)
        return Resource(
            src=src,
            type=resource_type,
            mime_type=mime_type,
            title=file.basename,
            properties={
                settings.SERIALIZATION_KEYS.SIZE.value: file.size,
                settings.SERIALIZATION_KEYS.CHECKSUM.value: file.checksum,
            },
        )

    def get(self, src: str) -> LocalFile | None:
        """Get the file registered under a local reference"""
        return self._files.get(src)

    def __contains__(self, src: str) -> bool:
        return src in self._files

    def __len__(self) -> int:
        return len(self._files)
