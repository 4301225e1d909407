"""Read-only access to an exported story archive"""

import asyncio
import io
import logging
import zipfile
import zlib
from typing import Literal, overload

from storyimport.config import settings
from storyimport.errors import (
    ArchiveReadError,
    EntryNotFoundError,
    InvalidContainerError,
)
from storyimport.models.import_file import ImportFile


class Archive:
    """
    The entries of an opened story archive.

    Archive layout:
    - config.json (story descriptor, UTF-8 JSON)
    - any number of media files, named after the `resource.src` values
    - optional video posters named `<video name without extension>-poster.jpeg`
    """

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip: zipfile.ZipFile = zip_file
        self._entries: list[str] = [
            info.filename for info in zip_file.infolist() if not info.is_dir()
        ]
        self.logger: logging.Logger = logging.getLogger("Archive")

    @property
    def entries(self) -> list[str]:
        """Entry names in archive order"""
        return list(self._entries)

    def names(self) -> set[str]:
        return set(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _read_bytes(self, name: str) -> bytes:
        if name not in self._entries:
            raise EntryNotFoundError(name)
        try:
            return self._zip.read(name)
        except (zipfile.BadZipFile, zlib.error, OSError, NotImplementedError) as e:
            raise ArchiveReadError(f"Cannot extract '{name}': {e}") from e

    async def read_blob(self, name: str) -> bytes:
        """Extract the raw bytes of an entry"""
        self.logger.debug("Extracting %s", name)
        return await asyncio.to_thread(self._read_bytes, name)

    async def read_text(self, name: str, encoding: str = "utf-8") -> str:
        """Extract an entry and decode it as text"""
        data = await self.read_blob(name)
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise ArchiveReadError(f"'{name}' is not valid {encoding} text") from e

    @overload
    async def read(self, name: str, as_text: Literal[True]) -> str: ...

    @overload
    async def read(self, name: str, as_text: Literal[False] = False) -> bytes: ...

    async def read(self, name: str, as_text: bool = False) -> str | bytes:
        """Extract an entry as text or as a binary blob"""
        if as_text:
            return await self.read_text(name)
        return await self.read_blob(name)

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "Archive":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()


class ArchiveReader:
    """Opens story archives selected by the user"""

    @staticmethod
    def is_supported(file: ImportFile) -> bool:
        """Check the declared container type before touching the content"""
        return file.mime_type in settings.ARCHIVE_MIME_TYPES

    @staticmethod
    async def open(file: ImportFile) -> Archive:
        """
        Open a story archive.

        Raises:
            InvalidContainerError: the declared type is not a zip type, or the
                content is not a readable zip archive
        """
        logger = logging.getLogger("ArchiveReader")
        if not ArchiveReader.is_supported(file):
            logger.warning(
                "Rejecting %s: unsupported container type '%s'",
                file.name,
                file.mime_type,
            )
            raise InvalidContainerError(
                f"Unsupported container type '{file.mime_type}' for {file.name}"
            )

        def _open() -> zipfile.ZipFile:
            return zipfile.ZipFile(io.BytesIO(file.data))

        try:
            zip_file = await asyncio.to_thread(_open)
        except (zipfile.BadZipFile, zlib.error, OSError) as e:
            logger.warning("Cannot open %s: %s", file.name, e)
            raise InvalidContainerError(f"{file.name} is not a zip archive") from e

        archive = Archive(zip_file)
        logger.debug("Opened %s with %d entries", file.name, len(archive))
        return archive
