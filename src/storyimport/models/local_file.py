"""Local file model for binary data extracted from an archive (images, videos)"""

import hashlib
from dataclasses import dataclass, field
from pathlib import PurePosixPath


@dataclass
class LocalFile:
    """A locally addressable file built from an archive entry"""

    name: str
    data: bytes
    mime_type: str = ""
    checksum: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Calculate checksum if it is not set"""
        if self.checksum is None:
            self.checksum = self._calculate_checksum(self.data)

    @staticmethod
    def _calculate_checksum(data: bytes) -> str:
        """Calculate SHA-256 checksum of data"""
        return hashlib.sha256(data).hexdigest()

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def basename(self) -> str:
        """File name without the archive folders"""
        return PurePosixPath(self.name).name
