"""A file selected by the user for import"""

import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImportFile:
    """Name, declared container type and content of a selected file"""

    name: str
    mime_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: Path) -> "ImportFile":
        """Read a file from disk, guessing its MIME type from the extension"""
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            mime_type=mime_type or "application/octet-stream",
            data=path.read_bytes(),
        )
