"""Helpers building story archives in memory"""

import io
import json
import zipfile
from typing import Any

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 13
MP4_BYTES = b"\x00\x00\x00\x1cftypisom\x00\x00\x02\x00isomiso2mp41" + b"\x00" * 16


def build_zip(entries: dict[str, bytes | str]) -> bytes:
    """Zip the given entries, in order"""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


def image_element(src: str, title: str, **extra: Any) -> dict[str, Any]:
    return {
        "id": f"el-{title}",
        "type": "image",
        "resource": {
            "src": src,
            "type": "image",
            "mimeType": "image/jpeg",
            "title": title,
            "alt": title,
            **extra,
        },
    }


def video_element(src: str, title: str) -> dict[str, Any]:
    return {
        "id": f"el-{title}",
        "type": "video",
        "resource": {
            "src": src,
            "type": "video",
            "mimeType": "video/mp4",
            "title": title,
            "alt": title,
        },
    }


def descriptor_json(
    elements: list[dict[str, Any]], title: str = "Imported", **extra: Any
) -> str:
    return json.dumps(
        {"story": {"title": title}, "pages": [{"id": "p1", "elements": elements}], **extra}
    )
