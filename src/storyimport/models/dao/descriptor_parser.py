"""Decodes the config.json descriptor of a story archive"""

import json
import logging
from typing import Any

from storyimport.config import settings
from storyimport.errors import (
    ArchiveReadError,
    MalformedDescriptorError,
    MissingDescriptorError,
)
from storyimport.models.dao.archive_reader import Archive
from storyimport.models.descriptor import ProjectDescriptor


async def parse_descriptor(archive: Archive) -> ProjectDescriptor:
    """
    Read and decode the descriptor entry of an archive.

    Only decodability is checked: missing optional fields are left to the
    consumers, which fall back to defaults.

    Raises:
        MissingDescriptorError: the archive has no config.json entry
        MalformedDescriptorError: the entry is not a UTF-8 JSON object
    """
    logger = logging.getLogger("DescriptorParser")
    name = settings.DESCRIPTOR_ENTRY_NAME
    if name not in archive:
        logger.warning("Archive has no %s entry", name)
        raise MissingDescriptorError(f"Archive has no {name} entry")

    try:
        raw_config = await archive.read_text(name)
    except ArchiveReadError as e:
        raise MalformedDescriptorError(str(e)) from e

    try:
        data: Any = json.loads(raw_config)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in %s: %s", name, e)
        raise MalformedDescriptorError(f"Invalid JSON in {name}: {e}") from e

    if not isinstance(data, dict):
        raise MalformedDescriptorError(
            f"{name} must contain an object, got {type(data).__name__}"
        )

    descriptor = ProjectDescriptor.from_dict(data)
    logger.debug(
        "Parsed descriptor '%s' with %d pages", descriptor.title, len(descriptor.pages)
    )
    return descriptor
