"""Errors raised while importing a story archive"""


class StoryImportError(Exception):
    """Base class for every error raised by the import engine"""


class InvalidContainerError(StoryImportError):
    """No file was selected, or the file is not a readable zip archive"""


class EntryNotFoundError(StoryImportError, KeyError):
    """The requested entry does not exist in the archive"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name: str = name

    def __str__(self) -> str:
        return f"Archive entry not found: {self.name}"


class ArchiveReadError(StoryImportError):
    """An archive entry exists but its content could not be extracted"""


class MissingDescriptorError(StoryImportError):
    """The archive has no config.json entry"""


class MalformedDescriptorError(StoryImportError, ValueError):
    """The config.json entry cannot be decoded"""


class AssetConversionError(StoryImportError):
    """A media entry could not be turned into a local resource"""
