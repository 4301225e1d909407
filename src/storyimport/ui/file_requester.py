"""Asks the user which story archive to import"""

import logging
from pathlib import Path
from typing import Protocol

from PyQt6.QtWidgets import QFileDialog, QWidget

from storyimport.config import settings
from storyimport.models.import_file import ImportFile


class FileRequester(Protocol):
    def request_files(self) -> list[ImportFile]: ...


class DialogFileRequester:
    """Opens a file dialog accepting story archives, several can be picked"""

    def __init__(self, parent: QWidget | None = None, directory: Path | None = None):
        self.parent: QWidget | None = parent
        self.directory: Path = directory or Path.home()

    def request_files(self) -> list[ImportFile]:
        paths, _ = QFileDialog.getOpenFileNames(
            self.parent,
            "Import story",
            str(self.directory),
            settings.ARCHIVE_FILE_FILTER,
        )
        files: list[ImportFile] = []
        for path in paths:
            try:
                files.append(ImportFile.from_path(Path(path)))
            except OSError as e:
                logging.getLogger("DialogFileRequester").error(
                    "Cannot read %s: %s", path, e
                )
        return files
