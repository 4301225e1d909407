"""Run a story import on another thread"""

import asyncio
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from storyimport.errors import StoryImportError
from storyimport.importer.orchestrator import ImportResult, StoryImporter
from storyimport.models.import_file import ImportFile


class ImportWorker(QObject):
    """Worker that imports a story archive in a separate thread"""

    # Signals
    finished: pyqtSignal = pyqtSignal(object)  # ImportResult
    error: pyqtSignal = pyqtSignal(str)

    def __init__(self, importer: StoryImporter, files: list[ImportFile]):
        super().__init__()
        self.importer: StoryImporter = importer
        self.files: list[ImportFile] = files
        self.logger: logging.Logger = logging.getLogger("ImportWorker")

    def run(self):
        """Main work function"""
        self.logger.debug("Importing %d selected files...", len(self.files))
        try:
            result: ImportResult = asyncio.run(self.importer.handle_files(self.files))
        except (StoryImportError, OSError, ValueError) as e:
            self.logger.error("Import failed: %s", e)
            self.error.emit(str(e))
            return
        except Exception as e:
            # The thread is only stopped by one of the two signals
            self.logger.exception("Unexpected error during the import")
            self.error.emit(f"Unexpected error: {e}")
            return
        self.finished.emit(result)
