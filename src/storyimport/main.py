"""
Imports a story archive picked by the user into empty stores
"""

import logging
import sys

from PyQt6.QtCore import QThread
from PyQt6.QtWidgets import QApplication

from storyimport.importer import ImportResult, StoryImporter
from storyimport.logger import configure_logging
from storyimport.stores import MediaStore, StoryStatus, StoryStore
from storyimport.ui.file_requester import DialogFileRequester
from storyimport.ui.import_worker import ImportWorker
from storyimport.ui.snackbar import LoggingSnackbar


def main() -> int:
    configure_logging()
    logging.debug("Starting the story import...")

    app = QApplication(sys.argv)
    status = StoryStatus()
    _ = status.importing_changed.connect(
        lambda importing: logging.getLogger("StoryStatus").info(
            "Importing: %s", importing
        )
    )
    importer = StoryImporter(
        story_store=StoryStore(),
        media_store=MediaStore(),
        status=status,
        snackbar=LoggingSnackbar(),
    )

    files = DialogFileRequester().request_files()
    thread = QThread()
    worker = ImportWorker(importer, files)
    worker.moveToThread(thread)
    _ = thread.started.connect(worker.run)

    def on_finished(result: ImportResult):
        logging.getLogger("Main").info(
            "Import %s: %d media added", result.phase.value, result.media_added
        )
        thread.quit()

    def on_error(message: str):
        logging.getLogger("Main").error("Import error: %s", message)
        thread.quit()

    _ = worker.finished.connect(on_finished)
    _ = worker.error.connect(on_error)
    _ = thread.finished.connect(app.quit)
    thread.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
