"""User notifications shown during an import"""

import logging
from typing import Protocol

from PyQt6.QtWidgets import QStatusBar


class Snackbar(Protocol):
    def show_snackbar(self, message: str, dismissable: bool = False) -> None: ...


class StatusBarSnackbar:
    """Shows notifications in the window status bar"""

    # Non dismissable messages go away on their own
    TIMEOUT_MS: int = 5000

    def __init__(self, status_bar: QStatusBar):
        self.status_bar: QStatusBar = status_bar

    def show_snackbar(self, message: str, dismissable: bool = False) -> None:
        self.status_bar.showMessage(message, 0 if dismissable else self.TIMEOUT_MS)


class LoggingSnackbar:
    """Headless notifications, kept in memory and logged"""

    def __init__(self):
        self.messages: list[tuple[str, bool]] = []
        self.logger: logging.Logger = logging.getLogger("Snackbar")

    def show_snackbar(self, message: str, dismissable: bool = False) -> None:
        self.messages.append((message, dismissable))
        self.logger.info(message)
