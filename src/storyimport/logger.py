"""Logging setup for the application"""

import datetime
import logging
from typing_extensions import override

from storyimport.config import settings


def configure_logging(level: int = logging.DEBUG):
    settings.LOGGING_DIR_PATH.mkdir(parents=True, exist_ok=True)
    now: str = datetime.datetime.now().strftime("%Y-%m-%d-%H-%M")
    file_name = settings.LOGGING_DIR_PATH / f"import-{now}.log"

    formatter = logging.Formatter(
        fmt="%(asctime)s - [%(name)s]- %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
    )

    file_handler = logging.FileHandler(file_name, encoding="UTF-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(CustomFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # Qt is chatty at debug level
    modules_to_ignore: list[str] = ["PyQt6"]
    for module in modules_to_ignore:
        logging.getLogger(module).setLevel(logging.WARNING)


class CustomFormatter(logging.Formatter):
    """Console formatter colouring each record by its level"""

    COLOURS: dict[int, str] = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[38;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    RESET: str = "\x1b[0m"
    CONSOLE_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    def __init__(self):
        super().__init__(self.CONSOLE_FORMAT)
        self._by_level: dict[int, logging.Formatter] = {
            level: logging.Formatter(colour + self.CONSOLE_FORMAT + self.RESET)
            for level, colour in self.COLOURS.items()
        }

    @override
    def format(self, record: logging.LogRecord) -> str:
        # Custom levels fall back to the plain format
        formatter = self._by_level.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)
