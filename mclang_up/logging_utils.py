from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOGGER_NAME = "mclang_up"

_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[35m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[31m",
}
_RESET = "\x1b[0m"


class ConsoleFormatter(logging.Formatter):
    """``level: message`` lines, with the level colored when `color` is set."""

    def __init__(self, *, color: bool = False) -> None:
        super().__init__(fmt="%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.lower()
        if self.color:
            level = f"{_LEVEL_COLORS.get(record.levelno, '')}{level}{_RESET}"
        return f"{level}: {super().format(record)}"


def configure_logging(
    *,
    verbose: bool = False,
    log_path: Optional[str] = None,
    also_console: bool = True,
) -> logging.Logger:
    """Configure logging once for the whole process.

    verbose lowers the level to DEBUG, which is where command echoes and
    success confirmations are logged. log_path additionally records every
    message, timestamped, to a file.

    Returns the logger handle the workflow passes to its collaborators.
    """

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(root, "_mclang_up_configured", False):
        return logging.getLogger(LOGGER_NAME)

    handlers: list[logging.Handler] = []

    if log_path:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(ConsoleFormatter(color=getattr(console.stream, "isatty", lambda: False)()))
        handlers.append(console)

    for h in handlers:
        root.addHandler(h)

    setattr(root, "_mclang_up_configured", True)
    return logging.getLogger(LOGGER_NAME)
