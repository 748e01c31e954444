from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Tuple

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default
FALLBACK_LOG_NAME = "installarch.log"

_FILE_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
_CONSOLE_FORMAT = logging.Formatter(fmt="%(levelname)s %(message)s")


def _open_log_file(log_path: str) -> Tuple[logging.Handler, str]:
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path), log_path
    except OSError:
        fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
        return logging.FileHandler(fallback), fallback


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Send installer logging to a file and, optionally, the console.

    The file handler records every command and step transition at ``level``.
    If the requested path cannot be opened, installarch.log in the current
    directory is used instead. The console stays at INFO so that ``--debug``
    output (captured command output) only lands in the file.

    Calling it again only adjusts the level. Returns the file path in use.
    """

    root = logging.getLogger()
    root.setLevel(level)

    if getattr(root, "_installarch_configured", False):
        return getattr(root, "_installarch_log_path", log_path)

    file_handler, chosen_path = _open_log_file(log_path)
    file_handler.setFormatter(_FILE_FORMAT)
    root.addHandler(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setLevel(max(level, logging.INFO))
        console.setFormatter(_CONSOLE_FORMAT)
        root.addHandler(console)

    setattr(root, "_installarch_configured", True)
    setattr(root, "_installarch_log_path", chosen_path)

    if chosen_path != log_path:
        logging.getLogger(__name__).warning("Cannot write %s, logging to %s", log_path, chosen_path)
    return chosen_path
