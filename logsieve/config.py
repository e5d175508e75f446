"""Remembering the last log file that was opened."""

from __future__ import annotations

import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "logreader_config.txt"
DEFAULT_LOG_PATH = "log.txt"


def get_config_path() -> Path:
    """Return the path of the file that stores the last opened log path."""
    return Path(CONFIG_FILE_NAME)


def load_last_file_path(config_path: str | os.PathLike | None = None) -> str:
    """Return the remembered log path if it still exists, else the default path."""
    path = Path(config_path) if config_path is not None else get_config_path()
    try:
        with open(path, encoding="utf-8") as handle:
            remembered = handle.readline().rstrip("\r\n")
    except OSError:
        return DEFAULT_LOG_PATH
    if remembered and os.path.exists(remembered):
        return remembered
    return DEFAULT_LOG_PATH


def save_last_file_path(path: str, config_path: str | os.PathLike | None = None) -> None:
    """Remember ``path`` as the last opened log file; failures to write are ignored."""
    target = Path(config_path) if config_path is not None else get_config_path()
    try:
        target.write_text(path, encoding="utf-8")
    except OSError as exc:
        log.warning("Could not save last file path to %s: %s", target, exc)