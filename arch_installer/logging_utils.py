from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .lib.env import PATHS

DEFAULT_LOG_PATH = PATHS.log_default
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_active_log_path: Optional[str] = None


def _open_log_file(log_path: str) -> tuple[logging.FileHandler, str]:
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path), log_path
    except OSError:
        fallback = str(Path.cwd() / "arch-installer.log")
        return logging.FileHandler(fallback), fallback


def configure_logging(log_path: str = DEFAULT_LOG_PATH, level: int = logging.INFO) -> str:
    """Send the full log to a file and warnings to the console.

    Errors stay off the console: `main` reports them to the operator itself.
    Falls back to ./arch-installer.log when `log_path` is not writable.
    Only the first call installs handlers; returns the file actually used.
    """

    global _active_log_path
    if _active_log_path is not None:
        return _active_log_path

    root = logging.getLogger()
    root.setLevel(level)
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    file_handler, chosen_path = _open_log_file(log_path)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    console.setLevel(logging.WARNING)
    console.addFilter(lambda record: record.levelno < logging.ERROR)
    root.addHandler(console)

    _active_log_path = chosen_path
    logging.getLogger(__name__).info("Logging initialized (requested=%s, actual=%s)", log_path, chosen_path)
    return chosen_path
