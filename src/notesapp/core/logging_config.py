# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Production logging configuration with file rotation."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from notesapp.core.paths import user_log_dir

PACKAGE_LOGGER = "notesapp"


def setup_production_logging(
    app_name: str = "NotesApp",
    console_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> Path:
    """
    Configure logging with file rotation.

    Creates two log files:
    - notesapp.log: DEBUG+ messages from the package (5 MB per file, 3 rotations)
    - errors.log: ERROR+ messages from anywhere (1 MB per file, 3 rotations)

    Args:
        app_name: Application name for the log directory
        console_level: Minimum level for console output
        log_dir: Override for the platform log directory

    Returns:
        Path to the log directory
    """
    log_dir = Path(log_dir) if log_dir is not None else user_log_dir(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    app_logger = logging.getLogger(PACKAGE_LOGGER)
    app_logger.setLevel(logging.DEBUG)
    app_logger.handlers.clear()

    app_log_path = log_dir / "notesapp.log"
    app_handler = RotatingFileHandler(
        app_log_path,
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    app_handler.setLevel(logging.DEBUG)
    app_handler.setFormatter(detailed_formatter)
    app_logger.addHandler(app_handler)

    error_log_path = log_dir / "errors.log"
    error_handler = RotatingFileHandler(
        error_log_path,
        maxBytes=1 * 1024 * 1024,  # 1 MB
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    app_logger.addHandler(console_handler)

    log = logging.getLogger(__name__)
    log.info("%s logging initialized", app_name)
    log.info("Log directory: %s", log_dir)
    log.info("Platform: %s, Python: %s", sys.platform, sys.version.split()[0])

    return log_dir


def get_log_directory(app_name: str = "NotesApp") -> Path:
    """Return the log directory path without setting up logging."""
    return user_log_dir(app_name)
