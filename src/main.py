# NotesApp
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Entry point for launching the NotesApp desktop application."""

from __future__ import annotations

import logging
import sys

from notesapp.app.config import APP_NAME
from notesapp.core.logging_config import setup_production_logging

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Bootstrap the Qt application and block until it exits."""
    argv = list(sys.argv if argv is None else argv)
    database_path = argv[1] if len(argv) > 1 else None

    try:
        setup_production_logging(app_name=APP_NAME, console_level=logging.INFO)
        log.info("Starting %s with database: %s", APP_NAME, database_path or "default")
    except OSError as e:
        # Fall back to console logging if the log directory is not writable
        logging.basicConfig(level=logging.INFO)
        log.error("Failed to setup production logging: %s", e, exc_info=True)

    from notesapp.app.launcher import NotesLauncher

    try:
        launcher = NotesLauncher(database_path=database_path)
        code = launcher.run()
        log.info("%s exited normally", APP_NAME)
        return code
    except Exception as e:
        log.critical("%s crashed: %s", APP_NAME, e, exc_info=True)
        raise


if __name__ == "__main__":  # pragma: no cover - import guard
    sys.exit(main())
