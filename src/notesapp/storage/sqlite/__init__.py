"""
SQLite helpers backing the note store: connection handling and schema setup.
"""

from __future__ import annotations

__all__: list[str] = []
