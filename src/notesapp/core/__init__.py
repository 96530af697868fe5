"""Core note model and process-wide helpers (paths, logging)."""
