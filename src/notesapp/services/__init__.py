"""Service interfaces shared by the storage and UI layers."""
