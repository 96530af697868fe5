"""Qt user interface for NotesApp."""
