"""CampusSync backend: SQLite record managers for the school desktop app."""

__version__ = "0.1.0"
