"""Data access layer: repository interfaces and their SQLite implementations."""
