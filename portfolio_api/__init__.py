"""Portfolio API: authenticated CRUD backend for a personal portfolio site."""

__version__ = "1.0.0"
