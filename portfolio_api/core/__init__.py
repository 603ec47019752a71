"""Core app configuration, database, security and error handling."""

from portfolio_api.core.config import Settings, get_settings
from portfolio_api.core.database import Database, get_db

__all__ = ["Database", "Settings", "get_db", "get_settings"]
