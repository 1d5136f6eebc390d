"""Core app configuration, database and session signing."""

from kedjora.core.config import Settings, get_settings
from kedjora.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]
