"""Local draft storage for the contract wizard."""

from .database import DATABASE_URL_ENV, DatabaseManager, get_database_url
from .models import Base, DraftModel
from .repository import DraftRepository

__all__ = [
    "DATABASE_URL_ENV",
    "DatabaseManager",
    "get_database_url",
    "Base",
    "DraftModel",
    "DraftRepository",
]
