"""
FastAPI Dependencies

Provides dependency injection for database sessions and settings. Both come
from the Database handle and Settings stored on app.state by the app factory.
"""
from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from config.settings import Settings
from src.mentors.db.session import Database


def get_database(request: Request) -> Database:
    """
    Database handle dependency.

    Returns:
        Database created in the application lifespan
    """
    return request.app.state.db


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency.

    Yields:
        SQLAlchemy session, committed after the handler returns and
        rolled back if it raises
    """
    with get_database(request).session() as session:
        yield session


def get_settings(request: Request) -> Settings:
    """
    Settings dependency.

    Returns:
        Application settings
    """
    return request.app.state.settings
