"""
Database Package

Database models, connection management, and data persistence layer.
"""
from src.mentors.db.base import Base
from src.mentors.db.session import Database, build_engine
from src.mentors.db.models import (
    User,
    Developer,
    Availability,
    Lead,
)
from src.mentors.db.exceptions import (
    DataAccessError,
    DuplicateRecordError,
    RecordNotFoundError,
)
from src.mentors.db.repository import (
    BaseRepository,
    UserRepository,
    DeveloperRepository,
    AvailabilityRepository,
    LeadRepository,
    DEFAULT_DEVELOPERS,
)

__all__ = [
    # Base
    "Base",
    # Session management
    "Database",
    "build_engine",
    # Models
    "User",
    "Developer",
    "Availability",
    "Lead",
    # Errors
    "DataAccessError",
    "DuplicateRecordError",
    "RecordNotFoundError",
    # Repositories
    "BaseRepository",
    "UserRepository",
    "DeveloperRepository",
    "AvailabilityRepository",
    "LeadRepository",
    "DEFAULT_DEVELOPERS",
]
