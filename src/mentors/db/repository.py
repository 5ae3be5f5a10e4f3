"""
Repository Pattern for Data Access

One repository per table. Every method takes the request's session as its
first argument and issues parameterized statements only.
"""
from typing import Any, Dict, List, Optional, Type, TypeVar

from passlib.context import CryptContext
from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.mentors.db.exceptions import (
    DuplicateRecordError,
    RecordNotFoundError,
    is_duplicate_key_error,
)
from src.mentors.db.models import User, Developer, Availability, Lead
from src.mentors.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

DEFAULT_DEVELOPERS = (
    "Sodic",
    "Hassan Allam",
    "Ora",
    "Orascom",
    "Madinet Masr",
    "Hyde Park",
    "Tatweer Misr",
)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hashed password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against its hash.

    Args:
        plain_password: Plain text password
        hashed_password: Bcrypt hashed password

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


class BaseRepository:
    """
    Base repository with the operations shared by every table.
    """

    def __init__(self, model: Type[T]):
        """
        Initialize repository with model class.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model

    def get_by_id(self, session: Session, id_value: Any) -> Optional[T]:
        """
        Get single record by primary key.

        Args:
            session: Database session
            id_value: Primary key value

        Returns:
            Model instance or None
        """
        return session.get(self.model, id_value)

    def delete_by_id(self, session: Session, id_value: Any) -> bool:
        """
        Delete record (hard delete).

        Args:
            session: Database session
            id_value: Primary key value

        Returns:
            True if a row was deleted, False if none matched
        """
        result = session.execute(delete(self.model).where(self.model.id == id_value))
        deleted = result.rowcount > 0
        logger.info(
            "repository_deleted",
            model=self.model.__name__,
            id=id_value,
            found=deleted
        )
        return deleted

    def count(self, session: Session) -> int:
        """
        Count total records.

        Args:
            session: Database session

        Returns:
            Total count
        """
        return session.scalar(select(func.count()).select_from(self.model))

    def _add(self, session: Session, instance: T, unique_field: str = None) -> T:
        """
        Insert an instance and refresh it so server defaults are loaded.

        Raises:
            DuplicateRecordError: If a unique constraint rejects the row
        """
        unique_value = getattr(instance, unique_field) if unique_field else None
        session.add(instance)
        try:
            session.flush()
        except IntegrityError as e:
            session.rollback()
            if unique_field and is_duplicate_key_error(e):
                logger.warning(
                    "repository_duplicate",
                    model=self.model.__name__,
                    field=unique_field,
                    value=unique_value
                )
                raise DuplicateRecordError(self.model.__name__, unique_field, unique_value) from e
            raise
        session.refresh(instance)
        logger.info("repository_created", model=self.model.__name__, id=instance.id)
        return instance


class UserRepository(BaseRepository):
    """Repository for User accounts."""

    def __init__(self):
        super().__init__(User)

    def find_by_username_case_insensitive(self, session: Session, username: str) -> Optional[User]:
        """
        Look up a user ignoring username case.

        Args:
            session: Database session
            username: Username as typed

        Returns:
            User or None
        """
        query = (
            select(User)
            .where(func.lower(User.username) == func.lower(username))
            .limit(1)
        )
        return session.execute(query).scalars().first()

    def insert(self, session: Session, username: str, password: str, phone: str, email: str) -> User:
        """
        Create a user with a hashed password.

        Raises:
            DuplicateRecordError: If the username is already taken
        """
        user = User(
            username=username,
            password=hash_password(password),
            phone=phone,
            email=email,
        )
        return self._add(session, user, unique_field="username")

    def find_by_username_and_password(self, session: Session, username: str, password: str) -> Optional[User]:
        """
        Authenticate a user by username (any case) and password.

        Returns:
            User if the credentials match, None otherwise
        """
        user = self.find_by_username_case_insensitive(session, username)
        if user is None:
            return None
        if not verify_password(password, user.password):
            logger.info("user_password_mismatch", user_id=user.id)
            return None
        return user

    def list_all_ordered_by_created_desc(self, session: Session) -> List[User]:
        """Get all users, newest first."""
        query = select(User).order_by(User.created_at.desc(), User.id.desc())
        return list(session.execute(query).scalars().all())


class DeveloperRepository(BaseRepository):
    """Repository for developer names."""

    def __init__(self):
        super().__init__(Developer)

    def list_all_ordered_by_id_desc(self, session: Session) -> List[Developer]:
        """Get all developers, most recently added first."""
        query = select(Developer).order_by(Developer.id.desc())
        return list(session.execute(query).scalars().all())

    def insert_unique(self, session: Session, name: str) -> Developer:
        """
        Add a developer name.

        Args:
            session: Database session
            name: Trimmed developer name

        Returns:
            Created developer

        Raises:
            DuplicateRecordError: If the name already exists
        """
        return self._add(session, Developer(name=name), unique_field="name")

    def seed_defaults(self, session: Session) -> int:
        """
        Insert the default developer names when the table is empty.

        Returns:
            Number of developers inserted
        """
        if self.count(session) > 0:
            return 0

        session.add_all(Developer(name=name) for name in DEFAULT_DEVELOPERS)
        session.flush()
        logger.info("developers_seeded", count=len(DEFAULT_DEVELOPERS))
        return len(DEFAULT_DEVELOPERS)


class AvailabilityRepository(BaseRepository):
    """Repository for availability listings."""

    def __init__(self):
        super().__init__(Availability)

    def list_all_ordered_by_created_desc(self, session: Session) -> List[Availability]:
        """Get all listings, newest first."""
        query = select(Availability).order_by(Availability.created_at.desc(), Availability.id.desc())
        return list(session.execute(query).scalars().all())

    def insert(self, session: Session, values: Dict[str, Any]) -> Availability:
        """
        Create a listing.

        Args:
            session: Database session
            values: Column values (destination, property_type, budget, delivery, developer, notes)

        Returns:
            Created listing
        """
        return self._add(session, Availability(**values))

    def update_by_id(self, session: Session, id_value: int, values: Dict[str, Any]) -> Availability:
        """
        Overwrite every editable column of a listing.

        Raises:
            RecordNotFoundError: If no listing has this id
        """
        result = session.execute(
            update(Availability)
            .where(Availability.id == id_value)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning("availability_not_found", id=id_value)
            raise RecordNotFoundError(Availability.__name__, id_value)

        item = self.get_by_id(session, id_value)
        session.refresh(item)
        logger.info("availability_updated", id=id_value)
        return item


class LeadRepository(BaseRepository):
    """Repository for customer leads."""

    def __init__(self):
        super().__init__(Lead)

    def insert(self, session: Session, values: Dict[str, Any]) -> Lead:
        """
        Store a submitted lead, hashing the optional password.

        Args:
            session: Database session
            values: Column values; budget must already be validated

        Returns:
            Created lead
        """
        values = dict(values)
        password = values.pop("password", None)
        lead = Lead(password=hash_password(password) if password else "", **values)
        return self._add(session, lead)

    def list_all_ordered_by_created_desc(self, session: Session) -> List[Lead]:
        """Get all leads, newest first."""
        query = select(Lead).order_by(Lead.created_at.desc(), Lead.id.desc())
        return list(session.execute(query).scalars().all())
