"""
Database Session Management

Provides the Database handle that owns the connection pool and scopes sessions.
The handle is constructed explicitly at process start and disposed at shutdown.
"""
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, event, exc, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config.settings import Settings
from src.mentors.utils.logger import get_logger

logger = get_logger(__name__)


def build_engine(app_settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured datastore.

    In-memory SQLite shares one connection across threads so every request
    sees the same database. Other backends get a bounded queue pool.

    Args:
        app_settings: Application settings

    Returns:
        Engine with connection pooling configured
    """
    url = app_settings.database_url

    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=app_settings.database_echo,
        )
    else:
        engine = create_engine(
            url,
            pool_size=app_settings.database_pool_size,
            max_overflow=0,
            pool_timeout=app_settings.database_pool_timeout,
            pool_recycle=app_settings.database_pool_recycle,
            pool_pre_ping=True,  # Verify connections before using
            echo=app_settings.database_echo,  # Log SQL queries if enabled
        )

    _register_pool_listeners(engine)
    return engine


def _register_pool_listeners(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def receive_connect(dbapi_conn, connection_record):
        logger.debug("database_connection_established")

    @event.listens_for(engine, "checkout")
    def receive_checkout(dbapi_conn, connection_record, connection_proxy):
        logger.debug("database_connection_checkout")

    @event.listens_for(engine, "invalidate")
    def receive_invalidate(dbapi_conn, connection_record, exception):
        logger.warning(
            "database_connection_invalidated",
            exception=str(exception) if exception else None
        )


class Database:
    """
    Data-access handle wrapping one engine and its session factory.

    Usage:
        db = Database(settings)
        db.initialize()
        with db.session() as session:
            ...
        db.dispose()
    """

    def __init__(self, app_settings: Settings, engine: Optional[Engine] = None):
        self.settings = app_settings
        self.engine = engine or build_engine(app_settings)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Get database session with automatic cleanup.

        Commits on success, rolls back and re-raises on any error, and always
        returns the connection to the pool.

        Yields:
            Database session
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except exc.SQLAlchemyError as e:
            session.rollback()
            logger.error(
                "database_session_rollback",
                error=str(e),
                error_type=type(e).__name__
            )
            raise
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all_tables(self):
        """
        Create all tables that do not exist yet.
        """
        from src.mentors.db.base import Base, import_all_models

        import_all_models()
        Base.metadata.create_all(bind=self.engine, checkfirst=True)
        logger.info("database_tables_ensured")

    def seed_defaults(self) -> int:
        """
        Seed lookup data on first boot.

        Returns:
            Number of rows inserted
        """
        from src.mentors.db.repository import DeveloperRepository

        with self.session() as session:
            return DeveloperRepository().seed_defaults(session)

    def initialize(self):
        """Ensure the schema exists and default developers are present."""
        self.create_all_tables()
        self.seed_defaults()

    def health_check(self) -> bool:
        """
        Check database connection health.

        Returns:
            True if database is accessible, False otherwise
        """
        try:
            with self.session() as session:
                session.execute(text("SELECT 1"))
            return True
        except exc.SQLAlchemyError as e:
            logger.error(
                "database_health_check_failed",
                error=str(e),
                error_type=type(e).__name__
            )
            return False

    def dispose(self):
        """
        Close all pooled connections.

        Should be called on application shutdown.
        """
        logger.info("closing_database_connections")
        self.engine.dispose()
        logger.info("database_connections_closed")
