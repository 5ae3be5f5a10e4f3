"""
Configuration Settings

Centralized configuration management using Pydantic and environment variables.
"""
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "src" / "mentors" / "static"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All sensitive values should be stored in .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000

    # Admin gate
    admin_password: str = "ziad1234"
    admin_path: str = "admin-mentors-2026"

    # MySQL connection parts
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_database: str = "mentorsdb"

    # Full SQLAlchemy URL (DATABASE_URL), overrides the MySQL parts when set
    database_url_override: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("database_url", "database_url_override"),
    )

    # Database pool settings
    database_pool_size: int = 10
    database_pool_timeout: int = 30
    database_pool_recycle: int = 3600
    database_echo: bool = False  # Set to True for SQL query logging

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "json"

    # Application settings
    environment: str = "development"
    static_dir: Path = DEFAULT_STATIC_DIR
    copyright_notice: str = "-@copyright directed by Ziad ElKhouly-"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the configured datastore."""
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "mysql+pymysql",
            username=self.mysql_user,
            password=self.mysql_password or None,
            host=self.mysql_host,
            port=self.mysql_port,
            database=self.mysql_database,
        ).render_as_string(hide_password=False)


# Singleton instance
settings = Settings()
