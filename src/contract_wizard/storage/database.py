"""Database connection management for the draft repository."""

import os
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base


DATABASE_URL_ENV = "CONTRACT_WIZARD_DATABASE_URL"
DEFAULT_DATABASE_URL = "sqlite:///contract_wizard.db"
_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def get_database_url(database_url: Optional[str] = None) -> str:
    """
    Resolve the database URL.

    Args:
        database_url: Explicit URL (default: from CONTRACT_WIZARD_DATABASE_URL
            env or a local SQLite file).

    Returns:
        SQLAlchemy connection URL string.
    """
    return database_url or os.environ.get(DATABASE_URL_ENV, DEFAULT_DATABASE_URL)


class DatabaseManager:
    """
    Database connection manager.

    Handles the engine, session management, and schema initialization.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        """
        Initialize the database manager.

        Args:
            database_url: Connection URL. If None, read from the environment.
            pool_size: Number of connections to keep in the pool.
            max_overflow: Maximum overflow connections beyond pool_size.
            echo: If True, log all SQL statements.
        """
        self._database_url = get_database_url(database_url)
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._echo = echo

    @property
    def database_url(self) -> str:
        return self._database_url

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._engine is None:
            if self._database_url in _IN_MEMORY_URLS:
                # One shared connection, or every session sees an empty database.
                self._engine = create_engine(
                    self._database_url,
                    echo=self._echo,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            elif self._database_url.startswith("sqlite"):
                self._engine = create_engine(self._database_url, echo=self._echo)
            else:
                self._engine = create_engine(
                    self._database_url,
                    pool_size=self._pool_size,
                    max_overflow=self._max_overflow,
                    echo=self._echo,
                    pool_pre_ping=True,
                )
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with automatic cleanup.

        Yields:
            SQLAlchemy Session object, committed on success and rolled back
            on error.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_database(self) -> None:
        """Create all tables defined in the models."""
        Base.metadata.create_all(self.engine)

    def drop_all_tables(self) -> None:
        """Drop all tables. Use with caution!"""
        Base.metadata.drop_all(self.engine)

    def close(self) -> None:
        """Close the database engine and release all connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None

    def health_check(self) -> bool:
        """
        Check if the database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise.
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False
