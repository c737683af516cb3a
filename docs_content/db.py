"""
Database adapter for the content tables.

Content is published into a single SQLite file at build time and read back
through short-lived sessions. Services only depend on DBAdapter, so tests can
hand them any object with the same session() contract.
"""

import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from constants import CONTENT_DB_FILENAME, DATA_DIR
from .models.base import Base


class DBAdapter(ABC):
    """Session and schema operations the content services rely on."""

    @abstractmethod
    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Yield a session; commits on exit, rolls back on exception."""
        ...

    @abstractmethod
    def create_tables(self) -> None:
        """Create all tables defined in models."""
        ...

    @abstractmethod
    def drop_tables(self) -> None:
        """Drop all tables defined in models."""
        ...


class SQLiteAdapter(DBAdapter):
    """SQLite implementation of the DB adapter."""

    def __init__(self, url: str = "sqlite:///data/content.db", *, echo: bool = False):
        self._url = url
        self._engine = create_engine(url, echo=echo, connect_args={"check_same_thread": False})
        self._session_factory = sessionmaker(
            self._engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @property
    def url(self) -> str:
        return self._url

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self._engine)

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self._engine)

    def dispose(self) -> None:
        self._engine.dispose()


def get_default_adapter() -> DBAdapter:
    """SQLite adapter for DATABASE_URL, or for DATA_DIR/content.db when unset."""
    url = os.environ.get("DATABASE_URL")
    if url:
        if url.startswith("sqlite"):
            return SQLiteAdapter(url)
        raise ValueError("Only sqlite:// URLs are supported. Set DATABASE_URL to a sqlite path.")

    DATA_DIR.mkdir(parents=True, exist_ok=True)
    db_path = DATA_DIR / CONTENT_DB_FILENAME
    return SQLiteAdapter(f"sqlite:///{db_path}")
