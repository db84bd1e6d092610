"""
SQLAlchemy database integration.

This module provides the declarative ``Base`` for ORM models, the
``Database`` wrapper holding an engine and session factory, and
``init_db`` which creates all mapped tables on application start.
Swapping SQLite for another DBMS only requires a different
``DATABASE_URL``; no SQL in this project is dialect specific.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


class Database:
    """Engine and session factory for one database URL."""

    def __init__(self, url: str, *, echo: bool = False, pool_pre_ping: bool = True) -> None:
        connect_args = {}
        # SQLite connections are bound to the creating thread by default,
        # but FastAPI runs sync endpoints in a thread pool.
        if make_url(url).get_backend_name() == "sqlite":
            connect_args["check_same_thread"] = False
        self.url = url
        self.engine: Engine = create_engine(
            url,
            echo=echo,
            pool_pre_ping=pool_pre_ping,
            connect_args=connect_args,
        )
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session; commit on success, roll back on error."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_all(self) -> None:
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def init_db(database: Database) -> None:
    """Create tables for every mapped model.

    Models must be imported before ``create_all`` so that they are
    registered on ``Base.metadata``.
    """
    from user_api.app import models  # noqa: F401

    database.create_all()
    logger.info("Database initialised at %s", database.engine.url.render_as_string(hide_password=True))
