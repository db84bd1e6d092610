"""
Data access for users.

``UserRepository`` exposes a small CRUD surface over the ``users``
table.  Each method opens its own session, so every call is a single
transaction.  SQLAlchemy exceptions are translated into the storage
errors defined in ``core.errors``; nothing above this module sees a
driver exception.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from user_api.app.core.db import Database
from user_api.app.core.errors import ConstraintViolation, StorageUnavailable
from user_api.app.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for ``User`` rows."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def find_all(self) -> List[User]:
        """Return all users ordered by identifier (insertion order)."""
        try:
            with self.database.session() as session:
                users = list(session.scalars(select(User).order_by(User.id)))
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Failed to list users: {exc}") from exc
        logger.debug("Loaded %d users", len(users))
        return users

    def find_by_id(self, user_id: int) -> Optional[User]:
        try:
            with self.database.session() as session:
                return session.get(User, user_id)
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Failed to load user {user_id}: {exc}") from exc

    def save(self, user: User) -> User:
        """Insert ``user`` or overwrite the stored row with the same id.

        Users without an identifier are inserted and receive a fresh
        one.  Users carrying an identifier are merged, which updates the
        existing row or inserts it under that identifier.  The returned
        object always has ``id`` populated.
        """
        try:
            with self.database.session() as session:
                if user.id is None:
                    session.add(user)
                    saved = user
                else:
                    saved = session.merge(user)
                session.flush()
        except IntegrityError as exc:
            raise ConstraintViolation(f"User violates a storage constraint: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Failed to save user: {exc}") from exc
        logger.debug("Saved user %s", saved.id)
        return saved

    def delete_by_id(self, user_id: int) -> bool:
        """Delete the user with ``user_id``; return whether it existed."""
        try:
            with self.database.session() as session:
                user = session.get(User, user_id)
                if user is None:
                    return False
                session.delete(user)
        except IntegrityError as exc:
            raise ConstraintViolation(f"Cannot delete user {user_id}: {exc.orig}") from exc
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Failed to delete user {user_id}: {exc}") from exc
        logger.debug("Deleted user %s", user_id)
        return True

    def count(self) -> int:
        try:
            with self.database.session() as session:
                return session.scalar(select(func.count()).select_from(User)) or 0
        except SQLAlchemyError as exc:
            raise StorageUnavailable(f"Failed to count users: {exc}") from exc
