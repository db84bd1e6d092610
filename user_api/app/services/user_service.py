"""
Business logic for users.

There is currently none: ``UserService`` forwards to the repository
and returns its results unchanged.  Storage errors propagate to the
caller as raised.
"""

import logging
from typing import List

from user_api.app.models.user import User
from user_api.app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Façade over ``UserRepository``."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def list_users(self) -> List[User]:
        """Return a snapshot list of all stored users."""
        users = list(self.repository.find_all())
        logger.debug("Listing %d users", len(users))
        return users

    def save_user(self, user: User) -> User:
        """Persist ``user`` and return the stored record."""
        saved = self.repository.save(user)
        logger.info("Saved user %s", saved.id)
        return saved
