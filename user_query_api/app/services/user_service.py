"""
Query logic for users.

``UserQueryService`` answers the two supported queries against a
``UserStore``.  One instance is created by ``create_app`` and shared by
all requests; it keeps no state of its own besides the store handle.
"""

import logging
from typing import List, Optional

from ..core.store import UserStore
from ..schemas.user import User


logger = logging.getLogger(__name__)


class UserQueryService:
    """Сервис чтения пользователей.

    Only reads are supported.  A missing user is reported as ``None``,
    which is a normal result and not an error.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def get_user(self, user_id: str) -> Optional[User]:
        """Return the user with identifier ``user_id`` or ``None``."""
        user = self.store.fetch_by_id(user_id)
        if user is None:
            logger.debug("User %r not found", user_id)
        return user

    def get_users(self) -> List[User]:
        """Return all users in store order."""
        users = self.store.fetch_all()
        logger.debug("Returning %d users", len(users))
        return users
