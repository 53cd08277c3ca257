"""
In‑memory user data store and seed loading.

The store is built once when the application starts and is never
modified afterwards.  Because there is no write path, any number of
concurrent requests can read it without locking.  Adding writes later
would require synchronising access at this boundary.

Seed data comes either from the built‑in fixture below or from a JSON
file (``USERS_SEED_FILE``) containing an array of user objects, e.g.::

    [{"id": "1", "name": "Alice"}, {"id": "2", "name": "Bob"}]
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..schemas.user import User


logger = logging.getLogger(__name__)

DEFAULT_SEED_USERS = (
    {"id": "1", "name": "Alice"},
    {"id": "2", "name": "Bob"},
)

_users_adapter = TypeAdapter(List[User])


class SeedDataError(ValueError):
    """Raised when seed data cannot be read or does not describe users."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid user seed data in {path}: {reason}")
        self.path = path
        self.reason = reason


class UserStore:
    """Read‑only collection of users kept in seed order."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users = tuple(users)
        seen = set()
        for user in self._users:
            if user.id in seen:
                # Lookups return the first record with this id.
                logger.warning("Duplicate user id %r in store; later records are unreachable by id", user.id)
            seen.add(user.id)

    def __len__(self) -> int:
        return len(self._users)

    def fetch_all(self) -> List[User]:
        """Return every user in store order.  An empty store yields ``[]``."""
        return list(self._users)

    def fetch_by_id(self, user_id: str) -> Optional[User]:
        """Return the first user whose id equals ``user_id`` exactly, or ``None``."""
        for user in self._users:
            if user.id == user_id:
                return user
        return None


def load_seed_users(path: Optional[str] = None) -> List[User]:
    """Load the users the store is seeded with.

    Without ``path`` the built‑in fixture is returned.  Otherwise the
    file is parsed as a JSON array of user objects; any read or
    validation problem raises :class:`SeedDataError`.
    """
    if not path:
        return [User(**data) for data in DEFAULT_SEED_USERS]
    seed_path = Path(path)
    try:
        raw = seed_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SeedDataError(str(seed_path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise SeedDataError(str(seed_path), f"not UTF-8 text ({exc.reason})") from exc
    try:
        users = _users_adapter.validate_json(raw)
    except ValidationError as exc:
        raise SeedDataError(str(seed_path), str(exc)) from exc
    logger.info("Loaded %d users from %s", len(users), seed_path)
    return users
