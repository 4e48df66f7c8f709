"""User Directory — the static, in-memory user list served by /api/users.

Invariants:
    - Users are immutable; the directory never changes after construction
    - User ids are unique within a directory
    - list_users() preserves seed order

Design Decisions:
    - Frozen dataclass over ORM model: no persistence layer exists
    - Module-level default_directory: read-only global, safe across requests
"""

from dataclasses import dataclass, asdict
from typing import Iterable

from app.core.errors import ResourceNotFoundError


@dataclass(frozen=True)
class User:
    """A user record. Only identity and display name are exposed."""
    id: int
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_USERS = (
    User(id=1, name="John Doe"),
    User(id=2, name="Jane Smith"),
    User(id=3, name="Bob Johnson"),
)


class UserDirectory:
    """Lookup over a fixed set of users."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS):
        self._users = tuple(users)
        self._by_id = {u.id: u for u in self._users}
        if len(self._by_id) != len(self._users):
            raise ValueError("duplicate user ids in directory seed")

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[User]:
        return list(self._users)

    def get_user(self, user_id: int) -> User:
        """Return the user with user_id or raise ResourceNotFoundError."""
        user = self._by_id.get(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user


default_directory = UserDirectory()


def get_user_directory() -> UserDirectory:
    """FastAPI dependency — returns the process-wide directory."""
    return default_directory
