"""In-memory user repository for testing."""

from typing import Optional

from overflow.domain.model import User
from overflow.domain.repository.user import UserRepository
from overflow.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        return next(
            (u for u in self._db.users.values() if u.username == username), None
        )

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        return next((u for u in self._db.users.values() if u.email == email), None)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._db.users[user.id] = user
        return user
