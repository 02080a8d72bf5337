"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from overflow.domain.model.user import User
from overflow.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    A user is loaded and saved together with both vote ledgers.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (exact match)."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address (already lowercased)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), replacing the stored vote ledgers.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
