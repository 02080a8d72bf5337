"""User domain service."""

from uuid import uuid4

import logfire

from overflow.config import AuthSettings
from overflow.domain.error import (
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
)
from overflow.domain.model.common import utcnow
from overflow.domain.model.user import User
from overflow.domain.repository.user import UserRepository
from overflow.domain.value import UserId
from overflow.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, username: str, email: str, password: str) -> User:
        """Create an account.

        Args:
            username: Unique username
            email: Unique email, stored lowercased
            password: Plaintext password, stored as a bcrypt hash

        Returns:
            The created user

        Raises:
            DuplicateUserError: If the username or email is already taken
        """
        email = email.strip().lower()
        with logfire.span("user_service.register", username=username):
            by_email = await self.user_repository.find_by_email(email)
            by_username = await self.user_repository.find_by_username(username)
            if by_email or by_username:
                logfire.warn(
                    "Registration with existing credentials", username=username
                )
                raise DuplicateUserError()

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        email = email.strip().lower()
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise InvalidCredentialsError()
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user
