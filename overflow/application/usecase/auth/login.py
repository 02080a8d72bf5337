"""Login use case."""

import logfire
from pydantic import BaseModel

from overflow.domain.service import JWTService, UserService

from .register import AccountInfo


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    success: bool = True
    user: AccountInfo
    token: str


class LoginUseCase:
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Args:
            request: Login request with credentials

        Returns:
            Account info and a fresh token

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                doesn't match
        """
        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username)

        logfire.info("User logged in", user_id=str(user.id))

        return LoginResponse(
            user=AccountInfo(
                username=user.username,
                email=user.email,
                created_at=user.created_at,
            ),
            token=token,
        )
