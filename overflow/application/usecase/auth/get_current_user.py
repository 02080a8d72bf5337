"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from overflow.domain.error import AuthenticationError, NotFoundError
from overflow.domain.service import JWTService, UserService
from overflow.domain.value import UserId
from overflow.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    email: str


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to its user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            AuthenticationError: If the token is invalid, expired, or names a
                user that no longer exists
        """
        try:
            payload = self.jwt_service.verify_token(request.token)
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except (JWTError, NotFoundError, ValueError) as e:
            raise AuthenticationError(str(e)) from e

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username,
            email=user.email,
        )
