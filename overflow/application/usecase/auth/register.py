"""Register use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from overflow.domain.service import JWTService, UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str = Field(min_length=3)
    email: str = Field(pattern=r"^\S+@\S+\.\S+$")
    password: str = Field(min_length=6)


class AccountInfo(BaseModel):
    """Public account fields returned after register or login."""

    username: str
    email: str
    created_at: datetime = Field(serialization_alias="createdAt")


class RegisterResponse(BaseModel):
    """Register response."""

    success: bool = True
    message: str = "User created successfully"
    user: AccountInfo
    token: str


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Execute register flow.

        Args:
            request: Register request

        Returns:
            The new account and a token for it

        Raises:
            DuplicateUserError: If the username or email is taken
        """
        user = await self.user_service.register(
            request.username, request.email, request.password
        )
        token = self.jwt_service.create_token(str(user.id), user.username)

        return RegisterResponse(
            user=AccountInfo(
                username=user.username,
                email=user.email,
                created_at=user.created_at,
            ),
            token=token,
        )
