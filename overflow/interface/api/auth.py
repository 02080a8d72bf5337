"""Bearer token handling for routes."""

from fastapi import HTTPException, status

from overflow.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from overflow.domain.error import AuthenticationError

AUTH_REQUIRED = {"error": "Please authenticate."}


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(
    authorization: str | None, use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse:
    """Resolve the caller or reject the request.

    Args:
        authorization: Raw ``Authorization`` header
        use_case: Get current user use case

    Returns:
        The authenticated user

    Raises:
        HTTPException: 401 if the header is missing or the token is bad
    """
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=AUTH_REQUIRED
        )

    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except AuthenticationError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=AUTH_REQUIRED
        )


async def optional_user(
    authorization: str | None, use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse | None:
    """Resolve the caller if a valid token was sent, otherwise None."""
    token = bearer_token(authorization)
    if token is None:
        return None

    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except AuthenticationError:
        return None
