"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RateLimitExceededError(DomainError):
    """Raised when a user posts again before the rate limit window elapses."""

    def __init__(self, message: str, retry_after_seconds: int):
        self.retry_after_seconds = retry_after_seconds
        super().__init__(message)


class DuplicateUserError(DomainError):
    """Raised when registering with a username or email already in use."""

    def __init__(self) -> None:
        super().__init__("User with this email or username already exists")


class InvalidCredentialsError(DomainError):
    """Raised when a login email/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid login credentials")


class AuthenticationError(DomainError):
    """Raised when a request cannot be tied to an existing user."""

    pass
