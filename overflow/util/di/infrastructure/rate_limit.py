"""Rate limit store provider."""

from dishka import Scope, provide

from overflow.domain.repository import RateLimitStore
from overflow.persistence.rate_limit import InMemoryRateLimitStore
from overflow.util.di.base import ProviderBase


class RateLimitStoreProvider(ProviderBase):
    """Process-local rate limit store, shared by every request."""

    @provide(scope=Scope.APP)
    def get_rate_limit_store(self) -> RateLimitStore:
        """Provide the last-post record store."""
        return InMemoryRateLimitStore()
