"""Question posting rate limit.

Each user may post one question per window. The last post time per user is
kept in an injected ``RateLimitStore``; a background sweeper drops records
older than the window so the store doesn't grow without bound.

Checking and recording are two separate steps, so two concurrent posts from
the same user can both pass the check.
"""

import asyncio
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

import logfire

from overflow.domain.model.common import utcnow
from overflow.domain.repository.rate_limit import RateLimitStore

from .base import Service


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a rate limit check."""

    allowed: bool
    error: str | None = None
    retry_after_seconds: int = 0


class RateLimitService(Service):
    """Per-user fixed window limit on question creation."""

    def __init__(
        self,
        store: RateLimitStore,
        window_seconds: int = 60,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize rate limit service.

        Args:
            store: Last-post record store
            window_seconds: Minimum time between two posts by one user
            clock: Time source returning the current aware UTC time

        Raises:
            ValueError: If window_seconds is not positive
        """
        if window_seconds < 1:
            raise ValueError("window_seconds must be >= 1")

        self.store = store
        self.window = timedelta(seconds=window_seconds)
        self.clock = clock

    def can_user_post(self, username: str) -> RateLimitDecision:
        """Check whether the user may post a question now.

        Args:
            username: Posting user's username

        Returns:
            Allowed decision, or a denial carrying the user-facing message
        """
        last_post = self.store.get(username)
        if last_post is None:
            return RateLimitDecision(allowed=True)

        elapsed = self.clock() - last_post
        if elapsed >= self.window:
            return RateLimitDecision(allowed=True)

        remaining_ms = (self.window - elapsed) / timedelta(milliseconds=1)
        wait_seconds = math.ceil(remaining_ms / 1000)
        logfire.info(
            "Post rate limited", username=username, wait_seconds=wait_seconds
        )
        return RateLimitDecision(
            allowed=False,
            error=(
                "You are posting too frequently. "
                f"Please wait {wait_seconds} seconds before posting again."
            ),
            retry_after_seconds=wait_seconds,
        )

    def record_post(self, username: str) -> None:
        """Record that the user just posted, replacing any earlier record."""
        self.store.set(username, self.clock())

    def purge_expired(self) -> int:
        """Drop records older than the window.

        Returns:
            Number of records dropped
        """
        removed = self.store.purge_older_than(self.clock() - self.window)
        if removed:
            logfire.debug("Rate limit records purged", removed=removed)
        return removed

    async def run_sweeper(self) -> None:
        """Purge expired records once per window until cancelled."""
        interval = self.window.total_seconds()
        while True:
            await asyncio.sleep(interval)
            self.purge_expired()
