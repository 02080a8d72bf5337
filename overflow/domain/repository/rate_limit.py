"""Rate limit record store interface."""

from abc import ABC, abstractmethod
from datetime import datetime


class RateLimitStore(ABC):
    """Keyed store of the last time each user posted a question.

    Implementations are process-local; nothing is persisted.
    """

    @abstractmethod
    def get(self, username: str) -> datetime | None:
        """Return the user's last post time, if recorded."""
        pass

    @abstractmethod
    def set(self, username: str, posted_at: datetime) -> None:
        """Overwrite the user's last post time."""
        pass

    @abstractmethod
    def purge_older_than(self, cutoff: datetime) -> int:
        """Delete records strictly older than ``cutoff``.

        Returns:
            Number of records deleted
        """
        pass
