"""Process-local rate limit record store."""

import threading
from datetime import datetime

from overflow.domain.repository.rate_limit import RateLimitStore


class InMemoryRateLimitStore(RateLimitStore):
    """Dict of username to last post time, guarded by a lock.

    Per-process only: with several workers each one enforces its own limit,
    and records are lost on restart.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._last_post: dict[str, datetime] = {}

    def get(self, username: str) -> datetime | None:
        """Return the user's last post time, if recorded."""
        with self._lock:
            return self._last_post.get(username)

    def set(self, username: str, posted_at: datetime) -> None:
        """Overwrite the user's last post time."""
        with self._lock:
            self._last_post[username] = posted_at

    def purge_older_than(self, cutoff: datetime) -> int:
        """Delete records strictly older than ``cutoff``."""
        with self._lock:
            expired = [name for name, at in self._last_post.items() if at < cutoff]
            for name in expired:
                del self._last_post[name]
            return len(expired)
