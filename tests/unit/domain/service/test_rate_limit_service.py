"""Unit tests for RateLimitService."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from overflow.domain.service import RateLimitService
from overflow.persistence.rate_limit import InMemoryRateLimitStore


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryRateLimitStore()


@pytest.fixture
def service(store, clock):
    return RateLimitService(store=store, window_seconds=60, clock=clock)


class TestCanUserPost:
    """Tests for can_user_post."""

    def test_first_post_is_allowed(self, service):
        """A user with no record may post."""
        # Act
        decision = service.can_user_post("alice")

        # Assert
        assert decision.allowed
        assert decision.error is None

    def test_second_post_within_window_is_rejected(self, service, clock):
        """Posting again after 10s is refused with the remaining wait."""
        # Arrange
        service.record_post("alice")
        clock.advance(seconds=10)

        # Act
        decision = service.can_user_post("alice")

        # Assert
        assert not decision.allowed
        assert decision.retry_after_seconds == 50
        assert decision.error == (
            "You are posting too frequently. "
            "Please wait 50 seconds before posting again."
        )

    def test_remaining_wait_rounds_up(self, service, clock):
        """A partial second left counts as a whole second."""
        # Arrange
        service.record_post("alice")
        clock.advance(seconds=59, milliseconds=1)

        # Act
        decision = service.can_user_post("alice")

        # Assert
        assert not decision.allowed
        assert decision.retry_after_seconds == 1

    def test_post_after_full_window_is_allowed(self, service, clock):
        """Exactly one window later the user may post again."""
        # Arrange
        service.record_post("alice")
        clock.advance(seconds=60)

        # Act
        decision = service.can_user_post("alice")

        # Assert
        assert decision.allowed

    def test_limits_are_per_user(self, service):
        """One user's post doesn't throttle another."""
        # Arrange
        service.record_post("alice")

        # Act
        decision = service.can_user_post("bob")

        # Assert
        assert decision.allowed


class TestRecordAndPurge:
    """Tests for record_post and purge_expired."""

    def test_record_overwrites_previous_post_time(self, service, clock):
        """Recording again restarts the window."""
        # Arrange
        service.record_post("alice")
        clock.advance(seconds=30)
        service.record_post("alice")
        clock.advance(seconds=40)

        # Act
        decision = service.can_user_post("alice")

        # Assert
        assert not decision.allowed
        assert decision.retry_after_seconds == 20

    def test_purge_drops_only_expired_records(self, service, store, clock):
        """Records older than the window are removed, fresh ones stay."""
        # Arrange
        service.record_post("alice")
        clock.advance(seconds=45)
        service.record_post("bob")
        clock.advance(seconds=20)

        # Act
        removed = service.purge_expired()

        # Assert
        assert removed == 1
        assert store.get("alice") is None
        assert store.get("bob") is not None

    def test_window_must_be_positive(self, store):
        """A zero-length window is a configuration error."""
        with pytest.raises(ValueError):
            RateLimitService(store=store, window_seconds=0)

    def test_default_clock_records_utc_times(self, store):
        """Stored post times are UTC, so local clock changes can't skew the wait."""
        # Arrange
        service = RateLimitService(store=store, window_seconds=60)

        # Act
        service.record_post("alice")
        decision = service.can_user_post("alice")

        # Assert
        assert store.get("alice").utcoffset() == timedelta(0)
        assert not decision.allowed
        assert 1 <= decision.retry_after_seconds <= 60


class TestSweeper:
    """Tests for run_sweeper."""

    @pytest.mark.asyncio
    async def test_sweeper_purges_expired_records_until_cancelled(
        self, store, clock
    ):
        """Each tick drops expired records; cancelling stops the loop."""
        # Arrange
        service = RateLimitService(store=store, window_seconds=1, clock=clock)
        service.record_post("alice")
        clock.advance(seconds=5)

        async def _purged() -> None:
            while store.get("alice") is not None:
                await asyncio.sleep(0.05)

        # Act
        sweeper = asyncio.create_task(service.run_sweeper())
        await asyncio.wait_for(_purged(), timeout=3)
        sweeper.cancel()

        # Assert
        with pytest.raises(asyncio.CancelledError):
            await sweeper
        assert sweeper.cancelled()
