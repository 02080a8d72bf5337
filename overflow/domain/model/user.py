"""User aggregate root and its vote ledger."""

from uuid import UUID

from pydantic import Field

from overflow.domain.model.common import DomainModel, Timestamp, utcnow
from overflow.domain.value import UserId, VoteTarget, VoteType


class VoteEntry(DomainModel):
    """A single ledger entry: the user's current vote on one target."""

    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    vote_type: VoteType


class User(DomainModel):
    """User aggregate root.

    Carries two vote ledgers, one for questions and one for answers. Each
    ledger holds at most one entry per target.
    """

    id: UserId
    username: str = Field(min_length=3)
    email: str
    password_hash: str
    voted_questions: list[VoteEntry] = Field(default_factory=list)
    voted_answers: list[VoteEntry] = Field(default_factory=list)
    created_at: Timestamp = Field(default_factory=utcnow)
    updated_at: Timestamp = Field(default_factory=utcnow)

    def ledger(self, target: VoteTarget) -> list[VoteEntry]:
        """Return the ledger for the given target kind."""
        if target == VoteTarget.QUESTION:
            return self.voted_questions
        return self.voted_answers

    def find_vote(self, target: VoteTarget, target_id: UUID) -> VoteEntry | None:
        """Find the user's vote on a target, if any."""
        return next(
            (entry for entry in self.ledger(target) if entry.target_id == target_id),
            None,
        )

    def with_ledger(self, target: VoteTarget, entries: list[VoteEntry]) -> "User":
        """Return a copy of the user with one ledger replaced."""
        field = "voted_questions" if target == VoteTarget.QUESTION else "voted_answers"
        return self.model_copy(update={field: entries, "updated_at": utcnow()})
