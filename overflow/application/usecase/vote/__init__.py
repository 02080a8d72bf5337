"""Vote use cases."""

from .vote import VoteAnswerUseCase, VoteQuestionUseCase, VoteRequest

__all__ = [
    "VoteAnswerUseCase",
    "VoteQuestionUseCase",
    "VoteRequest",
]
