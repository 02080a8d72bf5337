"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .jwt_service import JWTService
from .question_service import QuestionService
from .rate_limit_service import RateLimitDecision, RateLimitService
from .search import SearchFilter, filter_questions, parse_search
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "JWTService",
    "QuestionService",
    "RateLimitDecision",
    "RateLimitService",
    "SearchFilter",
    "Service",
    "TagService",
    "UserService",
    "VoteService",
    "filter_questions",
    "parse_search",
]
