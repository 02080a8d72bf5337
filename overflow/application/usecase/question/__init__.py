"""Question use cases."""

from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .views import AnswerView, QuestionView, TagView

__all__ = [
    "AnswerView",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionView",
    "TagView",
]
