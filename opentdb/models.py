"""Payload shapes returned by the OpenTDB API and the typed records decoded from them."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple, TypedDict


# Raw JSON payloads

class QuestionPayload(TypedDict):
    category: str
    type: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: List[str]

class TriviaPayload(TypedDict):
    response_code: int
    results: List[QuestionPayload]

class TokenPayload(TypedDict, total=False):
    # response_message is only sent on token creation
    response_code: int
    response_message: str
    token: str

class CategoryQuestionCountPayload(TypedDict):
    total_question_count: int
    total_easy_question_count: int
    total_medium_question_count: int
    total_hard_question_count: int

class CategoryCountPayload(TypedDict):
    category_id: int
    category_question_count: CategoryQuestionCountPayload

class GlobalQuestionCountPayload(TypedDict):
    total_num_of_questions: int
    total_num_of_pending_questions: int
    total_num_of_verified_questions: int
    total_num_of_rejected_questions: int

class GlobalCountPayload(TypedDict):
    overall: GlobalQuestionCountPayload
    categories: Dict[str, GlobalQuestionCountPayload]

class CategoryInfoPayload(TypedDict):
    id: int
    name: str

class CategoryListPayload(TypedDict):
    trivia_categories: List[CategoryInfoPayload]


# Decoded records

class ResponseCode(IntEnum):
    SUCCESS = 0
    NO_RESULTS = 1
    INVALID_PARAMETER = 2
    TOKEN_NOT_FOUND = 3
    TOKEN_EMPTY = 4
    RATE_LIMIT = 5


@dataclass(frozen=True)
class Question:
    """A single trivia question with its answers."""
    category: str
    type: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: Tuple[str, ...]

    @property
    def all_answers(self) -> Tuple[str, ...]:
        """Correct answer followed by the incorrect ones."""
        return (self.correct_answer,) + self.incorrect_answers


@dataclass(frozen=True)
class TriviaResponse:
    """Questions returned for one request, in server order."""
    response_code: ResponseCode
    results: Tuple[Question, ...]

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)


@dataclass(frozen=True)
class CategoryQuestionCount:
    total: int
    easy: int
    medium: int
    hard: int


@dataclass(frozen=True)
class CategoryDetails:
    category_id: int
    question_count: CategoryQuestionCount


@dataclass(frozen=True)
class GlobalQuestionCount:
    total: int
    pending: int
    verified: int
    rejected: int


@dataclass(frozen=True)
class GlobalDetails:
    overall: GlobalQuestionCount
    categories: Dict[int, GlobalQuestionCount]

    def for_category(self, category_id: int) -> Optional[GlobalQuestionCount]:
        return self.categories.get(category_id)


@dataclass(frozen=True)
class CategoryInfo:
    id: int
    name: str
