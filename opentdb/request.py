"""
Request builder for the trivia endpoint.

The builder only stores options. Serialization happens in query_params() and
query_string(); sending lives in the async and blocking client modules.
"""

from typing import Dict, Optional, Union

from opentdb.config import BASE_URL, CATEGORY_COUNT_URL, TOKEN_URL
from opentdb.options import (
    CATEGORY_IDS,
    DIFFICULTY_VALUES,
    ENCODING_VALUES,
    QUESTION_TYPE_VALUES,
    Category,
    Difficulty,
    Encoding,
    QuestionType,
)
from opentdb.utils import concat_url_params, with_query


class TriviaRequest:
    """Mutable set of query options for one trivia call."""

    def __init__(
        self,
        amount: Optional[int] = None,
        category: Optional[Category] = None,
        difficulty: Optional[Difficulty] = None,
        type: Optional[QuestionType] = None,
        encoding: Optional[Encoding] = None,
        token: Optional[str] = None,
    ) -> None:
        self.amount = amount
        self.category = category
        self.difficulty = difficulty
        self.type = type
        self.encoding = encoding
        self.token = token

    def set_amount(self, amount: int) -> "TriviaRequest":
        self.amount = amount
        return self

    def set_category(self, category: Category) -> "TriviaRequest":
        self.category = category
        return self

    def set_difficulty(self, difficulty: Difficulty) -> "TriviaRequest":
        self.difficulty = difficulty
        return self

    def set_type(self, type: QuestionType) -> "TriviaRequest":
        self.type = type
        return self

    def set_encoding(self, encoding: Encoding) -> "TriviaRequest":
        self.encoding = encoding
        return self

    def set_token(self, token: str) -> "TriviaRequest":
        self.token = token
        return self

    @property
    def effective_encoding(self) -> Encoding:
        """Encoding the server will apply to the response text."""
        return self.encoding or Encoding.DEFAULT

    def query_params(self) -> Dict[str, Union[str, int]]:
        """
        Build the query parameters for this request.

        Only options that were set, and that do not mean "any", are included.
        Order is amount, category, difficulty, type, encode, token.
        """
        candidates = {
            "amount": self.amount,
            "category": CATEGORY_IDS[self.category] if self.category else None,
            "difficulty": DIFFICULTY_VALUES[self.difficulty] if self.difficulty else None,
            "type": QUESTION_TYPE_VALUES[self.type] if self.type else None,
            "encode": ENCODING_VALUES[self.encoding] if self.encoding else None,
            "token": self.token,
        }
        return {key: value for key, value in candidates.items() if value is not None}

    def query_string(self) -> str:
        return concat_url_params(**self.query_params())

    def url(self, base_url: str = BASE_URL) -> str:
        return with_query(base_url, self.query_string())

    def copy(self) -> "TriviaRequest":
        return TriviaRequest(
            amount=self.amount,
            category=self.category,
            difficulty=self.difficulty,
            type=self.type,
            encoding=self.encoding,
            token=self.token,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriviaRequest):
            return NotImplemented
        return self.query_params() == other.query_params()

    # Mutable builder, so not usable as a dict key or set member
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        token = "<set>" if self.token else None
        return (
            f"{type(self).__name__}(amount={self.amount!r}, category={self.category}, "
            f"difficulty={self.difficulty}, type={self.type}, encoding={self.encoding}, token={token})"
        )


def token_url(command: str, token: Optional[str] = None) -> str:
    """URL for the session token endpoint ("request" or "reset")."""
    return with_query(TOKEN_URL, concat_url_params(command=command, token=token))


def category_count_url(category: Category) -> str:
    category_id = CATEGORY_IDS[category]
    if category_id is None:
        raise ValueError("Category details need a specific category, not Category.ANY")
    return with_query(CATEGORY_COUNT_URL, concat_url_params(category=category_id))
