"""Client library for the Open Trivia Database API.

Provides an async client (aiohttp) and a blocking client (requests) that share
request building and response decoding.
"""

from opentdb.blocking import BlockingClient, BlockingTriviaRequest
from opentdb.client import AsyncTriviaRequest, OpenTDBClient
from opentdb.decoder import decode_trivia_response
from opentdb.exceptions import (
    DecodeError,
    HttpError,
    InternalServerError,
    InvalidParameterError,
    MalformedResponseError,
    NoResultsError,
    OpenTDBError,
    RateLimitError,
    ResponseCodeError,
    TokenEmptyError,
    TokenNotFoundError,
    UnsuccessfulRequestError,
)
from opentdb.models import (
    CategoryDetails,
    CategoryInfo,
    CategoryQuestionCount,
    GlobalDetails,
    GlobalQuestionCount,
    Question,
    ResponseCode,
    TriviaResponse,
)
from opentdb.options import Category, Difficulty, Encoding, QuestionType
from opentdb.request import TriviaRequest

__all__ = [
    "OpenTDBClient",
    "AsyncTriviaRequest",
    "BlockingClient",
    "BlockingTriviaRequest",
    "TriviaRequest",
    "decode_trivia_response",
    "Category",
    "Difficulty",
    "Encoding",
    "QuestionType",
    "Question",
    "TriviaResponse",
    "ResponseCode",
    "CategoryDetails",
    "CategoryQuestionCount",
    "GlobalDetails",
    "GlobalQuestionCount",
    "CategoryInfo",
    "OpenTDBError",
    "HttpError",
    "UnsuccessfulRequestError",
    "InternalServerError",
    "MalformedResponseError",
    "DecodeError",
    "ResponseCodeError",
    "NoResultsError",
    "InvalidParameterError",
    "TokenNotFoundError",
    "TokenEmptyError",
    "RateLimitError",
]
