"""
Response decoding shared by the async and blocking clients.

Every function takes the raw HTTP body and returns typed records, raising a
subclass of OpenTDBError when the body cannot be turned into one.
"""

import base64
import html
import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Type, Union, cast
from urllib.parse import unquote

from opentdb.exceptions import (
    DecodeError,
    InternalServerError,
    InvalidParameterError,
    MalformedResponseError,
    NoResultsError,
    RateLimitError,
    ResponseCodeError,
    TokenEmptyError,
    TokenNotFoundError,
    UnsuccessfulRequestError,
)
from opentdb.models import (
    CategoryCountPayload,
    CategoryDetails,
    CategoryInfo,
    CategoryInfoPayload,
    CategoryListPayload,
    CategoryQuestionCount,
    CategoryQuestionCountPayload,
    GlobalDetails,
    GlobalCountPayload,
    GlobalQuestionCount,
    GlobalQuestionCountPayload,
    Question,
    QuestionPayload,
    ResponseCode,
    TokenPayload,
    TriviaPayload,
    TriviaResponse,
)
from opentdb.options import Encoding

logger = logging.getLogger(__name__)

Body = Union[str, bytes]

RESPONSE_CODE_ERRORS: Dict[ResponseCode, Type[ResponseCodeError]] = {
    ResponseCode.NO_RESULTS: NoResultsError,
    ResponseCode.INVALID_PARAMETER: InvalidParameterError,
    ResponseCode.TOKEN_NOT_FOUND: TokenNotFoundError,
    ResponseCode.TOKEN_EMPTY: TokenEmptyError,
    ResponseCode.RATE_LIMIT: RateLimitError,
}

RESPONSE_CODE_MESSAGES: Dict[ResponseCode, str] = {
    ResponseCode.NO_RESULTS: "No results - not enough questions available",
    ResponseCode.INVALID_PARAMETER: "Invalid parameter - check category/difficulty/type/amount",
    ResponseCode.TOKEN_NOT_FOUND: "Token not found",
    ResponseCode.TOKEN_EMPTY: "Token empty - all questions exhausted",
    ResponseCode.RATE_LIMIT: "Rate limit exceeded",
}

TEXT_FIELDS = ("category", "type", "difficulty", "question", "correct_answer")


def _decode_base64(value: str) -> str:
    return base64.b64decode(value, validate=True).decode("utf-8")


def _decode_url3986(value: str) -> str:
    return unquote(value, errors="strict")


def _decode_html(value: str) -> str:
    return html.unescape(value)


TEXT_DECODERS: Dict[Encoding, Callable[[str], str]] = {
    Encoding.DEFAULT: _decode_html,
    Encoding.URL3986: _decode_url3986,
    Encoding.BASE64: _decode_base64,
}


def check_http_status(status: int, body: Body) -> None:
    """Raise an HttpError subclass for anything but HTTP 200."""
    if status == 200:
        return
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    logger.error(f"OpenTDB API returned status {status}")
    if status >= 500:
        raise InternalServerError(status, body)
    raise UnsuccessfulRequestError(status, body)


def parse_json(body: Body) -> Any:
    """Parse a response body, raising MalformedResponseError on bad JSON."""
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Failed to parse OpenTDB response: {e}")
        raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e


def _require_dict(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def read_response_code(data: Mapping[str, Any]) -> ResponseCode:
    """Extract the envelope's response code as a ResponseCode."""
    raw = data.get("response_code")
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise MalformedResponseError(f"Missing or non-integer response_code: {raw!r}")
    try:
        return ResponseCode(raw)
    except ValueError:
        raise MalformedResponseError(f"Unknown response_code: {raw}") from None


def check_response_code(code: ResponseCode) -> None:
    """Raise the typed error for a non-success response code."""
    if code is ResponseCode.SUCCESS:
        return
    message = RESPONSE_CODE_MESSAGES[code]
    logger.error(f"OpenTDB API error: {message} (code: {int(code)})")
    raise RESPONSE_CODE_ERRORS[code](int(code), message)


def decode_text(value: Any, encoding: Encoding, field: str) -> str:
    """Decode one text field according to the response encoding."""
    if not isinstance(value, str):
        raise MalformedResponseError(f"Field {field!r} is not a string: {value!r}")
    try:
        return TEXT_DECODERS[encoding](value)
    except ValueError as e:
        # binascii.Error, UnicodeDecodeError and non-ASCII base64 input
        raise DecodeError(f"Could not decode {encoding.value} field {field!r}: {e}", field=field) from e


def decode_question(item: Any, encoding: Encoding) -> Question:
    if not isinstance(item, dict):
        raise MalformedResponseError(f"Question record is not an object: {item!r}")
    record = cast(QuestionPayload, item)
    try:
        fields = {name: decode_text(record[name], encoding, name) for name in TEXT_FIELDS}  # type: ignore[literal-required]
        incorrect = record["incorrect_answers"]
    except KeyError as e:
        raise MalformedResponseError(f"Question record missing field {e}") from e
    if not isinstance(incorrect, list):
        raise MalformedResponseError("Field 'incorrect_answers' is not a list")
    return Question(
        incorrect_answers=tuple(
            decode_text(answer, encoding, "incorrect_answers") for answer in incorrect
        ),
        **fields,
    )


def decode_trivia_response(body: Body, encoding: Encoding = Encoding.DEFAULT) -> TriviaResponse:
    """
    Decode a trivia endpoint body into a TriviaResponse.

    Args:
        body: Raw JSON body
        encoding: Encoding requested with the `encode` parameter

    Returns:
        TriviaResponse holding the questions in server order

    Raises:
        MalformedResponseError: Body is not a valid trivia envelope
        ResponseCodeError: Envelope carries a non-success response code
        DecodeError: Any text field fails to decode; no partial result is returned
    """
    data = cast(TriviaPayload, _require_dict(parse_json(body)))
    code = read_response_code(data)
    check_response_code(code)

    results = data.get("results")
    if not isinstance(results, list):
        raise MalformedResponseError("Field 'results' is missing or not a list")

    try:
        questions = tuple(decode_question(item, encoding) for item in results)
    except DecodeError as e:
        logger.error(f"Failed to decode OpenTDB question text: {e}")
        raise

    logger.debug(f"Decoded {len(questions)} questions ({encoding.value} encoding)")
    return TriviaResponse(response_code=code, results=questions)


def decode_token_response(body: Body) -> str:
    """Decode a token request/reset body, returning the token string."""
    data = cast(TokenPayload, _require_dict(parse_json(body)))
    check_response_code(read_response_code(data))
    token = data.get("token")
    if not isinstance(token, str) or not token:
        raise MalformedResponseError("Token response is missing 'token'")
    return token


def _read_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponseError(f"Field {key!r} is missing or not an integer")
    return value


def decode_category_details(body: Body) -> CategoryDetails:
    data = cast(CategoryCountPayload, _require_dict(parse_json(body)))
    raw_counts = data.get("category_question_count")
    if not isinstance(raw_counts, dict):
        raise MalformedResponseError("Field 'category_question_count' is missing")
    counts = cast(CategoryQuestionCountPayload, raw_counts)
    return CategoryDetails(
        category_id=_read_int(data, "category_id"),
        question_count=CategoryQuestionCount(
            total=_read_int(counts, "total_question_count"),
            easy=_read_int(counts, "total_easy_question_count"),
            medium=_read_int(counts, "total_medium_question_count"),
            hard=_read_int(counts, "total_hard_question_count"),
        ),
    )


def _global_count(data: Any) -> GlobalQuestionCount:
    counts = cast(GlobalQuestionCountPayload, _require_dict(data))
    return GlobalQuestionCount(
        total=_read_int(counts, "total_num_of_questions"),
        pending=_read_int(counts, "total_num_of_pending_questions"),
        verified=_read_int(counts, "total_num_of_verified_questions"),
        rejected=_read_int(counts, "total_num_of_rejected_questions"),
    )


def decode_global_details(body: Body) -> GlobalDetails:
    data = cast(GlobalCountPayload, _require_dict(parse_json(body)))
    categories = data.get("categories")
    if not isinstance(categories, dict):
        raise MalformedResponseError("Field 'categories' is missing")
    per_category = {}
    for key, value in categories.items():
        if not (isinstance(key, str) and key.isdecimal()):
            raise MalformedResponseError(f"Non-numeric category id in global counts: {key!r}")
        per_category[int(key)] = _global_count(value)
    return GlobalDetails(overall=_global_count(data.get("overall")), categories=per_category)


def decode_category_list(body: Body) -> List[CategoryInfo]:
    data = cast(CategoryListPayload, _require_dict(parse_json(body)))
    items = data.get("trivia_categories")
    if not isinstance(items, list):
        raise MalformedResponseError("Field 'trivia_categories' is missing")
    categories = []
    for item in items:
        entry = cast(CategoryInfoPayload, _require_dict(item))
        name = entry.get("name")
        if not isinstance(name, str):
            raise MalformedResponseError("Category entry is missing 'name'")
        categories.append(CategoryInfo(id=_read_int(entry, "id"), name=name))
    return categories
