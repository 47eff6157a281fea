"""Custom exceptions for OpenTDB operations."""

from typing import Optional


class OpenTDBError(Exception):
    """Base exception for OpenTDB operations."""
    pass


class HttpError(OpenTDBError):
    """The API answered with a non-200 HTTP status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"HTTP {status}: {body}")
        self.status = status
        self.body = body


class UnsuccessfulRequestError(HttpError):
    """Non-200, non-5xx HTTP status."""
    pass


class InternalServerError(HttpError):
    """5xx HTTP status."""
    pass


class MalformedResponseError(OpenTDBError, ValueError):
    """Body is not valid JSON or is missing required fields."""
    pass


class DecodeError(OpenTDBError, ValueError):
    """An encoded text field could not be decoded."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ResponseCodeError(OpenTDBError):
    """The API envelope carried a non-success response code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"{message} (code: {code})")
        self.code = code


class NoResultsError(ResponseCodeError):
    """Not enough questions match the query."""
    pass


class InvalidParameterError(ResponseCodeError):
    """The parameter combination is not valid."""
    pass


class TokenNotFoundError(ResponseCodeError):
    """The session token does not exist."""
    pass


class TokenEmptyError(ResponseCodeError):
    """The session token has returned every available question."""
    pass


class RateLimitError(ResponseCodeError):
    """Too many requests from this client."""
    pass
