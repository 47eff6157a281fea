from typing import Optional, Union
from urllib.parse import quote

QueryValue = Union[str, int]


def concat_url_params(**kwargs: Optional[QueryValue]) -> str:
    """Join keyword arguments into a query string, skipping None values."""
    return "&".join(
        f"{key}={quote(str(value), safe='')}"
        for key, value in kwargs.items()
        if value is not None
    )


def with_query(url: str, query: str) -> str:
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
