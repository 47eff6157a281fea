"""
Async OpenTDB API client.

https://opentdb.com/api_config.php
"""

import logging
from typing import List, Optional

import aiohttp

from opentdb.config import (
    BASE_URL,
    CATEGORY_LIST_URL,
    DEFAULT_AMOUNT,
    DEFAULT_TIMEOUT,
    GLOBAL_COUNT_URL,
    USER_AGENT,
)
from opentdb.decoder import (
    check_http_status,
    decode_category_details,
    decode_category_list,
    decode_global_details,
    decode_token_response,
    decode_trivia_response,
)
from opentdb.models import CategoryDetails, CategoryInfo, GlobalDetails, TriviaResponse
from opentdb.options import Category, Difficulty, Encoding, QuestionType
from opentdb.request import TriviaRequest, category_count_url, token_url

logger = logging.getLogger(__name__)


class AsyncTriviaRequest(TriviaRequest):
    """TriviaRequest bound to an OpenTDBClient."""

    def __init__(self, client: "OpenTDBClient", **options) -> None:
        super().__init__(**options)
        self._client = client

    async def send(self) -> TriviaResponse:
        return await self._client.send(self)


class OpenTDBClient:
    """Async HTTP client for the OpenTDB API."""

    def __init__(
        self,
        token: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: int = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
    ):
        """
        Initialize the OpenTDB client.

        Args:
            token: Session token sent with every trivia request
            session: Existing aiohttp session to use; the client never closes it
            timeout: Request timeout in seconds for a session the client creates
            user_agent: User-Agent header for a session the client creates
        """
        self.token = token
        self.timeout = timeout
        self.user_agent = user_agent
        self._session = session
        self._owns_session = session is None

    def set_token(self, token: str) -> None:
        self.token = token

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": self.user_agent},
            )
            self._owns_session = True
        return self._session

    async def _get(self, url: str) -> bytes:
        session = self._get_session()
        logger.debug(f"GET {url}")
        async with session.get(url) as response:
            body = await response.read()
            check_http_status(response.status, body)
            return body

    def trivia(self) -> AsyncTriviaRequest:
        """Start a trivia request with the default amount and this client's token."""
        return AsyncTriviaRequest(self, amount=DEFAULT_AMOUNT, token=self.token)

    async def send(self, request: TriviaRequest) -> TriviaResponse:
        """Send a trivia request and decode the questions."""
        body = await self._get(request.url(BASE_URL))
        response = decode_trivia_response(body, request.effective_encoding)
        logger.info(f"Fetched {len(response)} questions from OpenTDB ({request!r})")
        return response

    async def fetch_questions(
        self,
        amount: int = DEFAULT_AMOUNT,
        category: Optional[Category] = None,
        difficulty: Optional[Difficulty] = None,
        type: Optional[QuestionType] = None,
        encoding: Optional[Encoding] = None,
    ) -> TriviaResponse:
        """
        Fetch questions in one call.

        Args:
            amount: Number of questions to fetch (1-50)
            category: Optional category filter
            difficulty: Optional difficulty filter
            type: Optional question type filter
            encoding: Optional response encoding

        Returns:
            TriviaResponse with decoded questions
        """
        request = self.trivia().set_amount(amount)
        if category is not None:
            request.set_category(category)
        if difficulty is not None:
            request.set_difficulty(difficulty)
        if type is not None:
            request.set_type(type)
        if encoding is not None:
            request.set_encoding(encoding)
        return await request.send()

    async def generate_token(self) -> str:
        """Request a new session token. The client's own token is not changed."""
        token = decode_token_response(await self._get(token_url("request")))
        logger.info("Generated OpenTDB session token")
        return token

    async def reset_token(self) -> str:
        """Reset the client's token, or generate one if none is set."""
        if self.token is None:
            return await self.generate_token()
        token = decode_token_response(await self._get(token_url("reset", self.token)))
        logger.info("Reset OpenTDB session token")
        return token

    async def category_details(self, category: Category) -> CategoryDetails:
        """Question counts for one category. Category.ANY raises ValueError."""
        return decode_category_details(await self._get(category_count_url(category)))

    async def global_details(self) -> GlobalDetails:
        """Overall and per-category question totals."""
        return decode_global_details(await self._get(GLOBAL_COUNT_URL))

    async def categories(self) -> List[CategoryInfo]:
        """List the categories the API currently serves."""
        return decode_category_list(await self._get(CATEGORY_LIST_URL))

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None:
            if not self._session.closed:
                await self._session.close()
            self._session = None

    async def __aenter__(self) -> "OpenTDBClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        token = "<set>" if self.token else None
        return f"OpenTDBClient(token={token})"
