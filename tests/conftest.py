import base64
import json
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock
from types import SimpleNamespace

import pytest


@pytest.fixture
def plain_questions() -> List[Dict[str, Any]]:
    return [
        {
            "category": "Science: Computers",
            "type": "multiple",
            "difficulty": "medium",
            "question": "What does \"HTTP\" stand for?",
            "correct_answer": "HyperText Transfer Protocol",
            "incorrect_answers": [
                "High Transfer Text Protocol",
                "HyperText Transmission Process",
                "Hyper Tool Transfer Protocol",
            ],
        },
        {
            "category": "Geography",
            "type": "boolean",
            "difficulty": "easy",
            "question": "Zürich is the capital of Switzerland.",
            "correct_answer": "False",
            "incorrect_answers": ["True"],
        },
        {
            "category": "Entertainment: Japanese Anime & Manga",
            "type": "multiple",
            "difficulty": "hard",
            "question": "Which studio produced “Spirited Away”?",
            "correct_answer": "Studio Ghibli",
            "incorrect_answers": ["Madhouse", "Gainax", "Sunrise"],
        },
    ]


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def encode_question(question: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: [b64(v) for v in value] if isinstance(value, list) else b64(value)
        for key, value in question.items()
    }


def trivia_body(results: List[Dict[str, Any]], response_code: int = 0) -> bytes:
    return json.dumps({"response_code": response_code, "results": results}).encode("utf-8")


def fake_aiohttp_session(body: bytes, status: int = 200) -> MagicMock:
    """aiohttp.ClientSession stand-in whose get() yields a canned response."""
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)
    session = MagicMock()
    session.closed = False
    session.get.return_value.__aenter__.return_value = response
    session.get.return_value.__aexit__.return_value = False
    return session


def fake_requests_session(body: bytes, status: int = 200) -> MagicMock:
    """requests.Session stand-in whose get() returns a canned response."""
    session = MagicMock()
    session.get.return_value = SimpleNamespace(status_code=status, content=body)
    return session
