"""
options.py
Query options accepted by the trivia endpoint and their wire encodings.

https://opentdb.com/api_config.php
"""

from enum import Enum
from typing import Dict, Optional


class Category(Enum):
    ANY = "any"
    GENERAL_KNOWLEDGE = "general_knowledge"
    BOOKS = "books"
    FILM = "film"
    MUSIC = "music"
    MUSICALS_AND_THEATRES = "musicals_and_theatres"
    TELEVISION = "television"
    VIDEO_GAMES = "video_games"
    BOARD_GAMES = "board_games"
    SCIENCE_AND_NATURE = "science_and_nature"
    COMPUTERS = "computers"
    MATHEMATICS = "mathematics"
    MYTHOLOGY = "mythology"
    SPORTS = "sports"
    GEOGRAPHY = "geography"
    HISTORY = "history"
    POLITICS = "politics"
    ART = "art"
    CELEBRITIES = "celebrities"
    ANIMALS = "animals"
    VEHICLES = "vehicles"
    COMICS = "comics"
    GADGETS = "gadgets"
    ANIME_AND_MANGA = "anime_and_manga"
    CARTOON_AND_ANIMATIONS = "cartoon_and_animations"


class Difficulty(Enum):
    ANY = "any"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionType(Enum):
    ANY = "any"
    MULTIPLE = "multiple"
    BOOLEAN = "boolean"


class Encoding(Enum):
    DEFAULT = "default"  # HTML entities
    URL3986 = "url3986"
    BASE64 = "base64"


# Wire values. None means the parameter is left out of the query.
CATEGORY_IDS: Dict[Category, Optional[int]] = {
    Category.ANY: None,
    Category.GENERAL_KNOWLEDGE: 9,
    Category.BOOKS: 10,
    Category.FILM: 11,
    Category.MUSIC: 12,
    Category.MUSICALS_AND_THEATRES: 13,
    Category.TELEVISION: 14,
    Category.VIDEO_GAMES: 15,
    Category.BOARD_GAMES: 16,
    Category.SCIENCE_AND_NATURE: 17,
    Category.COMPUTERS: 18,
    Category.MATHEMATICS: 19,
    Category.MYTHOLOGY: 20,
    Category.SPORTS: 21,
    Category.GEOGRAPHY: 22,
    Category.HISTORY: 23,
    Category.POLITICS: 24,
    Category.ART: 25,
    Category.CELEBRITIES: 26,
    Category.ANIMALS: 27,
    Category.VEHICLES: 28,
    Category.COMICS: 29,
    Category.GADGETS: 30,
    Category.ANIME_AND_MANGA: 31,
    Category.CARTOON_AND_ANIMATIONS: 32,
}

DIFFICULTY_VALUES: Dict[Difficulty, Optional[str]] = {
    Difficulty.ANY: None,
    Difficulty.EASY: "easy",
    Difficulty.MEDIUM: "medium",
    Difficulty.HARD: "hard",
}

QUESTION_TYPE_VALUES: Dict[QuestionType, Optional[str]] = {
    QuestionType.ANY: None,
    QuestionType.MULTIPLE: "multiple",
    QuestionType.BOOLEAN: "boolean",
}

ENCODING_VALUES: Dict[Encoding, Optional[str]] = {
    Encoding.DEFAULT: None,
    Encoding.URL3986: "url3986",
    Encoding.BASE64: "base64",
}

_CATEGORIES_BY_ID: Dict[int, Category] = {
    category_id: category
    for category, category_id in CATEGORY_IDS.items()
    if category_id is not None
}


def category_from_id(category_id: int) -> Category:
    """Look up a Category by its numeric API id.

    Raises:
        ValueError: If the id is not a known category
    """
    try:
        return _CATEGORIES_BY_ID[category_id]
    except KeyError:
        raise ValueError(f"Unknown category id: {category_id}") from None
