"""Tests for the TriviaRequest builder and URL helpers."""

import itertools
from urllib.parse import parse_qsl, urlsplit

import pytest

from opentdb.options import Category, Difficulty, Encoding, QuestionType
from opentdb.request import TriviaRequest, category_count_url, token_url


class TestTriviaRequestBuilder:
    """Tests for the TriviaRequest setters and query building."""

    def test_empty_request_has_no_params(self) -> None:
        """Test that a fresh request serializes to nothing."""
        request = TriviaRequest()
        assert request.query_params() == {}
        assert request.query_string() == ""
        assert request.url() == "https://opentdb.com/api.php"

    def test_setters_chain_and_return_same_instance(self) -> None:
        """Test that every setter returns the same builder."""
        request = TriviaRequest()
        result = (
            request.set_amount(5)
            .set_category(Category.COMPUTERS)
            .set_difficulty(Difficulty.EASY)
            .set_type(QuestionType.MULTIPLE)
            .set_encoding(Encoding.BASE64)
        )
        assert result is request
        assert request.query_string() == (
            "amount=5&category=18&difficulty=easy&type=multiple&encode=base64"
        )

    def test_setter_overwrites_previous_value(self) -> None:
        """Test that setting a field twice keeps the last value."""
        request = TriviaRequest().set_difficulty(Difficulty.EASY).set_difficulty(Difficulty.HARD)
        assert request.query_params() == {"difficulty": "hard"}

    def test_any_values_are_omitted(self) -> None:
        """Test that ANY and DEFAULT options are left out of the query."""
        request = (
            TriviaRequest(amount=3)
            .set_category(Category.ANY)
            .set_difficulty(Difficulty.ANY)
            .set_type(QuestionType.ANY)
            .set_encoding(Encoding.DEFAULT)
        )
        assert request.query_params() == {"amount": 3}

    def test_builder_does_not_validate_amount(self) -> None:
        """Test that out-of-range amounts are passed through."""
        request = TriviaRequest().set_amount(500)
        assert request.query_params() == {"amount": 500}

    def test_token_is_included_last(self) -> None:
        """Test that the token follows the other parameters."""
        request = TriviaRequest(amount=1, token="abc123")
        assert request.query_string() == "amount=1&token=abc123"

    def test_effective_encoding_defaults(self) -> None:
        """Test that an unset encoding decodes as DEFAULT."""
        assert TriviaRequest().effective_encoding is Encoding.DEFAULT
        assert TriviaRequest(encoding=Encoding.URL3986).effective_encoding is Encoding.URL3986

    def test_copy_is_independent(self) -> None:
        """Test that mutating a copy leaves the original alone."""
        original = TriviaRequest(amount=2, category=Category.ART)
        clone = original.copy()
        clone.set_amount(7)
        assert original.amount == 2
        assert clone.category is Category.ART

    def test_equality_by_query(self) -> None:
        """Test that requests with the same query compare equal."""
        assert TriviaRequest(amount=1) == TriviaRequest(amount=1, encoding=Encoding.DEFAULT)
        assert TriviaRequest(amount=1) != TriviaRequest(amount=2)

    def test_request_is_unhashable(self) -> None:
        """Test that the mutable builder cannot be hashed."""
        with pytest.raises(TypeError):
            hash(TriviaRequest(amount=1))
        with pytest.raises(TypeError):
            {TriviaRequest()}

    def test_repr_hides_token(self) -> None:
        """Test that repr does not leak the token."""
        assert "secret" not in repr(TriviaRequest(token="secret"))


class TestQueryContainsExactlySetParams:
    """Any combination of set options serializes to exactly those parameters."""

    OPTIONS = {
        "amount": (None, 1, 50),
        "category": (None, Category.ANY, Category.GENERAL_KNOWLEDGE, Category.VEHICLES),
        "difficulty": (None, Difficulty.ANY, Difficulty.MEDIUM),
        "type": (None, QuestionType.ANY, QuestionType.BOOLEAN),
        "encoding": (None, Encoding.DEFAULT, Encoding.URL3986, Encoding.BASE64),
    }

    EXPECTED = {
        Category.GENERAL_KNOWLEDGE: "9",
        Category.VEHICLES: "28",
        Difficulty.MEDIUM: "medium",
        QuestionType.BOOLEAN: "boolean",
        Encoding.URL3986: "url3986",
        Encoding.BASE64: "base64",
    }

    WIRE_NAMES = {"encoding": "encode"}

    def test_all_combinations(self) -> None:
        """Test that each subset of options yields exactly those parameters."""
        keys = list(self.OPTIONS)
        for values in itertools.product(*self.OPTIONS.values()):
            options = dict(zip(keys, values))
            request = TriviaRequest(**options)

            expected = {}
            for key, value in options.items():
                if value is None:
                    continue
                if key == "amount":
                    expected["amount"] = str(value)
                elif value in self.EXPECTED:
                    expected[self.WIRE_NAMES.get(key, key)] = self.EXPECTED[value]

            parsed = parse_qsl(urlsplit(request.url()).query)
            assert dict(parsed) == expected, options
            assert len(parsed) == len(expected)


class TestEndpointUrls:
    """Tests for token and count endpoint URLs."""

    def test_token_request_url(self) -> None:
        """Test the token request URL."""
        assert token_url("request") == "https://opentdb.com/api_token.php?command=request"

    def test_token_reset_url(self) -> None:
        """Test that the reset URL carries the token."""
        assert token_url("reset", "tok") == "https://opentdb.com/api_token.php?command=reset&token=tok"

    def test_category_count_url(self) -> None:
        """Test the category count URL."""
        assert category_count_url(Category.ANIMALS) == "https://opentdb.com/api_count.php?category=27"

    def test_category_count_url_rejects_any(self) -> None:
        """Test that Category.ANY has no count URL."""
        with pytest.raises(ValueError, match="Category.ANY"):
            category_count_url(Category.ANY)
