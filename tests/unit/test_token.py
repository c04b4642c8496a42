"""Unit tests for the Stripe token model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from applepay_tokenizer.models import StripeToken


class TestStripeTokenFromResponse:
    """Tests for building tokens from decoded responses."""

    def test_valid_response(self) -> None:
        token = StripeToken.from_response({"id": "tok_123", "livemode": False, "created": 1500000000})

        assert token.token_id == "tok_123"
        assert token.livemode is False
        assert token.created == datetime(2017, 7, 14, 2, 40, tzinfo=timezone.utc)

    def test_fractional_timestamp(self) -> None:
        token = StripeToken.from_response({"id": "tok_123", "livemode": True, "created": 1500000000.5})

        assert token.created.microsecond == 500000

    def test_extra_fields_ignored(self) -> None:
        token = StripeToken.from_response({
            "id": "tok_123",
            "object": "token",
            "livemode": True,
            "created": 1500000000,
            "card": {"brand": "Visa", "last4": "4242"},
        })

        assert token.token_id == "tok_123"
        assert token.livemode is True

    @pytest.mark.parametrize("missing", ["id", "livemode", "created"])
    def test_missing_field_rejected(self, missing: str) -> None:
        body = {"id": "tok_123", "livemode": False, "created": 1500000000}
        del body[missing]

        with pytest.raises(ValidationError):
            StripeToken.from_response(body)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("id", 123),
            ("id", None),
            ("livemode", "false"),
            ("livemode", 0),
            ("created", "1500000000"),
            ("created", "2017-07-14T02:40:00Z"),
            ("created", True),
            ("created", None),
            ("created", 1e20),
            ("created", -1e20),
            ("created", float("inf")),
            ("created", float("nan")),
        ],
    )
    def test_mistyped_field_rejected(self, field: str, value: object) -> None:
        body = {"id": "tok_123", "livemode": False, "created": 1500000000}
        body[field] = value

        with pytest.raises(ValidationError):
            StripeToken.from_response(body)

    def test_error_response_rejected(self) -> None:
        body = {"error": {"type": "invalid_request_error", "message": "Invalid API Key provided"}}

        with pytest.raises(ValidationError):
            StripeToken.from_response(body)

    def test_token_is_immutable(self) -> None:
        token = StripeToken.from_response({"id": "tok_123", "livemode": False, "created": 1500000000})

        with pytest.raises(ValidationError):
            token.token_id = "tok_456"
