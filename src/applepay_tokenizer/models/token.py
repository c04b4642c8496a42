"""Stripe token value returned by the tokens endpoint."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


class StripeToken(BaseModel):
    """
    The simplest wrapper around a Stripe payment token.

    Built only from a response carrying all of ``id``, ``livemode`` and
    ``created`` with the right JSON types; anything else fails validation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    token_id: StrictStr = Field(..., alias="id", description="Stripe token id (tok_...)")
    livemode: StrictBool = Field(..., description="False for test mode tokens")
    created: datetime = Field(..., description="Creation time (UTC)")

    @field_validator("created", mode="before")
    @classmethod
    def _created_from_unix_timestamp(cls, value: Any) -> datetime:
        # bool is an int subclass but is never a timestamp
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("created must be a Unix timestamp number")
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            # inf, nan and values outside the platform time_t range
            raise ValueError("created must be a Unix timestamp number") from e

    @classmethod
    def from_response(cls, body: dict[str, Any]) -> "StripeToken":
        """
        Build a token from a decoded tokens endpoint response.

        Raises:
            pydantic.ValidationError: If a required field is missing or mistyped
        """
        return cls.model_validate(body)
