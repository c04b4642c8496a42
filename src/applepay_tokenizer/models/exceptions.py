"""Exceptions raised by the Apple Pay tokenizer."""

from typing import Any

# Metadata key under which TokenCreationError keeps the raw Stripe response
STRIPE_RESPONSE_KEY = "WatchOSStripeErrorKey"


class TokenizerError(Exception):
    """Base exception for recoverable tokenization errors."""

    pass


class ResponseParseError(TokenizerError, ValueError):
    """
    Raised when the Stripe response body is not a JSON object.

    The underlying json.JSONDecodeError, when there is one, is chained as
    __cause__.
    """

    pass


class TokenCreationError(TokenizerError):
    """
    Raised when Stripe answered with JSON that is not a token.

    This is usually Stripe's ``{"error": {...}}`` payload. The decoded body is
    kept in ``metadata[STRIPE_RESPONSE_KEY]`` for inspection.
    """

    def __init__(self, response_body: dict[str, Any], message: str = "Unknown error") -> None:
        super().__init__(message)
        self.metadata: dict[str, Any] = {STRIPE_RESPONSE_KEY: response_body}

    @property
    def response_body(self) -> dict[str, Any]:
        return self.metadata[STRIPE_RESPONSE_KEY]


class SessionNotConfigured(AssertionError):
    """
    Raised when a token is requested before a publishable key was provided.

    This is a programming error, not a runtime condition: it deliberately does
    not inherit from TokenizerError and is never passed to completion callbacks.
    """

    pass
