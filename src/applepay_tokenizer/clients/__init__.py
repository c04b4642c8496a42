"""HTTP clients for the Stripe API."""

from applepay_tokenizer.clients.stripe_session import (
    STRIPE_API_VERSION,
    STRIPE_BASE_URL,
    StripeSession,
    TokenCompletion,
)

__all__ = [
    "STRIPE_API_VERSION",
    "STRIPE_BASE_URL",
    "StripeSession",
    "TokenCompletion",
]
