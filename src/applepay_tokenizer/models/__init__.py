"""Domain models for the Apple Pay tokenizer."""

from applepay_tokenizer.models.exceptions import (
    STRIPE_RESPONSE_KEY,
    ResponseParseError,
    SessionNotConfigured,
    TokenCreationError,
    TokenizerError,
)
from applepay_tokenizer.models.payment import (
    SIMULATED_TRANSACTION_IDENTIFIER,
    BillingContact,
    PaymentAuthorization,
    PaymentMethod,
    PaymentNetwork,
    PaymentToken,
    PersonName,
    PostalAddress,
)
from applepay_tokenizer.models.token import StripeToken

__all__ = [
    "BillingContact",
    "PaymentAuthorization",
    "PaymentMethod",
    "PaymentNetwork",
    "PaymentToken",
    "PersonName",
    "PostalAddress",
    "ResponseParseError",
    "SessionNotConfigured",
    "SIMULATED_TRANSACTION_IDENTIFIER",
    "STRIPE_RESPONSE_KEY",
    "StripeToken",
    "TokenCreationError",
    "TokenizerError",
]
