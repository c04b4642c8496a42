"""Exchange Apple Pay authorizations for Stripe tokens."""

from applepay_tokenizer.clients import StripeSession
from applepay_tokenizer.encoding import form_encoded_data
from applepay_tokenizer.models import (
    STRIPE_RESPONSE_KEY,
    BillingContact,
    PaymentAuthorization,
    PaymentMethod,
    PaymentNetwork,
    PaymentToken,
    PersonName,
    PostalAddress,
    ResponseParseError,
    SessionNotConfigured,
    StripeToken,
    TokenCreationError,
    TokenizerError,
)
from applepay_tokenizer.user_agent import DeviceInfo

__all__ = [
    "BillingContact",
    "DeviceInfo",
    "PaymentAuthorization",
    "PaymentMethod",
    "PaymentNetwork",
    "PaymentToken",
    "PersonName",
    "PostalAddress",
    "ResponseParseError",
    "SessionNotConfigured",
    "STRIPE_RESPONSE_KEY",
    "StripeSession",
    "StripeToken",
    "TokenCreationError",
    "TokenizerError",
    "form_encoded_data",
]
