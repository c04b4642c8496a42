"""
Form encoding of Apple Pay authorizations for Stripe's tokens endpoint.

The body layout follows what Stripe's mobile SDKs send for ``pk_token``
requests. Stripe matches it byte for byte, so parameter order, escaping
and the simulator transaction id format must not drift.
"""

import uuid
from decimal import Decimal
from urllib.parse import quote

from applepay_tokenizer.models.payment import (
    SIMULATED_TRANSACTION_IDENTIFIER,
    BillingContact,
    PaymentAuthorization,
)

# URL query allowed characters without "+" and "="; quote() always keeps
# ASCII alphanumerics and "_.-~" on top of these.
QUERY_SAFE_CHARACTERS = "!$&'()*,-./:;?@_~"

# Simulated cards carry no card data, so a Visa test number stands in
TEST_CARD_NUMBER = "4242424242424242"
TEST_CURRENCY = "USD"


def percent_encode(value: str) -> str:
    """Percent-encode a parameter value (UTF-8, spaces as %20)."""
    return quote(value, safe=QUERY_SAFE_CHARACTERS)


def billing_params(contact: BillingContact) -> dict[str, str]:
    """
    Collect the ``card[...]`` parameters present on a billing contact.

    The name is sent only when both given and family names are known.
    """
    params: dict[str, str] = {}

    name = contact.name
    if name is not None and name.given_name is not None and name.family_name is not None:
        params["name"] = f"{name.given_name} {name.family_name}"

    address = contact.postal_address
    if address is not None:
        for key, value in (
            ("address_line1", address.street),
            ("address_city", address.city),
            ("address_state", address.state),
            ("address_zip", address.postal_code),
            ("address_country", address.country),
        ):
            if value is not None:
                params[key] = value

    return params


def simulated_transaction_identifier() -> str:
    """
    Build a transaction id for a simulator authorization.

    Format: ``ApplePayStubs~<card number>~<amount in cents>~<currency>~<uuid>``.
    """
    # "~" separates the fields, keep it out of the uuid
    unique_id = str(uuid.uuid4()).upper().replace("~", "")

    # Without the original payment request the amount is unknown
    cents = str(int(Decimal("0").scaleb(2)))

    return "~".join(["ApplePayStubs", TEST_CARD_NUMBER, cents, TEST_CURRENCY, unique_id])


def form_encoded_data(payment: PaymentAuthorization) -> bytes:
    """
    Encode an authorization as an application/x-www-form-urlencoded body.

    Args:
        payment: Authorization received from the wallet

    Returns:
        UTF-8 encoded request body

    Raises:
        UnicodeDecodeError: If the payment blob is not UTF-8 text
    """
    token = payment.token

    payment_string = percent_encode(token.payment_data.decode("utf-8"))
    payload = f"pk_token={payment_string}"

    if payment.billing_contact is not None:
        for key, value in billing_params(payment.billing_contact).items():
            payload += f"&card[{key}]={percent_encode(value)}"

    method = token.payment_method
    if method.display_name is not None:
        payload += f"&pk_token_instrument_name={percent_encode(method.display_name)}"

    if method.network is not None:
        network = getattr(method.network, "value", method.network)
        payload += f"&pk_token_payment_network={percent_encode(network)}"

    transaction_identifier = token.transaction_identifier
    if transaction_identifier == SIMULATED_TRANSACTION_IDENTIFIER:
        transaction_identifier = simulated_transaction_identifier()
    payload += f"&pk_token_transaction_id={transaction_identifier}"

    return payload.encode("utf-8")
