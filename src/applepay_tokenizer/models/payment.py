"""Apple Pay authorization models.

These mirror the structure of the authorization object the wallet hands to the
app after the user approves a payment. The tokenizer only reads them.
"""

from dataclasses import dataclass
from enum import Enum

# Transaction identifier the wallet reports for simulator/test authorizations
SIMULATED_TRANSACTION_IDENTIFIER = "Simulated Identifier"


class PaymentNetwork(str, Enum):
    """Card networks, using the raw values reported by the wallet."""

    VISA = "Visa"
    MASTERCARD = "MasterCard"
    AMEX = "AmEx"
    DISCOVER = "Discover"
    JCB = "JCB"
    CHINA_UNION_PAY = "ChinaUnionPay"
    INTERAC = "Interac"
    PRIVATE_LABEL = "PrivateLabel"
    MAESTRO = "Maestro"
    ELECTRON = "Electron"
    ELO = "Elo"
    MADA = "Mada"
    VPAY = "VPay"
    CARTES_BANCAIRES = "CartesBancaires"
    EFTPOS = "eftpos"
    GIROCARD = "Girocard"


@dataclass(frozen=True)
class PersonName:
    given_name: str | None = None
    family_name: str | None = None


@dataclass(frozen=True)
class PostalAddress:
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class BillingContact:
    name: PersonName | None = None
    postal_address: PostalAddress | None = None


@dataclass(frozen=True)
class PaymentMethod:
    """
    Card descriptor attached to the authorization.

    Attributes:
        display_name: Human readable card name (e.g., "Visa 1234")
        network: Card network; unknown networks may be given as plain strings
    """

    display_name: str | None = None
    network: PaymentNetwork | str | None = None


@dataclass(frozen=True)
class PaymentToken:
    """
    Wallet payment token.

    Attributes:
        payment_data: Encrypted payment blob (UTF-8 JSON produced by the wallet)
        payment_method: Card descriptor
        transaction_identifier: Wallet transaction id, or
            SIMULATED_TRANSACTION_IDENTIFIER for simulator payments
    """

    payment_data: bytes
    payment_method: PaymentMethod
    transaction_identifier: str


@dataclass(frozen=True)
class PaymentAuthorization:
    """Authorized wallet payment, ready to be exchanged for a Stripe token."""

    token: PaymentToken
    billing_contact: BillingContact | None = None
