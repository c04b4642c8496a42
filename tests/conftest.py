"""Pytest configuration and shared fixtures for all tests."""

import pytest

from applepay_tokenizer import (
    BillingContact,
    DeviceInfo,
    PaymentAuthorization,
    PaymentMethod,
    PaymentNetwork,
    PaymentToken,
    PersonName,
    PostalAddress,
    StripeSession,
)

# Shape of the blob the wallet produces; content is irrelevant to the encoder
SAMPLE_PAYMENT_DATA = (
    b'{"version":"EC_v1","data":"3+f4oOTwPa6f1UZ6tG+z/ab==",'
    b'"signature":"MIAGCSqGSIb3","header":{"transactionId":"2686f5297f123ec7fd9d31074d43d201953ca75f098890375f13aed2737d92f2"}}'
)


@pytest.fixture
def device() -> DeviceInfo:
    """Fixed device description for deterministic headers."""
    return DeviceInfo(os_version="10.2", model="Apple Watch")


@pytest.fixture
def billing_contact() -> BillingContact:
    """Create a complete billing contact."""
    return BillingContact(
        name=PersonName(given_name="Jane", family_name="Doe"),
        postal_address=PostalAddress(
            street="1 Main St",
            city="Springfield",
            state="IL",
            postal_code="62704",
            country="US",
        ),
    )


@pytest.fixture
def payment(billing_contact: BillingContact) -> PaymentAuthorization:
    """Create an authorization as the wallet would hand it over."""
    return PaymentAuthorization(
        token=PaymentToken(
            payment_data=SAMPLE_PAYMENT_DATA,
            payment_method=PaymentMethod(
                display_name="Visa 4242",
                network=PaymentNetwork.VISA,
            ),
            transaction_identifier="2686F5297F123EC7FD9D31074D43D201953CA75F098890375F13AED2737D92F2",
        ),
        billing_contact=billing_contact,
    )


@pytest.fixture
def session(device: DeviceInfo) -> StripeSession:
    """Create a configured Stripe session for testing."""
    session = StripeSession(device=device)
    session.configure("pk_test_fake_key")
    return session
