"""Example usage of StripeSession.

Exchanges a simulator Apple Pay authorization for a Stripe test token. Needs
APPLEPAY_TOKENIZER_PUBLISHABLE_KEY set to a pk_test_ key; Stripe rejects the
fake payment blob below, which shows the error path.
"""

import asyncio

import httpx

from applepay_tokenizer import (
    STRIPE_RESPONSE_KEY,
    PaymentAuthorization,
    PaymentMethod,
    PaymentNetwork,
    PaymentToken,
    ResponseParseError,
    StripeSession,
    TokenCreationError,
)
from applepay_tokenizer.config import settings
from applepay_tokenizer.logging_config import configure_logging
from applepay_tokenizer.models import SIMULATED_TRANSACTION_IDENTIFIER


SIMULATED_PAYMENT = PaymentAuthorization(
    token=PaymentToken(
        payment_data=b'{"version":"EC_v1","data":"","signature":"","header":{}}',
        payment_method=PaymentMethod(display_name="Visa 4242", network=PaymentNetwork.VISA),
        transaction_identifier=SIMULATED_TRANSACTION_IDENTIFIER,
    )
)


async def example_create_token(session: StripeSession):
    """Example: await a token directly."""
    print("\n=== Example 1: create_token ===\n")

    try:
        token = await session.create_token(SIMULATED_PAYMENT)
        print(f"✅ Token created: {token.token_id} (livemode={token.livemode})")

    except TokenCreationError as e:
        print(f"❌ Stripe refused the payment: {e.metadata[STRIPE_RESPONSE_KEY]}")

    except ResponseParseError as e:
        print(f"❌ Unexpected response: {e}")

    except httpx.RequestError as e:
        print(f"⚠️  Network error: {e}")


async def example_completion(session: StripeSession):
    """Example: receive the result through a completion callback."""
    print("\n=== Example 2: create_token_with_completion ===\n")

    done = asyncio.Event()

    def completion(token, error):
        if token is not None:
            print(f"✅ Token created: {token.token_id}")
        else:
            print(f"❌ {type(error).__name__}: {error}")
        done.set()

    session.create_token_with_completion(SIMULATED_PAYMENT, completion)
    await done.wait()


async def main():
    configure_logging(settings)

    async with StripeSession.from_settings(settings) as session:
        if not session.is_configured:
            print("Set APPLEPAY_TOKENIZER_PUBLISHABLE_KEY to run the examples")
            return

        await example_create_token(session)
        await example_completion(session)


if __name__ == "__main__":
    asyncio.run(main())
