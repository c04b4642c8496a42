"""Stripe session for exchanging Apple Pay authorizations for tokens."""

import asyncio
import json
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import ValidationError

from applepay_tokenizer.config import Settings
from applepay_tokenizer.encoding import form_encoded_data
from applepay_tokenizer.logging_config import get_logger
from applepay_tokenizer.models import (
    PaymentAuthorization,
    ResponseParseError,
    SessionNotConfigured,
    StripeToken,
    TokenCreationError,
)
from applepay_tokenizer.user_agent import DeviceInfo, stripe_user_agent_details

logger = get_logger(__name__)

STRIPE_BASE_URL = "https://api.stripe.com/v1"
STRIPE_API_VERSION = "2015-10-12"

TokenCompletion = Callable[[StripeToken | None, Exception | None], Any]


class StripeSession:
    """
    Client for Stripe's /v1/tokens endpoint.

    A session starts unconfigured. configure() must be called with the
    publishable key before any token is requested; requesting one earlier
    raises SessionNotConfigured. Construct the session once at startup and
    share it: every create_token() call is an independent request.
    """

    def __init__(
        self,
        base_url: str = STRIPE_BASE_URL,
        api_version: str = STRIPE_API_VERSION,
        device: DeviceInfo | None = None,
    ):
        """
        Initialize an unconfigured session.

        Args:
            base_url: Stripe API base URL
            api_version: Value for the Stripe-Version header
            device: Device reported in X-Stripe-User-Agent (defaults to the host)
        """
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.device = device
        self.http_client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "StripeSession":
        """Create a session from settings, configured if a key is set."""
        session = cls(base_url=settings.api_base_url, api_version=settings.api_version)
        if settings.publishable_key:
            session.configure(settings.publishable_key)
        return session

    @property
    def is_configured(self) -> bool:
        return self.http_client is not None

    def configure(self, publishable_key: str) -> None:
        """
        Provide the publishable key. Must be called before making any requests.

        Calling it again replaces the session headers on the existing HTTP
        client; the last key wins. Requests already sent keep the headers they
        were built with. Not thread-safe, meant for one-time setup.
        """
        headers = {
            "X-Stripe-User-Agent": stripe_user_agent_details(self.device),
            "Stripe-Version": self.api_version,
            "Authorization": f"Bearer {publishable_key}",
        }

        if self.http_client is None:
            self.http_client = httpx.AsyncClient(headers=headers)
        else:
            self.http_client.headers.update(headers)
            logger.info("stripe_session_reconfigured", base_url=self.base_url)

        logger.info(
            "stripe_session_configured",
            base_url=self.base_url,
            api_version=self.api_version,
            livemode=publishable_key.startswith("pk_live_"),
        )

    def _require_client(self) -> httpx.AsyncClient:
        if self.http_client is None:
            raise SessionNotConfigured(
                "Publishable key should be provided before making a request"
            )
        return self.http_client

    async def create_token(self, payment: PaymentAuthorization) -> StripeToken:
        """
        Convert an Apple Pay authorization into a Stripe token.

        Args:
            payment: Authorization received from the wallet

        Returns:
            StripeToken parsed from Stripe's response

        Raises:
            SessionNotConfigured: configure() was never called (programming error)
            httpx.RequestError: Network failure, passed through unchanged
            ResponseParseError: Response body is not a JSON object
            TokenCreationError: Response is JSON but not a token (e.g. a Stripe error)
        """
        http_client = self._require_client()
        return await self._post_token_request(http_client, form_encoded_data(payment))

    async def _post_token_request(
        self,
        http_client: httpx.AsyncClient,
        post_data: bytes,
    ) -> StripeToken:
        url = f"{self.base_url}/tokens"

        try:
            response = await http_client.post(
                url,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                content=post_data,
            )
        except httpx.RequestError as e:
            logger.error(
                "stripe_token_request_error",
                url=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        # Stripe's status code is not inspected: the body alone decides
        try:
            body = json.loads(response.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(
                "stripe_token_response_not_json",
                status_code=response.status_code,
                error=str(e),
            )
            raise ResponseParseError(f"Stripe response is not valid JSON: {e}") from e

        if not isinstance(body, dict):
            logger.error(
                "stripe_token_response_not_object",
                status_code=response.status_code,
                json_type=type(body).__name__,
            )
            raise ResponseParseError("Stripe response is not a JSON object")

        try:
            token = StripeToken.from_response(body)
        except ValidationError as e:
            logger.error(
                "stripe_token_creation_error",
                status_code=response.status_code,
                stripe_error=body.get("error"),
            )
            raise TokenCreationError(body) from e

        logger.info(
            "stripe_token_created",
            token_id=token.token_id,
            livemode=token.livemode,
        )
        return token

    def create_token_with_completion(
        self,
        payment: PaymentAuthorization,
        completion: TokenCompletion,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> asyncio.Task:
        """
        Callback form of create_token().

        completion(token, None) or completion(None, error) is called exactly
        once, scheduled on ``loop`` (defaults to the running loop), never from
        inside the request task. Must be called from a running event loop.

        Args:
            payment: Authorization received from the wallet
            completion: Receives either the token or the error
            loop: Event loop the completion is delivered on

        Returns:
            Task running the request

        Raises:
            SessionNotConfigured: configure() was never called (programming error)
        """
        http_client = self._require_client()
        post_data = form_encoded_data(payment)
        target_loop = loop or asyncio.get_running_loop()

        async def _run() -> None:
            try:
                token = await self._post_token_request(http_client, post_data)
            except Exception as e:
                target_loop.call_soon_threadsafe(completion, None, e)
            else:
                target_loop.call_soon_threadsafe(completion, token, None)

        return asyncio.get_running_loop().create_task(_run())

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        if self.http_client is not None:
            await self.http_client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
