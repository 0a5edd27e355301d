"""
Stripe payment provider client.
Creates payment intents through the Stripe REST API; the hosted payment
UI is driven by the returned client secret.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Any
import asyncio
import logging

import aiohttp

from app.core.config import settings
from app.core.exceptions import PaymentProviderError, PaymentProviderNotConfigured
from app.core.integrations.http.http_client import HttpClient, HttpClientError

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Convert a currency amount to integer cents, rounding half up."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class StripePaymentClient:
    """
    Stripe API wrapper.
    Payment intents are never retried automatically.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        api_base: Optional[str] = None,
        currency: Optional[str] = None,
        http_client: Optional[HttpClient] = None,
    ):
        """
        Initialize Stripe client.

        Args:
            secret_key: Stripe secret key (defaults to config)
            api_base: Stripe API base URL (defaults to config)
            currency: ISO currency code for intents (defaults to config)
            http_client: Injected HTTP client, mostly for tests
        """
        self.secret_key = secret_key if secret_key is not None else settings.STRIPE_SECRET_KEY
        self.currency = (currency or settings.PAYMENT_CURRENCY).lower()
        self.http_client = http_client or HttpClient(
            base_url=api_base or settings.STRIPE_API_BASE,
            max_retries=1,
        )

    @property
    def configured(self) -> bool:
        return bool(self.secret_key)

    async def create_payment_intent(
        self,
        amount: Decimal,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create a payment intent.

        Args:
            amount: Amount in major currency units
            metadata: Flat key/value pairs attached to the intent

        Returns:
            Dict with "id", "client_secret", "amount" and "currency"

        Raises:
            PaymentProviderNotConfigured: no secret key configured
            PaymentProviderError: Stripe rejected the request or was unreachable
        """
        if not self.configured:
            raise PaymentProviderNotConfigured()

        form: Dict[str, Any] = {
            "amount": str(to_minor_units(amount)),
            "currency": self.currency,
        }
        for key, value in (metadata or {}).items():
            if value is not None:
                form[f"metadata[{key}]"] = str(value)

        try:
            payload = await self.http_client.post(
                "/payment_intents",
                data=form,
                headers={"Authorization": f"Bearer {self.secret_key}"},
            )
        except HttpClientError as e:
            message = "Payment provider rejected the request"
            if isinstance(e.payload, dict):
                message = e.payload.get("error", {}).get("message", message)
            logger.warning(f"Stripe returned {e.status}: {message}")
            raise PaymentProviderError(message, details={"status": e.status}) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise PaymentProviderError("Payment provider is unreachable") from e

        logger.info(
            "Payment intent created",
            extra={"intent_id": payload.get("id"), "amount": form["amount"]},
        )
        return {
            "id": payload.get("id"),
            "client_secret": payload.get("client_secret"),
            "amount": payload.get("amount"),
            "currency": payload.get("currency", self.currency),
        }

    async def close(self) -> None:
        await self.http_client.close()
