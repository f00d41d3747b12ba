"""Top-level Paystack client."""

import logging
import os
from typing import Optional

import httpx

from .resources import (
    Miscellaneous,
    Recipient,
    Split,
    Transaction,
    Transfer,
    Verification,
    VirtualAccount,
)
from .webhooks import Webhook

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.paystack.co"
SECRET_KEY_PREFIXES = ("sk_live_", "sk_test_")


class Paystack:
    """Entry point bundling every resource module and the webhook processor.

    Example:
        async with Paystack() as paystack:
            result = await paystack.transaction.verify("ref_123")
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            secret_key: Paystack secret key. Falls back to PAYSTACK_SECRET_KEY env var.
            base_url: API root. Falls back to PAYSTACK_BASE_URL, then the public API.
            timeout: Request timeout in seconds for the client created here.
            http_client: Client to use instead of creating one. It is not
                closed by ``aclose``.

        Raises:
            ValueError: If no secret key is found or it is not a secret key.
        """
        secret_key = secret_key or os.getenv("PAYSTACK_SECRET_KEY")
        if not secret_key:
            raise ValueError(
                "PAYSTACK_SECRET_KEY must be provided either as argument or environment variable"
            )
        if not secret_key.startswith(SECRET_KEY_PREFIXES):
            raise ValueError("Paystack secret key must start with 'sk_live_' or 'sk_test_'")

        self._secret_key = secret_key
        self.base_url = base_url or os.getenv("PAYSTACK_BASE_URL") or DEFAULT_BASE_URL
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

        args = (secret_key, self.base_url, self._http)
        self.transaction = Transaction(*args)
        self.transfer = Transfer(*args)
        self.recipient = Recipient(*args)
        self.split = Split(*args)
        self.virtual_account = VirtualAccount(*args)
        self.verification = Verification(*args)
        self.miscellaneous = Miscellaneous(*args)
        self.webhook = Webhook(secret_key)
        logger.debug(f"Paystack client ready for {self.base_url}")

    def __repr__(self) -> str:
        return f"Paystack(base_url={self.base_url!r})"

    @property
    def is_live(self) -> bool:
        return self._secret_key.startswith("sk_live_")

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "Paystack":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
