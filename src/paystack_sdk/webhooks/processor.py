"""Verify-classify-dispatch pipeline for a single webhook delivery."""

import logging
from typing import Optional, Union

from .classifier import classify
from .errors import InvalidSignatureError, MissingSignatureError, WebhookError
from .events import EventKind, WebhookEvent
from .registry import HandlerRegistry, WebhookHandler
from .signature import verify_signature

logger = logging.getLogger(__name__)


class Webhook:
    """Verifies, classifies and dispatches Paystack webhook deliveries.

    Example:
        webhook = Webhook(secret_key)
        webhook.on("charge.success", record_payment)
        event = await webhook.process(raw_body, headers.get(SIGNATURE_HEADER))
    """

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("A secret key is required to verify webhooks")
        self._secret_key = secret_key
        self.handlers = HandlerRegistry()

    def __repr__(self) -> str:
        return f"Webhook(handlers={len(self.handlers)})"

    def on(self, kind: Union[EventKind, str], handler: WebhookHandler) -> "Webhook":
        """Register ``handler`` for ``kind``, replacing any earlier one.

        The handler receives the event's validated ``data`` and may be a plain
        function or a coroutine function.

        Returns:
            This webhook, so registrations can be chained.
        """
        self.handlers.on(kind, handler)
        return self

    def off(self, kind: Union[EventKind, str]) -> "Webhook":
        self.handlers.off(kind)
        return self

    async def process(self, raw_body: Union[str, bytes], signature: Optional[str]) -> WebhookEvent:
        """Verify, parse and dispatch a single delivery.

        Args:
            raw_body: Request body exactly as received.
            signature: Value of the ``x-paystack-signature`` header.

        Returns:
            The validated event, whether or not a handler was registered.

        Raises:
            WebhookError: The delivery was rejected; ``reason`` says why.
            Exception: Anything the handler raises is passed through.
        """
        try:
            if not signature:
                raise MissingSignatureError()
            if not verify_signature(raw_body, signature, self._secret_key):
                raise InvalidSignatureError()
            logger.debug("Webhook signature verified")
            event = classify(raw_body)
        except WebhookError as e:
            logger.warning(f"Rejected webhook delivery: {e.reason.value}")
            raise

        await self.handlers.dispatch(event)
        return event
