"""Webhook processing failures."""

import enum
from typing import Optional, Any, List, Dict


class WebhookErrorReason(str, enum.Enum):
    """Why a delivery was rejected."""
    MISSING_SIGNATURE = "missing_signature"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED_BODY = "malformed_body"
    UNKNOWN_EVENT_KIND = "unknown_event_kind"
    SCHEMA_MISMATCH = "schema_mismatch"


class WebhookError(ValueError):
    """Base class for rejected webhook deliveries.

    ``reason`` tells the failure modes apart without ``isinstance`` checks;
    ``details`` carries field-level diagnostics where there are any.
    """
    reason: WebhookErrorReason

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.details = details or []


class MissingSignatureError(WebhookError):
    reason = WebhookErrorReason.MISSING_SIGNATURE

    def __init__(self):
        super().__init__("Missing 'x-paystack-signature' header.")


class InvalidSignatureError(WebhookError):
    """The signature did not match the body; treat as a possible forgery."""
    reason = WebhookErrorReason.INVALID_SIGNATURE

    def __init__(self):
        super().__init__("Invalid webhook signature.")


class MalformedBodyError(WebhookError):
    reason = WebhookErrorReason.MALFORMED_BODY

    def __init__(self, message: str = "Webhook body is not a JSON object."):
        super().__init__(message)


class UnknownEventKindError(WebhookError):
    """The body names an event kind this SDK does not know.

    Usually Paystack has added a new event; callers may log and ignore it.
    """
    reason = WebhookErrorReason.UNKNOWN_EVENT_KIND

    def __init__(self, kind: Any):
        super().__init__(f"Unknown webhook event kind: {kind!r}")
        self.kind = kind


class SchemaMismatchError(WebhookError):
    reason = WebhookErrorReason.SCHEMA_MISMATCH

    def __init__(self, kind: str, details: List[Dict[str, Any]]):
        super().__init__(f"Failed to parse webhook payload for {kind!r}.", details)
        self.kind = kind
