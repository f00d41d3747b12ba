"""Inbound webhook processing."""

from .classifier import classify
from .errors import (
    InvalidSignatureError,
    MalformedBodyError,
    MissingSignatureError,
    SchemaMismatchError,
    UnknownEventKindError,
    WebhookError,
    WebhookErrorReason,
)
from .events import EVENT_MODELS, EventKind, WebhookEvent, event_model
from .processor import Webhook
from .registry import HandlerRegistry, WebhookHandler
from .signature import SIGNATURE_HEADER, compute_signature, verify_signature

__all__ = [
    "Webhook",
    "HandlerRegistry",
    "WebhookHandler",
    "classify",
    "EventKind",
    "WebhookEvent",
    "EVENT_MODELS",
    "event_model",
    "SIGNATURE_HEADER",
    "compute_signature",
    "verify_signature",
    "WebhookError",
    "WebhookErrorReason",
    "MissingSignatureError",
    "InvalidSignatureError",
    "MalformedBodyError",
    "UnknownEventKindError",
    "SchemaMismatchError",
]
