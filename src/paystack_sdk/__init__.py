# paystack_sdk package
__version__ = "0.1.0"

from .client import Paystack
from .fetcher import ApiResult, Fetcher

from .resources import (
    Miscellaneous,
    Recipient,
    Split,
    Transaction,
    Transfer,
    Verification,
    VirtualAccount,
)

# Webhook exports
from .webhooks import (
    SIGNATURE_HEADER,
    EventKind,
    Webhook,
    WebhookError,
    WebhookErrorReason,
    WebhookEvent,
    classify,
    compute_signature,
    verify_signature,
)
