"""HMAC-SHA512 signing of webhook bodies."""

import hashlib
import hmac
from typing import Union

SIGNATURE_HEADER = "x-paystack-signature"


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def compute_signature(raw_body: Union[str, bytes], secret_key: str) -> str:
    """Lowercase hex HMAC-SHA512 of ``raw_body`` keyed with ``secret_key``."""
    return hmac.new(_as_bytes(secret_key), _as_bytes(raw_body), hashlib.sha512).hexdigest()


def verify_signature(raw_body: Union[str, bytes], signature: str, secret_key: str) -> bool:
    """Check a delivery's signature header against its exact raw body.

    The body must be the bytes received on the wire; re-serialized JSON
    will not match.
    """
    expected = compute_signature(raw_body, secret_key)
    # bytes, since compare_digest rejects non-ASCII str
    return hmac.compare_digest(expected.encode("ascii"), _as_bytes(signature))
