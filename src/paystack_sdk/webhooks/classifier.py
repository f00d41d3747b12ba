"""Turns a verified raw body into a typed webhook event."""

import json
import logging
from typing import Union

from pydantic import ValidationError

from .errors import MalformedBodyError, SchemaMismatchError, UnknownEventKindError
from .events import EVENT_MODELS, WebhookEvent

logger = logging.getLogger(__name__)


def classify(raw_body: Union[str, bytes]) -> WebhookEvent:
    """Parse ``raw_body`` and validate it against its own event kind only.

    Raises:
        MalformedBodyError: body is not JSON, not UTF-8, or not an object.
        UnknownEventKindError: ``event`` is missing, not a string, or unknown.
        SchemaMismatchError: the payload does not fit its kind's shape.
    """
    try:
        payload = json.loads(raw_body)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedBodyError(f"Webhook body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedBodyError()

    kind = payload.get("event")
    model = EVENT_MODELS.get(kind) if isinstance(kind, str) else None
    if model is None:
        raise UnknownEventKindError(kind)

    # strict JSON mode: ISO strings still parse, numeric strings and unix timestamps do not
    try:
        event = model.model_validate_json(raw_body, strict=True)
    except ValidationError as e:
        details = e.errors(include_url=False)
        logger.error(f"Webhook payload for {kind} failed validation: {details}")
        raise SchemaMismatchError(kind, details) from e

    logger.debug(f"Classified webhook event {kind}")
    return event
