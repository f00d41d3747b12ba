"""
Minimal webhook receiver. Run with:

    PAYSTACK_SECRET_KEY=sk_test_... uvicorn examples.webhook_receiver:app
"""
import logging

from fastapi import FastAPI, Request, Header, HTTPException
from typing import Optional

from paystack_sdk import Paystack, WebhookError, WebhookErrorReason

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Paystack webhook receiver")
paystack = Paystack()


def record_payment(data):
    logger.info(f"Payment {data.reference} succeeded for {data.amount} {data.currency}")


async def record_failed_transfer(data):
    logger.info(f"Transfer {data.transfer_code} to {data.recipient.name} failed")


paystack.webhook.on("charge.success", record_payment).on("transfer.failed", record_failed_transfer)


@app.post("/webhooks/paystack")
async def paystack_webhook(request: Request, x_paystack_signature: Optional[str] = Header(None)):
    # The signature covers the exact bytes received
    body = await request.body()
    try:
        event = await paystack.webhook.process(body, x_paystack_signature)
    except WebhookError as e:
        if e.reason == WebhookErrorReason.UNKNOWN_EVENT_KIND:
            # Acknowledge so Paystack stops retrying events we do not handle
            return {"accepted": False}
        raise HTTPException(status_code=400, detail=str(e))
    return {"accepted": True, "event": event.event}


@app.on_event("shutdown")
async def close_client():
    await paystack.aclose()
