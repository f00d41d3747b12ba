"""Shared test fixtures and configuration."""

import copy
import json
import os
import pytest
from typing import Dict, Any, Callable, Tuple, Union

from paystack_sdk.webhooks import compute_signature

# Keep the developer's real key out of the test run
os.environ.pop("PAYSTACK_SECRET_KEY", None)
os.environ.pop("PAYSTACK_BASE_URL", None)

TEST_SECRET_KEY = "sk_test_0123456789abcdef0123456789abcdef"

CHARGE_SUCCESS_PAYLOAD: Dict[str, Any] = {
    "event": "charge.success",
    "data": {
        "id": 316712345,
        "domain": "test",
        "status": "success",
        "reference": "test-reference-123",
        "amount": 50000,
        "message": None,
        "gateway_response": "Successful",
        "paid_at": "2024-01-01T12:00:00.000Z",
        "created_at": "2024-01-01T11:59:50.000Z",
        "channel": "card",
        "currency": "NGN",
        "ip_address": "127.0.0.1",
        "metadata": {"cart_id": 1},
        "log": {
            "time_spent": 10,
            "attempts": 1,
            "authentication": "pin",
            "errors": 0,
            "success": True,
            "mobile": False,
            "input": [],
            "history": [],
        },
        "fees": 750,
        "fees_split": None,
        "authorization": {
            "authorization_code": "AUTH_123456789",
            "bin": "408408",
            "last4": "4081",
            "exp_month": "12",
            "exp_year": "2030",
            "channel": "card",
            "card_type": "visa",
            "bank": "Test Bank",
            "country_code": "NG",
            "brand": "visa",
            "account_name": None,
        },
        "customer": {
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@example.com",
            "customer_code": "CUS_123456789",
            "phone": None,
            "metadata": None,
            "risk_action": "default",
        },
        "order_id": None,
        "requested_amount": 50000,
        "pos_transaction_data": None,
    },
}

_TRANSFER_RECIPIENT: Dict[str, Any] = {
    "active": True,
    "currency": "NGN",
    "description": "Test recipient",
    "domain": "test",
    "email": "recipient@example.com",
    "id": 22,
    "integration": 100073,
    "metadata": None,
    "name": "John Doe",
    "recipient_code": "RCP_abcdef123456",
    "type": "nuban",
    "is_deleted": False,
    "created_at": "2024-01-01T00:00:00.000Z",
    "updated_at": "2024-01-01T00:00:00.000Z",
    "details": {
        "account_number": "0000000000",
        "account_name": "John Doe",
        "bank_code": "058",
        "bank_name": "Guaranty Trust Bank",
    },
}

_TRANSFER_DATA: Dict[str, Any] = {
    "amount": 50000,
    "currency": "NGN",
    "domain": "test",
    "failures": None,
    "id": 1,
    "integration": {"id": 100073, "is_live": False, "business_name": "Acme Corp"},
    "reason": "Test transfer",
    "reference": "TRF_ref_001",
    "source": "balance",
    "source_details": None,
    "titan_code": None,
    "transfer_code": "TRF_abc123def456",
    "transferred_at": None,
    "session": {"provider": None, "id": None},
}

TRANSFER_SUCCESS_PAYLOAD: Dict[str, Any] = {
    "event": "transfer.success",
    "data": {
        **_TRANSFER_DATA,
        "status": "success",
        "transferred_at": "2024-01-01T12:05:00.000Z",
        "created_at": "2024-01-01T12:00:00.000Z",
        "updated_at": "2024-01-01T12:05:00.000Z",
        "recipient": _TRANSFER_RECIPIENT,
    },
}


def _unsettled_transfer(kind: str, status: str) -> Dict[str, Any]:
    # Real failed/reversed deliveries omit the timestamps and null the description
    recipient = {k: v for k, v in _TRANSFER_RECIPIENT.items() if k not in ("created_at", "updated_at")}
    recipient["description"] = None
    recipient["details"] = {
        "account_number": "0000000000",
        "account_name": None,
        "bank_code": "058",
        "bank_name": "Guaranty Trust Bank",
        "authorization_code": None,
    }
    return {"event": kind, "data": {**_TRANSFER_DATA, "status": status, "recipient": recipient}}


TRANSFER_FAILED_PAYLOAD = _unsettled_transfer("transfer.failed", "failed")
TRANSFER_REVERSED_PAYLOAD = _unsettled_transfer("transfer.reversed", "reversed")

# Shapes reused across the sample deliveries below, modelled on Paystack's documented samples
_AUTHORIZATION_CORE: Dict[str, Any] = {
    "authorization_code": "AUTH_ftxf2hgw7y",
    "bin": "408408",
    "last4": "4081",
    "exp_month": "12",
    "exp_year": "2030",
    "channel": "card",
    "card_type": "visa",
    "bank": "TEST BANK",
    "country_code": "NG",
    "brand": "visa",
    "account_name": None,
}
_AUTHORIZATION: Dict[str, Any] = {
    **_AUTHORIZATION_CORE,
    "reusable": True,
    "signature": "SIG_iLQX2nE4rSZKqTqqJX5y",
}
_CUSTOMER_PROFILE: Dict[str, Any] = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "phone": "+2348000000000",
    "metadata": None,
    "customer_code": "CUS_xnxdt6s1zg1f4nx",
    "risk_action": "default",
}
_CUSTOMER_BASE: Dict[str, Any] = {**_CUSTOMER_PROFILE, "id": 46}
_CUSTOMER: Dict[str, Any] = {**_CUSTOMER_BASE, "international_format_phone": "+2348000000000"}
_PLAN: Dict[str, Any] = {
    "id": 22637,
    "name": "Premium",
    "plan_code": "PLN_8s3kdn1oy0g23b7",
    "interval": "monthly",
    "description": None,
    "amount": 50000,
    "send_invoices": True,
    "send_sms": True,
    "currency": "NGN",
}
_LOG: Dict[str, Any] = {
    "start_time": 1704110390,
    "time_spent": 10,
    "attempts": 1,
    "errors": 0,
    "success": True,
    "mobile": False,
    "input": [],
    "history": [{"type": "action", "message": "Attempted to pay with card", "time": 9}],
}
_SUBACCOUNT: Dict[str, Any] = {
    "id": 37614,
    "subaccount_code": "ACCT_xwcv1jwnhtbv6ha",
    "business_name": "Cheese Sticks",
    "description": "Cheese Sticks",
    "primary_contact_name": None,
    "primary_contact_email": None,
    "primary_contact_phone": None,
    "metadata": None,
    "settlement_bank": "Guaranty Trust Bank",
    "currency": "NGN",
    "account_number": "0123456789",
}

_DISPUTE_DATA: Dict[str, Any] = {
    "id": 358950,
    "refund_amount": 5000,
    "currency": "NGN",
    "status": "awaiting-merchant-feedback",
    "resolution": None,
    "domain": "live",
    "transaction": {
        "id": 896467688,
        "domain": "live",
        "status": "success",
        "reference": "eu6ubfcqg9",
        "amount": 5000,
        "message": None,
        "gateway_response": "Approved",
        "paid_at": "2024-01-01T12:00:00.000Z",
        "created_at": "2024-01-01T11:59:50.000Z",
        "channel": "card",
        "currency": "NGN",
        "ip_address": "102.89.23.64",
        "metadata": "",
        "log": _LOG,
        "fees": 75,
        "fees_split": None,
        "authorization": _AUTHORIZATION,
        "customer": {"international_format_phone": None},
        "plan": _PLAN,
        "subaccount": _SUBACCOUNT,
        "split": {},
        "order_id": None,
        "paidAt": "2024-01-01T12:00:00.000Z",
        "requested_amount": 5000,
        "pos_transaction_data": None,
    },
    "transaction_reference": None,
    "category": "chargeback",
    "customer": _CUSTOMER,
    "bin": "408408",
    "last4": "4081",
    "dueAt": "2024-01-03T12:00:00.000Z",
    "resolvedAt": None,
    "evidence": None,
    "attachments": None,
    "note": None,
    "history": [
        {"status": "pending", "by": "support@example.com", "created_at": "2024-01-02T09:00:00.000Z"},
    ],
    "messages": [
        {"sender": "support@example.com", "body": "Please provide proof of delivery", "created_at": "2024-01-02T09:00:00.000Z"},
    ],
    "created_at": "2024-01-02T09:00:00.000Z",
    "updated_at": "2024-01-02T09:00:00.000Z",
}

_INVOICE_DATA: Dict[str, Any] = {
    "domain": "test",
    "invoice_code": "INV_thy2vkmirn2urwv",
    "amount": 50000,
    "period_start": "2024-01-01T00:00:00.000Z",
    "period_end": "2024-01-31T23:59:59.000Z",
    "status": "success",
    "paid": True,
    "paid_at": "2024-01-01T00:05:00.000Z",
    "description": None,
    "authorization": _AUTHORIZATION,
    "subscription": {
        "status": "active",
        "subscription_code": "SUB_8bgpmrgh6qwcnp6",
        "email_token": "d7gofp6yppn3qz7",
        "amount": 50000,
        "cron_expression": "0 0 1 * *",
        "next_payment_date": "2024-02-01T00:00:00.000Z",
        "open_invoice": None,
    },
    "customer": _CUSTOMER_BASE,
}
_INVOICE_TRANSACTION: Dict[str, Any] = {
    "reference": "9a2c7f60-04c1-4a8c-9a5e-0b3c7f1d2e41",
    "status": "success",
    "amount": 50000,
    "currency": "NGN",
}

_PAYMENT_REQUEST_DATA: Dict[str, Any] = {
    "id": 1089700,
    "domain": "test",
    "amount": 10000,
    "currency": "NGN",
    "due_date": None,
    "has_invoice": False,
    "invoice_number": None,
    "description": "Pay up",
    "pdf_url": "https://files.paystack.co/invoices/PRQ_y0paeo93jh99mho.pdf",
    "line_items": [],
    "tax": [],
    "request_code": "PRQ_y0paeo93jh99mho",
    "status": "pending",
    "paid": False,
    "paid_at": None,
    "metadata": None,
    "notifications": [{"sent_at": "2024-01-01T10:00:00.000Z", "channel": "email"}],
    "offline_reference": "3365451089700",
    "customer": 7454223,
    "created_at": "2024-01-01T10:00:00.000Z",
}


def _refund(status: str, refund_reference: Any) -> Dict[str, Any]:
    return {
        "status": status,
        "transaction_reference": "1641367234",
        "refund_reference": refund_reference,
        "amount": 10000,
        "currency": "NGN",
        "processor": "mastercard",
        "customer": {"first_name": None, "last_name": None, "email": "ada@example.com"},
        "integration": 463433,
        "domain": "live",
    }


_SUBSCRIPTION_DATA: Dict[str, Any] = {
    "domain": "test",
    "status": "active",
    "subscription_code": "SUB_vsyqdmlzble3uii",
    "amount": 50000,
    "cron_expression": "0 0 28 * *",
    "next_payment_date": "2024-02-28T00:00:00.000Z",
    "open_invoice": None,
    "plan": _PLAN,
    "authorization": _AUTHORIZATION_CORE,
    "customer": _CUSTOMER_PROFILE,
    "created_at": "2024-01-28T00:00:00.000Z",
}

WEBHOOK_PAYLOADS: Dict[str, Dict[str, Any]] = {
    "customeridentification.failed": {
        "event": "customeridentification.failed",
        "data": {
            "customer_id": "82796315",
            "customer_code": "CUS_XXXXXXXXXXXXXXX",
            "email": "customer@example.com",
            "identification": {
                "country": "NG",
                "type": "bank_account",
                "bvn": "123*****456",
                "account_number": "012****345",
                "bank_code": "999991",
            },
        },
        "reason": "Account number or BVN is incorrect",
    },
    "customeridentification.success": {
        "event": "customeridentification.success",
        "data": {
            "customer_id": "82796315",
            "customer_code": "CUS_XXXXXXXXXXXXXXX",
            "email": "customer@example.com",
            "identification": {"country": "NG", "type": "bank_account", "value": "0123456789"},
        },
    },
    "charge.dispute.create": {"event": "charge.dispute.create", "data": _DISPUTE_DATA},
    "charge.dispute.remind": {"event": "charge.dispute.remind", "data": _DISPUTE_DATA},
    "charge.dispute.resolve": {
        "event": "charge.dispute.resolve",
        "data": {**_DISPUTE_DATA, "status": "resolved", "resolution": "merchant-accepted", "resolvedAt": "2024-01-03T08:00:00.000Z"},
    },
    "dedicatedaccount.assign.failed": {
        "event": "dedicatedaccount.assign.failed",
        "data": {"customer": _CUSTOMER, "dedicated_account": None, "identification": {"status": "failed"}},
    },
    "dedicatedaccount.assign.success": {
        "event": "dedicatedaccount.assign.success",
        "data": {
            "customer": _CUSTOMER,
            "dedicated_account": {
                "bank": {"name": "Test Bank", "id": 20, "slug": "test-bank"},
                "account_name": "PAYSTACK/ADA LOVELACE",
                "account_number": "1234567890",
                "assigned": True,
                "currency": "NGN",
                "metadata": None,
                "active": True,
                "id": 253,
                "created_at": "2024-01-01T10:00:00.000Z",
                "updated_at": "2024-01-01T10:00:00.000Z",
            },
            "assignment": {
                "integration": 100073,
                "assignee_id": 46,
                "assignee_type": "Customer",
                "account_type": "PAY-WITH-TRANSFER-RECURRING",
                "assigned_at": "2024-01-01T10:00:00.000Z",
                "expired": False,
                "expired_at": None,
            },
        },
        "identification": {"status": "success"},
    },
    "invoice.create": {
        "event": "invoice.create",
        "data": {**_INVOICE_DATA, "transaction": _INVOICE_TRANSACTION, "created_at": "2024-01-01T00:00:00.000Z"},
    },
    "invoice.payment_failed": {
        "event": "invoice.payment_failed",
        "data": {**_INVOICE_DATA, "status": "failed", "paid": False, "paid_at": None, "transaction": {}, "created_at": "2024-01-01T00:00:00.000Z"},
    },
    "invoice.update": {
        "event": "invoice.update",
        "data": {**_INVOICE_DATA, "transaction": _INVOICE_TRANSACTION},
    },
    "paymentrequest.pending": {"event": "paymentrequest.pending", "data": _PAYMENT_REQUEST_DATA},
    "paymentrequest.success": {
        "event": "paymentrequest.success",
        "data": {**_PAYMENT_REQUEST_DATA, "status": "success", "paid": True, "paid_at": "2024-01-02T10:00:00.000Z"},
    },
    "refund.failed": {"event": "refund.failed", "data": _refund("failed", "TRF_2mfq4fh1s1xbrdq")},
    "refund.pending": {"event": "refund.pending", "data": _refund("pending", None)},
    "refund.processed": {"event": "refund.processed", "data": _refund("processed", "TRF_2mfq4fh1s1xbrdq")},
    "refund.processing": {"event": "refund.processing", "data": _refund("processing", "TRF_2mfq4fh1s1xbrdq")},
    "subscription.create": {
        "event": "subscription.create",
        "data": {**_SUBSCRIPTION_DATA, "createdAt": "2024-01-28T00:00:00.000Z"},
    },
    "subscription.disable": {
        "event": "subscription.disable",
        "data": {**_SUBSCRIPTION_DATA, "status": "complete", "email_token": "ctt824k16n34u69"},
    },
    "subscription.not_renew": {
        "event": "subscription.not_renew",
        "data": {
            "id": 317617,
            "domain": "test",
            "status": "non-renewing",
            "subscription_code": "SUB_d638sw8tm7g1yfe",
            "email_token": "ctt824k16n34u69",
            "amount": 50000,
            "cron_expression": "0 0 28 * *",
            "next_payment_date": "2024-02-28T00:00:00.000Z",
            "open_invoice": None,
            "integration": 116430,
            "plan": _PLAN,
            "authorization": _AUTHORIZATION_CORE,
            "customer": _CUSTOMER,
            "invoices": [],
            "invoices_history": [],
            "invoice_limit": 0,
            "split_code": None,
            "most_recent_invoice": None,
            "created_at": "2024-01-28T00:00:00.000Z",
        },
    },
    "subscription.expiring_cards": {
        "event": "subscription.expiring_cards",
        "data": [
            {
                "expiry_date": "2024-12-31T00:00:00.000Z",
                "description": "visa ending with 4081",
                "brand": "visa",
                "subscription": {
                    "id": 4192,
                    "subscription_code": "SUB_a2b3c4d5",
                    "amount": 5000,
                    "next_payment_date": "2025-01-01T00:00:00.000Z",
                    "plan": {"interval": "monthly", "id": 22637, "name": "Premium", "plan_code": "PLN_x"},
                },
                "customer": {
                    "id": 56,
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "email": "ada@example.com",
                    "customer_code": "CUS_8gbmdpvn12c67ix",
                },
            }
        ],
    },
    "charge.success": CHARGE_SUCCESS_PAYLOAD,
    "transfer.success": TRANSFER_SUCCESS_PAYLOAD,
    "transfer.failed": TRANSFER_FAILED_PAYLOAD,
    "transfer.reversed": TRANSFER_REVERSED_PAYLOAD,
}


@pytest.fixture
def secret_key() -> str:
    """Return the secret key used to sign test deliveries."""
    return TEST_SECRET_KEY


@pytest.fixture
def charge_success_payload() -> Dict[str, Any]:
    """Return a fresh charge.success delivery body."""
    return copy.deepcopy(CHARGE_SUCCESS_PAYLOAD)


@pytest.fixture
def transfer_success_payload() -> Dict[str, Any]:
    """Return a fresh transfer.success delivery body."""
    return copy.deepcopy(TRANSFER_SUCCESS_PAYLOAD)


@pytest.fixture
def transfer_failed_payload() -> Dict[str, Any]:
    """Return a transfer.failed body without recipient timestamps."""
    return copy.deepcopy(TRANSFER_FAILED_PAYLOAD)


@pytest.fixture
def transfer_reversed_payload() -> Dict[str, Any]:
    """Return a transfer.reversed body without recipient timestamps."""
    return copy.deepcopy(TRANSFER_REVERSED_PAYLOAD)


@pytest.fixture
def webhook_payload() -> Callable[[str], Dict[str, Any]]:
    """Return a helper giving a fresh well-formed delivery body for any event kind."""

    def _payload(kind: str) -> Dict[str, Any]:
        return copy.deepcopy(WEBHOOK_PAYLOADS[kind])

    return _payload


@pytest.fixture
def sign(secret_key) -> Callable[[Union[Dict[str, Any], str, bytes]], Tuple[bytes, str]]:
    """Return a helper that serializes a body and signs it like Paystack does."""

    def _sign(body: Union[Dict[str, Any], str, bytes]) -> Tuple[bytes, str]:
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        return body, compute_signature(body, secret_key)

    return _sign
