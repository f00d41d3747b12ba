"""Catalog of webhook event shapes.

Every supported event is one model pairing a literal ``event`` tag with a
kind-specific ``data`` shape. ``WebhookEvent`` is the discriminated union of
all of them. Adding an event means adding both its ``EventKind`` member and
its model to the union; the check at the bottom of this module refuses to
import otherwise.
"""

import enum
from datetime import datetime
from ipaddress import IPv4Address
from typing import Annotated, Optional, Dict, Any, List, Literal, Type, Union, get_args
from uuid import UUID

from pydantic import Field, HttpUrl

from ..schemas.common import (
    Authorization,
    AuthorizationCore,
    Currency,
    Customer,
    CustomerBase,
    CustomerCode,
    CustomerContact,
    CustomerProfile,
    InvoiceCode,
    Log,
    LogCore,
    PaystackModel,
    Plan,
    PlanSummary,
    RecipientCode,
    RequestCode,
    Subaccount,
    SubscriptionCode,
    TransferCode,
    AuthorizationCode,
)
from ..schemas.transaction import TransactionCore
from ..schemas.virtual import ExpiringVirtualAccountAssignment, VirtualAccountBase


class EventKind(str, enum.Enum):
    """Every event kind the SDK can classify."""
    CUSTOMER_IDENTIFICATION_FAILED = "customeridentification.failed"
    CUSTOMER_IDENTIFICATION_SUCCESS = "customeridentification.success"
    DISPUTE_CREATE = "charge.dispute.create"
    DISPUTE_REMIND = "charge.dispute.remind"
    DISPUTE_RESOLVE = "charge.dispute.resolve"
    DEDICATED_ACCOUNT_ASSIGN_FAILED = "dedicatedaccount.assign.failed"
    DEDICATED_ACCOUNT_ASSIGN_SUCCESS = "dedicatedaccount.assign.success"
    INVOICE_CREATE = "invoice.create"
    INVOICE_PAYMENT_FAILED = "invoice.payment_failed"
    INVOICE_UPDATE = "invoice.update"
    PAYMENT_REQUEST_PENDING = "paymentrequest.pending"
    PAYMENT_REQUEST_SUCCESS = "paymentrequest.success"
    REFUND_FAILED = "refund.failed"
    REFUND_PENDING = "refund.pending"
    REFUND_PROCESSED = "refund.processed"
    REFUND_PROCESSING = "refund.processing"
    SUBSCRIPTION_CREATE = "subscription.create"
    SUBSCRIPTION_DISABLE = "subscription.disable"
    SUBSCRIPTION_NOT_RENEW = "subscription.not_renew"
    SUBSCRIPTION_EXPIRING_CARDS = "subscription.expiring_cards"
    CHARGE_SUCCESS = "charge.success"
    TRANSFER_SUCCESS = "transfer.success"
    TRANSFER_FAILED = "transfer.failed"
    TRANSFER_REVERSED = "transfer.reversed"


# Customer identification

class IdentificationBase(PaystackModel):
    country: Literal["NG", "GH"]
    type: str


class FailedIdentification(IdentificationBase):
    bvn: str
    account_number: str
    bank_code: str


class SuccessfulIdentification(IdentificationBase):
    value: str


class CustomerIdentificationData(PaystackModel):
    customer_id: str
    customer_code: CustomerCode
    email: str


class CustomerIdentificationFailedData(CustomerIdentificationData):
    identification: FailedIdentification


class CustomerIdentificationSuccessData(CustomerIdentificationData):
    identification: SuccessfulIdentification


# Disputes

class DisputeTransactionCustomer(PaystackModel):
    international_format_phone: Optional[str]


class DisputeTransaction(PaystackModel):
    id: int
    domain: str
    status: str
    reference: str
    amount: int
    message: Optional[str]
    gateway_response: str
    paid_at: datetime
    created_at: datetime
    channel: str
    currency: Currency = "NGN"
    ip_address: Optional[IPv4Address]
    metadata: str
    log: Optional[Log]
    fees: int
    fees_split: Optional[Any] = None
    authorization: Optional[Authorization] = None
    customer: DisputeTransactionCustomer
    plan: Plan
    subaccount: Optional[Subaccount] = None
    split: Optional[Dict[str, Any]] = None
    order_id: Optional[str]
    paidAt: datetime
    requested_amount: int
    pos_transaction_data: Optional[Any] = None


class DisputeHistoryEntry(PaystackModel):
    status: str
    by: str
    created_at: datetime


class DisputeMessage(PaystackModel):
    sender: str
    body: str
    created_at: datetime


class DisputeData(PaystackModel):
    id: int
    refund_amount: int
    currency: Currency = "NGN"
    status: str
    resolution: Optional[Any] = None
    domain: str
    transaction: DisputeTransaction
    transaction_reference: Optional[str]
    category: str
    customer: Customer
    bin: str
    last4: str
    dueAt: datetime
    resolvedAt: Optional[datetime]
    evidence: Optional[Any] = None
    attachments: Optional[Any] = None
    note: Optional[Any] = None
    history: List[DisputeHistoryEntry]
    messages: List[DisputeMessage]
    created_at: datetime
    updated_at: datetime


# Dedicated accounts

class IdentificationStatus(PaystackModel):
    status: str


class DedicatedAccountAssignFailedData(PaystackModel):
    customer: Customer
    dedicated_account: Optional[Any] = None
    identification: IdentificationStatus


class DedicatedAccountAssignSuccessData(PaystackModel):
    customer: Customer
    dedicated_account: VirtualAccountBase
    assignment: ExpiringVirtualAccountAssignment


# Invoices

class InvoiceSubscription(PaystackModel):
    status: str
    subscription_code: SubscriptionCode
    email_token: str
    amount: int
    cron_expression: str
    next_payment_date: datetime
    open_invoice: Optional[Any] = None


class InvoiceTransaction(PaystackModel):
    reference: UUID
    status: str
    amount: int
    currency: Currency = "NGN"


class PartialInvoiceTransaction(PaystackModel):
    reference: Optional[UUID] = None
    status: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[Currency] = None


class InvoiceData(PaystackModel):
    domain: str
    invoice_code: InvoiceCode
    amount: int
    period_start: datetime
    period_end: datetime
    status: str
    paid: bool
    paid_at: Optional[datetime]
    description: Optional[str]
    authorization: Authorization
    subscription: InvoiceSubscription
    customer: CustomerBase


class InvoiceCreateData(InvoiceData):
    transaction: InvoiceTransaction
    created_at: datetime


class InvoicePaymentFailedData(InvoiceData):
    transaction: PartialInvoiceTransaction
    created_at: datetime


class InvoiceUpdateData(InvoiceData):
    transaction: InvoiceTransaction


# Payment requests

class PaymentRequestNotification(PaystackModel):
    sent_at: datetime
    channel: str


class PaymentRequestData(PaystackModel):
    id: int
    domain: str
    amount: int
    currency: Currency = "NGN"
    due_date: Optional[datetime]
    has_invoice: bool
    invoice_number: Optional[str]
    description: Optional[str]
    pdf_url: Optional[HttpUrl]
    line_items: List[Any]
    tax: List[Any]
    request_code: RequestCode
    status: str
    paid: bool
    paid_at: Optional[datetime]
    metadata: Optional[Any] = None
    notifications: List[PaymentRequestNotification]
    offline_reference: Optional[str]
    customer: int
    created_at: datetime


# Refunds

class RefundData(PaystackModel):
    status: str
    transaction_reference: str
    amount: int
    currency: Currency = "NGN"
    processor: str
    customer: CustomerContact
    integration: int
    domain: str


class PendingRefundData(RefundData):
    refund_reference: Optional[TransferCode]


class SettledRefundData(RefundData):
    """Failed or processed refund; the refund reference is always present."""
    refund_reference: TransferCode


# Subscriptions

class SubscriptionData(PaystackModel):
    domain: str
    status: str
    subscription_code: SubscriptionCode
    amount: int
    cron_expression: str
    next_payment_date: datetime
    open_invoice: Optional[Any] = None
    plan: Plan
    authorization: AuthorizationCore
    customer: CustomerProfile
    created_at: datetime


class SubscriptionCreateData(SubscriptionData):
    createdAt: datetime


class SubscriptionDisableData(SubscriptionData):
    email_token: str


class SubscriptionNotRenewData(PaystackModel):
    id: int
    domain: str
    status: str
    subscription_code: SubscriptionCode
    email_token: str
    amount: int
    cron_expression: str
    next_payment_date: datetime
    open_invoice: Optional[Any] = None
    integration: int
    plan: Plan
    authorization: AuthorizationCore
    customer: Customer
    invoices: List[Any]
    invoices_history: List[Any]
    invoice_limit: int
    split_code: Optional[str]
    most_recent_invoice: Optional[Any] = None
    created_at: datetime


class ExpiringCardSubscription(PaystackModel):
    id: int
    subscription_code: SubscriptionCode
    amount: int
    next_payment_date: datetime
    plan: PlanSummary


class ExpiringCardCustomer(CustomerContact):
    id: int
    customer_code: str


class ExpiringCard(PaystackModel):
    expiry_date: datetime
    description: str
    brand: Literal["visa", "mastercard", "verve"]
    subscription: ExpiringCardSubscription
    customer: ExpiringCardCustomer


# Charges

class ChargeLog(LogCore):
    authentication: str


class ChargeSuccessData(TransactionCore):
    log: ChargeLog
    metadata: Optional[Any] = None
    paid_at: datetime
    created_at: datetime
    fees: Optional[int]
    customer: CustomerProfile
    authorization: AuthorizationCore


# Transfers

class TransferIntegration(PaystackModel):
    id: int
    is_live: bool
    business_name: str


class TransferSession(PaystackModel):
    provider: Optional[str]
    id: Optional[str]


class TransferRecipient(PaystackModel):
    active: bool
    currency: Currency = "NGN"
    description: Optional[str]
    domain: str
    email: Optional[str]
    id: int
    integration: int
    metadata: Optional[Any] = None
    name: str
    recipient_code: RecipientCode
    type: str
    is_deleted: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferRecipientDetails(PaystackModel):
    account_number: str
    account_name: Optional[str]
    bank_code: str
    bank_name: str


class UnsettledTransferRecipientDetails(TransferRecipientDetails):
    authorization_code: Optional[AuthorizationCode]


class SuccessfulTransferRecipient(TransferRecipient):
    details: TransferRecipientDetails


class UnsettledTransferRecipient(TransferRecipient):
    """Recipient of a failed or reversed transfer."""
    details: UnsettledTransferRecipientDetails


class TransferData(PaystackModel):
    amount: int
    currency: Currency = "NGN"
    domain: str
    failures: Optional[Any] = None
    id: int
    integration: TransferIntegration
    reason: str
    reference: str
    source: str
    source_details: Optional[Any] = None
    status: str
    titan_code: Optional[str]
    transfer_code: TransferCode
    transferred_at: Optional[datetime]
    session: TransferSession
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferSuccessData(TransferData):
    recipient: SuccessfulTransferRecipient


class TransferUnsettledData(TransferData):
    recipient: UnsettledTransferRecipient


# Events

class CustomerIdentificationFailedEvent(PaystackModel):
    event: Literal["customeridentification.failed"]
    data: CustomerIdentificationFailedData
    reason: str


class CustomerIdentificationSuccessEvent(PaystackModel):
    event: Literal["customeridentification.success"]
    data: CustomerIdentificationSuccessData


class DisputeCreateEvent(PaystackModel):
    event: Literal["charge.dispute.create"]
    data: DisputeData


class DisputeRemindEvent(PaystackModel):
    event: Literal["charge.dispute.remind"]
    data: DisputeData


class DisputeResolveEvent(PaystackModel):
    event: Literal["charge.dispute.resolve"]
    data: DisputeData


class DedicatedAccountAssignFailedEvent(PaystackModel):
    event: Literal["dedicatedaccount.assign.failed"]
    data: DedicatedAccountAssignFailedData


class DedicatedAccountAssignSuccessEvent(PaystackModel):
    event: Literal["dedicatedaccount.assign.success"]
    data: DedicatedAccountAssignSuccessData
    identification: IdentificationStatus


class InvoiceCreateEvent(PaystackModel):
    event: Literal["invoice.create"]
    data: InvoiceCreateData


class InvoicePaymentFailedEvent(PaystackModel):
    event: Literal["invoice.payment_failed"]
    data: InvoicePaymentFailedData


class InvoiceUpdateEvent(PaystackModel):
    event: Literal["invoice.update"]
    data: InvoiceUpdateData


class PaymentRequestPendingEvent(PaystackModel):
    event: Literal["paymentrequest.pending"]
    data: PaymentRequestData


class PaymentRequestSuccessEvent(PaystackModel):
    event: Literal["paymentrequest.success"]
    data: PaymentRequestData


class RefundFailedEvent(PaystackModel):
    event: Literal["refund.failed"]
    data: SettledRefundData


class RefundPendingEvent(PaystackModel):
    event: Literal["refund.pending"]
    data: PendingRefundData


class RefundProcessedEvent(PaystackModel):
    event: Literal["refund.processed"]
    data: SettledRefundData


class RefundProcessingEvent(PaystackModel):
    event: Literal["refund.processing"]
    data: PendingRefundData


class SubscriptionCreateEvent(PaystackModel):
    event: Literal["subscription.create"]
    data: SubscriptionCreateData


class SubscriptionDisableEvent(PaystackModel):
    event: Literal["subscription.disable"]
    data: SubscriptionDisableData


class SubscriptionNotRenewEvent(PaystackModel):
    event: Literal["subscription.not_renew"]
    data: SubscriptionNotRenewData


class SubscriptionExpiringCardsEvent(PaystackModel):
    event: Literal["subscription.expiring_cards"]
    data: List[ExpiringCard]


class ChargeSuccessEvent(PaystackModel):
    event: Literal["charge.success"]
    data: ChargeSuccessData


class TransferSuccessEvent(PaystackModel):
    event: Literal["transfer.success"]
    data: TransferSuccessData


class TransferFailedEvent(PaystackModel):
    event: Literal["transfer.failed"]
    data: TransferUnsettledData


class TransferReversedEvent(PaystackModel):
    event: Literal["transfer.reversed"]
    data: TransferUnsettledData


WebhookEvent = Annotated[
    Union[
        CustomerIdentificationFailedEvent,
        CustomerIdentificationSuccessEvent,
        DisputeCreateEvent,
        DisputeRemindEvent,
        DisputeResolveEvent,
        DedicatedAccountAssignFailedEvent,
        DedicatedAccountAssignSuccessEvent,
        InvoiceCreateEvent,
        InvoicePaymentFailedEvent,
        InvoiceUpdateEvent,
        PaymentRequestPendingEvent,
        PaymentRequestSuccessEvent,
        RefundFailedEvent,
        RefundPendingEvent,
        RefundProcessedEvent,
        RefundProcessingEvent,
        SubscriptionCreateEvent,
        SubscriptionDisableEvent,
        SubscriptionNotRenewEvent,
        SubscriptionExpiringCardsEvent,
        ChargeSuccessEvent,
        TransferSuccessEvent,
        TransferFailedEvent,
        TransferReversedEvent,
    ],
    Field(discriminator="event"),
]


def _event_tag(model: Type[PaystackModel]) -> str:
    (tag,) = get_args(model.model_fields["event"].annotation)
    return tag


EVENT_MODELS: Dict[str, Type[PaystackModel]] = {
    _event_tag(model): model for model in get_args(get_args(WebhookEvent)[0])
}

_catalog_drift = set(EVENT_MODELS) ^ {kind.value for kind in EventKind}
if _catalog_drift:
    raise RuntimeError(f"EventKind and WebhookEvent disagree on: {sorted(_catalog_drift)}")


def event_model(kind: Union[EventKind, str]) -> Optional[Type[PaystackModel]]:
    """Model for ``kind``, or None if the kind is not in the catalog."""
    if isinstance(kind, EventKind):
        kind = kind.value
    return EVENT_MODELS.get(kind)
