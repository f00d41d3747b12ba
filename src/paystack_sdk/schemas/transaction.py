"""Transaction request and response shapes."""

from datetime import datetime, time
from ipaddress import IPv4Address
from typing import Optional, Dict, Any, List, Literal

from pydantic import Field, HttpUrl, field_validator

from .common import (
    Authorization,
    Currency,
    CurrencyAmount,
    CursorMeta,
    Customer,
    GenericInput,
    GenericResponse,
    InputModel,
    Log,
    LogCore,
    PaystackModel,
    Plan,
    Subaccount,
)
from .split import Split

Channel = Literal[
    "card",
    "bank",
    "apple_pay",
    "ussd",
    "qr",
    "mobile_money",
    "bank_transfer",
    "eft",
]
Bearer = Literal["account", "subaccount"]
TransactionStatus = Literal["success", "failed", "abandoned"]


class TransactionInitializeInput(InputModel):
    amount: str  # minor units, sent as a string
    email: str
    currency: Optional[Currency] = None
    reference: Optional[str] = None
    callback_url: Optional[HttpUrl] = None
    plan: Optional[str] = None
    invoice_limit: Optional[int] = None
    metadata: Optional[str] = None
    channels: Optional[List[Channel]] = None
    split_code: Optional[str] = None
    subaccount: Optional[str] = None
    transaction_charge: Optional[str] = None
    bearer: Optional[Bearer] = None


class TransactionInitializeData(PaystackModel):
    authorization_url: HttpUrl
    access_code: str
    reference: str


class TransactionInitializeSuccess(GenericResponse):
    data: TransactionInitializeData


class TransactionCore(PaystackModel):
    """Fields common to every rendering of a transaction, webhooks included."""
    id: int
    domain: str
    status: str
    reference: str
    amount: int
    message: Optional[str]
    gateway_response: str
    channel: str
    currency: Currency = "NGN"
    ip_address: Optional[str]
    fees_split: Optional[Any] = None
    order_id: Optional[str]
    requested_amount: int
    pos_transaction_data: Optional[Any] = None
    connect: Optional[Any] = None


class TransactionShared(TransactionCore):
    receipt_number: Optional[str]
    log: Optional[Log]
    fees: Optional[int]
    authorization: Optional[Authorization]
    paidAt: Optional[datetime]
    createdAt: datetime


class TransactionSource(PaystackModel):
    source: str
    type: str
    identifier: Optional[str]
    entry_point: str


class TransactionRecord(TransactionShared):
    metadata: Optional[Any] = None
    customer: Customer
    plan: Optional[Plan]
    split: Optional[Split]
    subaccount: Optional[Subaccount]
    source: Optional[TransactionSource]


class TransactionVerified(TransactionShared):
    metadata: Optional[Any] = None
    customer: Customer
    plan: Optional[Plan]
    split: Optional[Split]
    source: Optional[Any] = None
    fees_breakdown: Optional[Any] = None
    transaction_date: str
    plan_object: Dict[str, Any]
    subaccount: Optional[Subaccount]

    @field_validator("split", "subaccount", mode="before")
    @classmethod
    def _empty_object_as_none(cls, value: Any) -> Any:
        # verify renders "no split"/"no subaccount" as {}
        if isinstance(value, dict) and not value:
            return None
        return value


class TransactionVerifySuccess(GenericResponse):
    data: TransactionVerified


class TransactionListInput(GenericInput):
    customer: Optional[str] = None
    terminal_id: Optional[str] = Field(default=None, alias="terminalId")
    status: Optional[TransactionStatus] = None


class TransactionSingleSuccess(GenericResponse):
    data: TransactionRecord


class TransactionListSuccess(GenericResponse):
    data: List[TransactionRecord]
    meta: CursorMeta


class ChargeAuthorizationInput(InputModel):
    amount: int
    email: str
    authorization_code: str
    reference: Optional[str] = None
    currency: Optional[Currency] = None
    metadata: Optional[str] = None
    channels: Optional[List[Literal["card", "bank"]]] = None
    subaccount: Optional[str] = None
    transaction_charge: Optional[int] = None
    bearer: Optional[Bearer] = "account"
    queue: Optional[bool] = False


class ChargeAuthorizationData(PaystackModel):
    amount: int
    currency: Currency = "NGN"
    transaction_date: datetime
    status: str
    reference: str
    domain: str
    metadata: Optional[Any] = None
    gateway_response: str
    message: Optional[str]
    channel: str
    ip_address: Optional[IPv4Address]
    log: Optional[Log]
    fees: int
    authorization: Authorization
    customer: Customer
    plan: Optional[int]
    id: int


class ChargeAuthorizationSuccess(GenericResponse):
    data: ChargeAuthorizationData


class TransactionTimeline(LogCore):
    start_time: time


class TransactionTimelineSuccess(GenericResponse):
    data: TransactionTimeline


class TransactionTotals(PaystackModel):
    total_transactions: int
    total_volume: int
    total_volume_by_currency: List[CurrencyAmount]
    pending_transfers: int
    pending_transfers_by_currency: List[CurrencyAmount]


class TransactionTotalsSuccess(GenericResponse):
    data: TransactionTotals


class TransactionExportInput(GenericInput):
    customer: Optional[str] = None
    status: Optional[TransactionStatus] = None
    currency: Optional[Currency] = None
    amount: Optional[int] = None
    settled: Optional[bool] = None
    settlement: Optional[int] = None
    payment_page: Optional[int] = None


class TransactionExport(PaystackModel):
    path: HttpUrl
    expiresAt: datetime


class TransactionExportSuccess(GenericResponse):
    data: TransactionExport


class PartialDebitInput(InputModel):
    authorization_code: str
    currency: Literal["NGN", "GHS"] = "NGN"
    amount: int
    email: str
    reference: Optional[str] = None
    at_least: Optional[int] = None


class PartialDebitData(ChargeAuthorizationData):
    requested_amount: int


class PartialDebitSuccess(GenericResponse):
    data: PartialDebitData
