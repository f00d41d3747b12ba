"""Shapes shared by every Paystack resource and webhook payload."""

from datetime import datetime
from typing import Annotated, Optional, Dict, Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Currency = Literal["NGN", "USD", "GHS", "ZAR", "KES", "XOF"]

# Paystack prefixes most object codes with a fixed tag
AuthorizationCode = Annotated[str, StringConstraints(pattern=r"^AUTH_")]
CustomerCode = Annotated[str, StringConstraints(pattern=r"^CUS_")]
InvoiceCode = Annotated[str, StringConstraints(pattern=r"^INV_")]
RecipientCode = Annotated[str, StringConstraints(pattern=r"^RCP_")]
RequestCode = Annotated[str, StringConstraints(pattern=r"^PRQ_")]
SubaccountCode = Annotated[str, StringConstraints(pattern=r"^ACCT_")]
SubscriptionCode = Annotated[str, StringConstraints(pattern=r"^SUB_")]
TransferCode = Annotated[str, StringConstraints(pattern=r"^TRF_")]


class PaystackModel(BaseModel):
    """Base for every response and event shape.

    Unknown fields are kept so new upstream fields never break validation.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class InputModel(BaseModel):
    """Base for request inputs; keys are sent using their wire aliases."""
    model_config = ConfigDict(populate_by_name=True)


class PageMeta(PaystackModel):
    total: Optional[int] = None
    skipped: Optional[int] = None
    perPage: Optional[int] = None
    page: Optional[int] = None
    pageCount: Optional[int] = None


class CursorMeta(PaystackModel):
    next: Optional[str]
    previous: Optional[str]
    perPage: int


class NextStepMeta(PaystackModel):
    nextStep: Optional[str] = None


class GenericResponse(PaystackModel):
    """Envelope returned by every endpoint, including error responses."""
    status: bool
    message: str
    data: Optional[Dict[str, Any]] = None
    meta: Optional[PageMeta] = None


class GenericInput(InputModel):
    """Pagination and date-range filters accepted by list endpoints."""
    per_page: int = Field(default=50, ge=1, le=100, alias="perPage")
    page: int = Field(default=1, ge=1)
    from_: Optional[datetime] = Field(default=None, alias="from")
    to: Optional[datetime] = None


class HistoryEntry(PaystackModel):
    type: str
    message: str
    time: int


class LogCore(PaystackModel):
    time_spent: int
    attempts: int
    errors: int
    success: bool
    mobile: bool
    input: List[Any]
    history: List[HistoryEntry]


class Log(LogCore):
    start_time: int


class AuthorizationCore(PaystackModel):
    """Card or bank authorization without the reusable/signature pair."""
    authorization_code: str
    bin: str
    last4: str
    exp_month: str
    exp_year: str
    channel: str
    card_type: str
    bank: Optional[str]
    country_code: str
    brand: str
    account_name: Optional[str]


class Authorization(AuthorizationCore):
    reusable: bool
    signature: str


class CustomerContact(PaystackModel):
    first_name: Optional[str]
    last_name: Optional[str]
    email: str


class CustomerProfile(CustomerContact):
    phone: Optional[str]
    metadata: Optional[Any] = None
    customer_code: str
    risk_action: str


class CustomerBase(CustomerProfile):
    id: int


class Customer(CustomerBase):
    international_format_phone: Optional[str]


class PlanSummary(PaystackModel):
    id: int
    name: str
    plan_code: str
    interval: str


class Plan(PlanSummary):
    description: Optional[str]
    amount: int
    send_invoices: bool
    send_sms: bool
    currency: Currency = "NGN"


class Subaccount(PaystackModel):
    id: int
    subaccount_code: str
    business_name: str
    description: str
    primary_contact_name: Optional[str]
    primary_contact_email: Optional[str]
    primary_contact_phone: Optional[str]
    metadata: Optional[Any] = None
    settlement_bank: str
    currency: Currency = "NGN"
    account_number: str


class CurrencyAmount(PaystackModel):
    currency: Currency = "NGN"
    amount: int
