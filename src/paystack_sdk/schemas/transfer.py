"""Transfer request and response shapes."""

from datetime import datetime
from typing import Optional, Any, List, Literal

from pydantic import Field

from .common import (
    Currency,
    GenericInput,
    GenericResponse,
    InputModel,
    NextStepMeta,
    PaystackModel,
    RecipientCode,
    TransferCode,
)


class TransferInitiateInput(InputModel):
    source: Literal["balance"] = "balance"
    amount: int = Field(ge=1000)
    recipient: RecipientCode
    reason: Optional[str] = None
    currency: Currency = "NGN"
    account_reference: Optional[str] = None
    reference: str


class TransferCore(PaystackModel):
    domain: str
    amount: int
    currency: Currency = "NGN"
    reference: str
    source: str
    reason: str
    status: str
    failures: Optional[Any] = None
    transfer_code: TransferCode
    titan_code: Optional[str]
    transferred_at: Optional[Any] = None
    id: int
    integration: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferRecord(TransferCore):
    request: int
    recipient: int


class TransferInitiated(TransferRecord):
    transfersessionid: List[Any]
    transfertrials: List[Any]


class TransferInitiateSuccess(GenericResponse):
    data: TransferInitiated


class TransferError(GenericResponse):
    """Error envelope for initiate calls; carries the next step to take."""
    meta: NextStepMeta
    type: str
    code: str


class TransferFinalizeInput(InputModel):
    transfer_code: TransferCode
    otp: str


class TransferFinalized(TransferRecord):
    source_details: Optional[Any] = None


class TransferFinalizeSuccess(GenericResponse):
    data: TransferFinalized


class BulkTransferItem(InputModel):
    amount: int
    recipient: RecipientCode
    reference: str
    reason: Optional[str] = None


class TransferBulkInitiateInput(InputModel):
    source: Literal["balance"] = "balance"
    transfers: List[BulkTransferItem]


class BulkTransferResult(PaystackModel):
    reference: str
    recipient: RecipientCode
    amount: int
    transfer_code: TransferCode
    currency: Currency = "NGN"
    status: str


class TransferBulkInitiateSuccess(GenericResponse):
    data: List[BulkTransferResult]


class TransferListInput(GenericInput):
    recipient: Optional[RecipientCode] = None


class RecipientAccountDetails(PaystackModel):
    account_number: str
    account_name: Optional[str]
    bank_code: str
    bank_name: str


class TransferListRecipient(PaystackModel):
    domain: str
    type: str
    currency: Currency = "NGN"
    name: str
    details: RecipientAccountDetails
    description: Optional[str]
    metadata: Optional[Any] = None
    recipient_code: RecipientCode
    active: bool
    id: int
    integration: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferListItem(TransferCore):
    recipient: TransferListRecipient
    source: Literal["balance"] = "balance"
    source_details: Optional[Any] = None


class TransferListSuccess(GenericResponse):
    data: List[TransferListItem]


class TransferRecipientAccountDetails(RecipientAccountDetails):
    authorization_code: Optional[str] = None


class TransferRecipientDetail(TransferListRecipient):
    details: TransferRecipientAccountDetails
    description: Optional[str] = None
    email: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    is_deleted: Optional[bool] = None
    isDeleted: Optional[bool] = None


class TransferSession(PaystackModel):
    provider: Optional[Any] = None
    id: Optional[Any] = None


class TransferDetails(TransferCore):
    request: int
    createdAt: datetime
    updatedAt: datetime
    recipient: TransferRecipientDetail
    session: TransferSession
    fees_charged: int
    fees_breakdown: Optional[Any] = None
    gateway_response: Optional[Any] = None
    source: Literal["balance"] = "balance"
    source_details: Optional[Any] = None


class TransferSingleSuccess(GenericResponse):
    data: TransferDetails
