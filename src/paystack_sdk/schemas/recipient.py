"""Transfer recipient shapes."""

from datetime import datetime
from typing import Optional, Any, List, Literal

from .common import (
    Currency,
    GenericResponse,
    InputModel,
    PaystackModel,
    RecipientCode,
)

RecipientType = Literal["nuban", "ghipss", "mobile_money"]


class RecipientCreateInput(InputModel):
    type: RecipientType
    name: str
    account_number: str
    bank_code: str
    description: Optional[str] = None
    currency: Optional[Currency] = None
    authorization_code: Optional[str] = None
    metadata: Optional[Any] = None


class RecipientDetails(PaystackModel):
    account_number: str
    account_name: Optional[str]
    bank_code: str
    bank_name: str


class CreatedRecipientDetails(PaystackModel):
    authorization_code: Optional[Any] = None
    account_number: str
    account_name: str
    bank_code: str
    bank_name: str


class CreatedRecipient(PaystackModel):
    active: bool
    createdAt: datetime
    currency: Currency = "NGN"
    domain: str
    id: int
    integration: int
    name: str
    recipient_code: RecipientCode
    type: RecipientType
    updatedAt: datetime
    is_deleted: bool
    details: CreatedRecipientDetails


class RecipientCreateSuccess(GenericResponse):
    data: CreatedRecipient


class RecipientBulkCreateInput(InputModel):
    batch: List[RecipientCreateInput]


class BulkRecipient(PaystackModel):
    domain: str
    name: str
    type: RecipientType
    description: Optional[str] = None
    currency: Currency = "NGN"
    metadata: Optional[Any] = None
    details: RecipientDetails
    recipient_code: RecipientCode
    active: bool
    id: int
    isDeleted: bool
    createdAt: datetime
    updatedAt: datetime


class BulkRecipientResult(PaystackModel):
    success: List[BulkRecipient]
    errors: List[Any]


class RecipientBulkCreateSuccess(GenericResponse):
    data: BulkRecipientResult


class RecipientListItem(PaystackModel):
    domain: str
    type: RecipientType
    currency: Currency = "NGN"
    name: str
    details: RecipientDetails
    metadata: Optional[Any] = None
    recipient_code: RecipientCode
    active: bool
    id: int
    createdAt: datetime
    updatedAt: datetime


class RecipientListSuccess(GenericResponse):
    data: List[RecipientListItem]


class RecipientDetail(RecipientListItem):
    integration: int
    description: Optional[str]
    email: Optional[str]
    isDeleted: Optional[bool] = None


class RecipientSingleSuccess(GenericResponse):
    data: RecipientDetail


class RecipientUpdateInput(InputModel):
    id_or_code: str
    name: str
    email: Optional[str] = None
