"""Dedicated virtual account shapes."""

from datetime import date, datetime
from typing import Optional, Dict, Any, List, Literal

from pydantic import Field

from .common import (
    Currency,
    Customer,
    CustomerBase,
    GenericResponse,
    InputModel,
    PageMeta,
    PaystackModel,
)


class VirtualAccountCreateInput(InputModel):
    customer: str
    preferred_bank: Optional[str] = None
    subaccount: Optional[str] = None
    split_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class VirtualAccountAssignmentCore(PaystackModel):
    integration: int
    assignee_id: int
    assignee_type: str
    account_type: str
    assigned_at: datetime


class VirtualAccountAssignment(VirtualAccountAssignmentCore):
    expired: bool


class ExpiringVirtualAccountAssignment(VirtualAccountAssignment):
    expired_at: Optional[datetime]


class VirtualAccountBank(PaystackModel):
    name: str
    id: int
    slug: str


class VirtualAccountBase(PaystackModel):
    bank: VirtualAccountBank
    account_name: str
    account_number: str
    assigned: bool
    currency: Currency = "NGN"
    metadata: Optional[Any] = None
    active: bool
    id: int
    created_at: datetime
    updated_at: datetime


class VirtualAccount(VirtualAccountBase):
    assignment: VirtualAccountAssignment
    customer: CustomerBase


class VirtualAccountCreateSuccess(GenericResponse):
    data: VirtualAccount


class VirtualAccountAssignInput(InputModel):
    email: str
    first_name: str
    last_name: str
    phone: str
    country: Literal["NG", "GH"]
    account_number: Optional[str] = None
    bvn: Optional[str] = None
    bank_code: Optional[str] = None
    subaccount: Optional[str] = None
    split_code: Optional[str] = None


class VirtualAccountListInput(InputModel):
    active: bool
    currency: Currency = "NGN"
    provider_slug: Optional[str] = None
    bank_id: Optional[str] = None
    customer: Optional[str] = None


class VirtualAccountListSuccess(GenericResponse):
    data: List[VirtualAccount]
    meta: PageMeta


class VirtualAccountDetail(VirtualAccountBase):
    assignment: VirtualAccountAssignment
    customer: Customer
    split_config: str


class VirtualAccountFetchSuccess(GenericResponse):
    data: VirtualAccountDetail


class VirtualAccountRequeryInput(InputModel):
    account_number: str
    provider_slug: str
    on_date: Optional[date] = Field(default=None, alias="date")


class DeactivatedVirtualAccount(VirtualAccountBase):
    assignment: VirtualAccountAssignmentCore
    customer: Customer
    split_config: str


class VirtualAccountDeleteSuccess(GenericResponse):
    data: DeactivatedVirtualAccount


class VirtualAccountAddSplitInput(InputModel):
    customer: str
    subaccount: Optional[str] = None
    split_code: Optional[str] = None
    preferred_bank: Optional[str] = None


class SplitConfig(PaystackModel):
    split_code: str


class SplitVirtualAccount(VirtualAccountBase):
    assignment: ExpiringVirtualAccountAssignment
    customer: CustomerBase
    split_config: SplitConfig


class VirtualAccountAddSplitSuccess(GenericResponse):
    data: SplitVirtualAccount


class VirtualAccountRemoveSplitInput(InputModel):
    account_number: str


class UnsplitVirtualAccount(PaystackModel):
    id: int
    split_config: Dict[str, Any]
    account_name: str
    account_number: str
    currency: Currency = "NGN"
    assigned: bool
    active: bool
    created_at: datetime
    updated_at: datetime


class VirtualAccountRemoveSplitSuccess(GenericResponse):
    data: UnsplitVirtualAccount


class VirtualAccountProvider(PaystackModel):
    provider_slug: str
    bank_id: int
    bank_name: str
    id: int


class FetchBanksSuccess(GenericResponse):
    data: List[VirtualAccountProvider]
