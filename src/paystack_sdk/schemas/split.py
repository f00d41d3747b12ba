"""Transaction split shapes."""

from datetime import datetime
from typing import Optional, List, Literal

from .common import (
    Currency,
    GenericInput,
    GenericResponse,
    InputModel,
    NextStepMeta,
    PageMeta,
    PaystackModel,
    Subaccount,
    SubaccountCode,
)

SplitType = Literal["percentage", "flat"]
BearerType = Literal["subaccount", "account", "all-proportional", "all"]


class SplitShareInput(InputModel):
    subaccount: SubaccountCode
    share: int


class SplitCreateInput(InputModel):
    name: str
    type: SplitType
    currency: Currency = "NGN"
    subaccounts: List[SplitShareInput]
    bearer_type: BearerType
    bearer_subaccount: str


class SplitShare(PaystackModel):
    subaccount: Subaccount
    share: int


class Split(PaystackModel):
    id: int
    name: str
    type: SplitType
    currency: Currency = "NGN"
    integration: int
    domain: str
    split_code: str
    active: bool
    bearer_type: BearerType
    createdAt: datetime
    updatedAt: datetime
    is_dynamic: bool
    subaccounts: List[SplitShare]


class SplitWithTotal(Split):
    total_subaccounts: int


class SplitSummary(SplitWithTotal):
    bearer_subaccount: Optional[str]


class SplitCreateSuccess(GenericResponse):
    data: Split


class SplitListInput(GenericInput):
    name: str
    active: bool
    sort_by: Optional[str] = None


class SplitListSuccess(GenericResponse):
    data: List[SplitSummary]
    meta: PageMeta


class SplitSingleSuccess(GenericResponse):
    data: SplitWithTotal


class SplitUpdateInput(InputModel):
    id: str
    name: str
    active: bool
    bearer_type: Optional[BearerType] = None
    bearer_subaccount: Optional[str] = None


class SplitSubaccountInput(InputModel):
    id: str
    subaccount: SubaccountCode
    share: int


class SplitSubaccountUpdateSuccess(GenericResponse):
    data: SplitSummary


class SplitSubaccountRemoveInput(InputModel):
    id: str
    subaccount: SubaccountCode


class SplitSubaccountRemoveError(GenericResponse):
    meta: NextStepMeta
    type: Optional[str] = None
    code: Optional[str] = None
