"""Account and card verification shapes."""

from typing import Optional, Literal

from .common import GenericResponse, InputModel, PaystackModel


class ResolveAccountInput(InputModel):
    account_number: str
    bank_code: str


class ResolvedAccount(PaystackModel):
    account_number: str
    account_name: str


class ResolveAccountSuccess(GenericResponse):
    data: ResolvedAccount


class ValidateAccountInput(InputModel):
    account_name: str
    account_number: str
    account_type: Literal["personal", "business"]
    bank_code: str
    country_code: str
    document_type: Literal[
        "identityNumber",
        "passportNumber",
        "businessRegistrationNumber",
    ]
    document_number: Optional[str] = None


class AccountValidation(PaystackModel):
    verified: bool
    verificationMessage: str


class ValidateAccountResponse(GenericResponse):
    data: AccountValidation


class ResolveCardBinInput(InputModel):
    card_bin: str


class CardBin(PaystackModel):
    bin: str
    brand: str
    sub_brand: str
    country_code: str
    country_name: str
    card_type: str
    bank: str
    linked_bank_id: int


class ResolveCardBinSuccess(GenericResponse):
    data: CardBin
