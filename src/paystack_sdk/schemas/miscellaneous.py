"""Lookup shapes: banks, countries and states."""

from datetime import datetime
from typing import Optional, Dict, Any, List, Literal

from pydantic import Field

from .common import Currency, GenericResponse, InputModel, PaystackModel


class ListBanksInput(InputModel):
    country: Literal["ghana", "kenya", "nigeria", "south africa"]
    use_cursor: bool = False
    per_page: int = Field(default=50, le=100, alias="perPage")
    pay_with_bank_transfer: Optional[bool] = None
    pay_with_bank: Optional[bool] = None
    enabled_for_verification: Optional[bool] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    gateway: Optional[Literal["emandate", "digitalBankMandate"]] = None
    type: Optional[str] = None
    currency: Optional[Currency] = None
    include_nip_sort_code: Optional[bool] = None


class Bank(PaystackModel):
    name: str
    slug: str
    code: str
    longcode: str
    gateway: Optional[Any] = None
    pay_with_bank: bool
    active: bool
    is_deleted: bool
    country: str
    currency: Currency = "NGN"
    type: str
    id: int
    createdAt: Optional[datetime]
    updatedAt: Optional[datetime]


class ListBanksSuccess(GenericResponse):
    data: List[Bank]


class Relationship(PaystackModel):
    type: str
    data: List[str]


class CountryRelationships(PaystackModel):
    currency: Relationship
    integration_feature: Relationship
    integration_type: Relationship
    payment_method: Relationship


class Country(PaystackModel):
    id: int
    name: str
    iso_code: str
    default_currency_code: str
    integration_defaults: Dict[str, Any]
    relationships: CountryRelationships


class ListCountriesSuccess(GenericResponse):
    data: List[Country]


class ListStatesInput(InputModel):
    country: str


class State(PaystackModel):
    name: str
    slug: str
    abbreviation: str


class ListStatesSuccess(GenericResponse):
    data: List[State]
