"""Request, response and shared shapes for the Paystack REST API."""

from .common import (
    Authorization,
    AuthorizationCore,
    Currency,
    CurrencyAmount,
    CursorMeta,
    Customer,
    CustomerBase,
    CustomerContact,
    CustomerProfile,
    GenericInput,
    GenericResponse,
    InputModel,
    Log,
    LogCore,
    NextStepMeta,
    PageMeta,
    PaystackModel,
    Plan,
    PlanSummary,
    Subaccount,
)

__all__ = [
    # Base classes
    "PaystackModel",
    "InputModel",
    # Envelopes
    "GenericResponse",
    "GenericInput",
    "PageMeta",
    "CursorMeta",
    "NextStepMeta",
    # Shared shapes
    "Currency",
    "CurrencyAmount",
    "Authorization",
    "AuthorizationCore",
    "Customer",
    "CustomerBase",
    "CustomerContact",
    "CustomerProfile",
    "Log",
    "LogCore",
    "Plan",
    "PlanSummary",
    "Subaccount",
]
