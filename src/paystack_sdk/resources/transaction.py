"""Transactions: accept payments and inspect their outcome."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, prepare_input
from ..schemas.common import GenericInput
from ..schemas.transaction import (
    ChargeAuthorizationInput,
    ChargeAuthorizationSuccess,
    PartialDebitInput,
    PartialDebitSuccess,
    TransactionExportInput,
    TransactionExportSuccess,
    TransactionInitializeInput,
    TransactionInitializeSuccess,
    TransactionListInput,
    TransactionListSuccess,
    TransactionSingleSuccess,
    TransactionTimelineSuccess,
    TransactionTotalsSuccess,
    TransactionVerifySuccess,
)


class Transaction(Fetcher):
    """Client for the ``/transaction`` endpoints."""

    async def initialize(
        self, transaction: Union[TransactionInitializeInput, Dict[str, Any]]
    ) -> ApiResult:
        """Initialize a transaction and obtain its checkout URL."""
        body = prepare_input(TransactionInitializeInput, transaction)
        return await self.request(
            "/transaction/initialize", TransactionInitializeSuccess, method="POST", body=body
        )

    async def verify(self, reference: str) -> ApiResult:
        """Confirm the status of a transaction by its reference."""
        return await self.request(f"/transaction/verify/{reference}", TransactionVerifySuccess)

    async def list(
        self, filters: Union[TransactionListInput, Dict[str, Any], None] = None
    ) -> ApiResult:
        body = prepare_input(TransactionListInput, filters or {})
        return await self.request("/transaction", TransactionListSuccess, body=body)

    async def get_transaction_by_id(self, id: int) -> ApiResult:
        return await self.request(f"/transaction/{id}", TransactionSingleSuccess)

    async def charge_authorization(
        self, charge: Union[ChargeAuthorizationInput, Dict[str, Any]]
    ) -> ApiResult:
        """Charge a reusable authorization without customer interaction."""
        body = prepare_input(ChargeAuthorizationInput, charge)
        return await self.request(
            "/transaction/charge_authorization",
            ChargeAuthorizationSuccess,
            method="POST",
            body=body,
        )

    async def view_timeline(self, id_or_reference: str) -> ApiResult:
        return await self.request(
            f"/transaction/timeline/{id_or_reference}", TransactionTimelineSuccess
        )

    async def get_totals(
        self, filters: Union[GenericInput, Dict[str, Any], None] = None
    ) -> ApiResult:
        """Total amount received over a period."""
        body = prepare_input(GenericInput, filters or {})
        return await self.request("/transaction/totals", TransactionTotalsSuccess, body=body)

    async def export(
        self, filters: Union[TransactionExportInput, Dict[str, Any], None] = None
    ) -> ApiResult:
        """Request a CSV export; the response carries a time-limited download URL."""
        body = prepare_input(TransactionExportInput, filters or {})
        return await self.request("/transaction/export", TransactionExportSuccess, body=body)

    async def partial_debit(
        self, debit: Union[PartialDebitInput, Dict[str, Any]]
    ) -> ApiResult:
        """Debit part of an amount from an authorization."""
        body = prepare_input(PartialDebitInput, debit)
        return await self.request(
            "/transaction/partial_debit", PartialDebitSuccess, method="POST", body=body
        )
