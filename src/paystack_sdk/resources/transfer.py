"""Transfers: send money from the integration balance to recipients."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, prepare_input
from ..schemas.transfer import (
    TransferBulkInitiateInput,
    TransferBulkInitiateSuccess,
    TransferError,
    TransferFinalizeInput,
    TransferFinalizeSuccess,
    TransferInitiateInput,
    TransferInitiateSuccess,
    TransferListInput,
    TransferListSuccess,
    TransferSingleSuccess,
)


class Transfer(Fetcher):
    """Client for the ``/transfer`` endpoints."""

    async def initiate(self, transfer: Union[TransferInitiateInput, Dict[str, Any]]) -> ApiResult:
        """Start a single transfer.

        Upstream rejections are validated against ``TransferError``, which
        carries the ``meta.nextStep`` hint.
        """
        body = prepare_input(TransferInitiateInput, transfer)
        return await self.request(
            "/transfer",
            TransferInitiateSuccess,
            method="POST",
            body=body,
            error_model=TransferError,
        )

    async def finalize(self, finalize: Union[TransferFinalizeInput, Dict[str, Any]]) -> ApiResult:
        """Complete a transfer that requires OTP confirmation."""
        body = prepare_input(TransferFinalizeInput, finalize)
        return await self.request(
            "/transfer/finalize_transfer", TransferFinalizeSuccess, method="POST", body=body
        )

    async def initiate_bulk(
        self, transfers: Union[TransferBulkInitiateInput, Dict[str, Any]]
    ) -> ApiResult:
        body = prepare_input(TransferBulkInitiateInput, transfers)
        return await self.request(
            "/transfer/bulk",
            TransferBulkInitiateSuccess,
            method="POST",
            body=body,
            error_model=TransferError,
        )

    async def list(
        self, filters: Union[TransferListInput, Dict[str, Any], None] = None
    ) -> ApiResult:
        body = prepare_input(TransferListInput, filters or {})
        return await self.request("/transfer", TransferListSuccess, body=body)

    async def get_transfer_by_id(self, id_or_code: str) -> ApiResult:
        return await self.request(f"/transfer/{id_or_code}", TransferSingleSuccess)

    async def verify(self, reference: str) -> ApiResult:
        return await self.request(f"/transfer/verify/{reference}", TransferSingleSuccess)
