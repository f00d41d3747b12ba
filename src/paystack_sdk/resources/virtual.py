"""Dedicated virtual accounts."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, prepare_input
from ..schemas.common import GenericResponse
from ..schemas.virtual import (
    FetchBanksSuccess,
    VirtualAccountAddSplitInput,
    VirtualAccountAddSplitSuccess,
    VirtualAccountAssignInput,
    VirtualAccountCreateInput,
    VirtualAccountCreateSuccess,
    VirtualAccountDeleteSuccess,
    VirtualAccountFetchSuccess,
    VirtualAccountListInput,
    VirtualAccountListSuccess,
    VirtualAccountRemoveSplitInput,
    VirtualAccountRemoveSplitSuccess,
    VirtualAccountRequeryInput,
)


class VirtualAccount(Fetcher):
    """Client for the ``/dedicated_account`` endpoints."""

    async def create(
        self, account: Union[VirtualAccountCreateInput, Dict[str, Any]]
    ) -> ApiResult:
        """Create a dedicated account for an existing customer."""
        body = prepare_input(VirtualAccountCreateInput, account)
        return await self.request(
            "/dedicated_account", VirtualAccountCreateSuccess, method="POST", body=body
        )

    async def assign(
        self, assignment: Union[VirtualAccountAssignInput, Dict[str, Any]]
    ) -> ApiResult:
        """Create a customer, validate them and assign an account in one call.

        The outcome arrives later as a ``dedicatedaccount.assign.*`` webhook.
        """
        body = prepare_input(VirtualAccountAssignInput, assignment)
        return await self.request(
            "/dedicated_account/assign", GenericResponse, method="POST", body=body
        )

    async def list(self, filters: Union[VirtualAccountListInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(VirtualAccountListInput, filters)
        return await self.request("/dedicated_account", VirtualAccountListSuccess, body=body)

    async def fetch(self, dedicated_account_id: str) -> ApiResult:
        return await self.request(
            f"/dedicated_account/{dedicated_account_id}", VirtualAccountFetchSuccess
        )

    async def requery(self, query: Union[VirtualAccountRequeryInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(VirtualAccountRequeryInput, query)
        return await self.request("/dedicated_account/requery", GenericResponse, body=body)

    async def deactivate(self, dedicated_account_id: str) -> ApiResult:
        return await self.request(
            f"/dedicated_account/{dedicated_account_id}",
            VirtualAccountDeleteSuccess,
            method="DELETE",
        )

    async def add_split(
        self, split: Union[VirtualAccountAddSplitInput, Dict[str, Any]]
    ) -> ApiResult:
        body = prepare_input(VirtualAccountAddSplitInput, split)
        return await self.request(
            "/dedicated_account/split", VirtualAccountAddSplitSuccess, method="POST", body=body
        )

    async def remove_split(
        self, split: Union[VirtualAccountRemoveSplitInput, Dict[str, Any]]
    ) -> ApiResult:
        body = prepare_input(VirtualAccountRemoveSplitInput, split)
        return await self.request(
            "/dedicated_account/split",
            VirtualAccountRemoveSplitSuccess,
            method="DELETE",
            body=body,
        )

    async def fetch_banks(self) -> ApiResult:
        """Providers available for dedicated accounts."""
        return await self.request("/dedicated_account/available_providers", FetchBanksSuccess)
