"""Transaction splits across subaccounts."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, prepare_input
from ..schemas.common import GenericResponse
from ..schemas.split import (
    SplitCreateInput,
    SplitCreateSuccess,
    SplitListInput,
    SplitListSuccess,
    SplitSingleSuccess,
    SplitSubaccountInput,
    SplitSubaccountRemoveError,
    SplitSubaccountRemoveInput,
    SplitSubaccountUpdateSuccess,
    SplitUpdateInput,
)


class Split(Fetcher):
    """Client for the ``/split`` endpoints."""

    async def create(self, split: Union[SplitCreateInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(SplitCreateInput, split)
        return await self.request("/split", SplitCreateSuccess, method="POST", body=body)

    async def list(self, filters: Union[SplitListInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(SplitListInput, filters)
        return await self.request("/split", SplitListSuccess, body=body)

    async def get_split_by_id(self, id: str) -> ApiResult:
        return await self.request(f"/split/{id}", SplitSingleSuccess)

    async def update(self, update: Union[SplitUpdateInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(SplitUpdateInput, update)
        split_id = body.pop("id")
        return await self.request(f"/split/{split_id}", SplitSingleSuccess, method="PUT", body=body)

    async def add_or_update_subaccount(
        self, share: Union[SplitSubaccountInput, Dict[str, Any]]
    ) -> ApiResult:
        body = prepare_input(SplitSubaccountInput, share)
        split_id = body.pop("id")
        return await self.request(
            f"/split/{split_id}/subaccount/add",
            SplitSubaccountUpdateSuccess,
            method="POST",
            body=body,
        )

    async def remove_subaccount(
        self, share: Union[SplitSubaccountRemoveInput, Dict[str, Any]]
    ) -> ApiResult:
        body = prepare_input(SplitSubaccountRemoveInput, share)
        split_id = body.pop("id")
        return await self.request(
            f"/split/{split_id}/subaccount/remove",
            GenericResponse,
            method="POST",
            body=body,
            error_model=SplitSubaccountRemoveError,
        )
