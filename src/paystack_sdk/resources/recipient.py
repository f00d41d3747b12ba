"""Transfer recipients."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, prepare_input
from ..schemas.common import GenericInput, GenericResponse
from ..schemas.recipient import (
    RecipientBulkCreateInput,
    RecipientBulkCreateSuccess,
    RecipientCreateInput,
    RecipientCreateSuccess,
    RecipientListSuccess,
    RecipientSingleSuccess,
    RecipientUpdateInput,
)


class Recipient(Fetcher):
    """Client for the ``/transferrecipient`` endpoints."""

    async def create(self, recipient: Union[RecipientCreateInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(RecipientCreateInput, recipient)
        return await self.request(
            "/transferrecipient", RecipientCreateSuccess, method="POST", body=body
        )

    async def create_bulk(
        self, batch: Union[RecipientBulkCreateInput, Dict[str, Any]]
    ) -> ApiResult:
        """Create several recipients at once; per-item failures land in ``data.errors``."""
        body = prepare_input(RecipientBulkCreateInput, batch)
        return await self.request(
            "/transferrecipient/bulk", RecipientBulkCreateSuccess, method="POST", body=body
        )

    async def list(self, filters: Union[GenericInput, Dict[str, Any], None] = None) -> ApiResult:
        body = prepare_input(GenericInput, filters or {})
        return await self.request("/transferrecipient", RecipientListSuccess, body=body)

    async def get_recipient_by_id(self, id_or_code: str) -> ApiResult:
        return await self.request(f"/transferrecipient/{id_or_code}", RecipientSingleSuccess)

    async def update(self, update: Union[RecipientUpdateInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(RecipientUpdateInput, update)
        id_or_code = body.pop("id_or_code")
        return await self.request(
            f"/transferrecipient/{id_or_code}", GenericResponse, method="PUT", body=body
        )

    async def delete(self, id_or_code: str) -> ApiResult:
        """Deactivate a recipient. The same envelope is used for success and failure."""
        return await self.request(
            f"/transferrecipient/{id_or_code}", GenericResponse, method="DELETE"
        )
