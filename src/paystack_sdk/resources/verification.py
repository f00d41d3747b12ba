"""Bank account and card BIN verification."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, parse_result, prepare_input
from ..schemas.verification import (
    ResolveAccountInput,
    ResolveAccountSuccess,
    ResolveCardBinInput,
    ResolveCardBinSuccess,
    ValidateAccountInput,
    ValidateAccountResponse,
)


class Verification(Fetcher):
    """Client for the ``/bank`` and ``/card`` verification endpoints."""

    async def resolve_account(
        self, account: Union[ResolveAccountInput, Dict[str, Any]]
    ) -> ApiResult:
        """Look up the account name behind an account number."""
        body = prepare_input(ResolveAccountInput, account)
        return await self.request("/bank/resolve", ResolveAccountSuccess, body=body)

    async def validate_account(
        self, account: Union[ValidateAccountInput, Dict[str, Any]]
    ) -> ApiResult:
        """Confirm account ownership.

        Success and failure share the same ``verified`` shape, so the status
        code is not consulted.
        """
        body = prepare_input(ValidateAccountInput, account)
        _, raw = await self.send("/bank/validate", "POST", body)
        return parse_result(ValidateAccountResponse, raw)

    async def resolve_card_bin(
        self, card: Union[ResolveCardBinInput, Dict[str, Any]]
    ) -> ApiResult:
        card_bin = prepare_input(ResolveCardBinInput, card)["card_bin"]
        return await self.request(f"/card/bin/{card_bin}", ResolveCardBinSuccess)
