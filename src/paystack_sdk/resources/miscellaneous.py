"""Supporting lookups: banks, countries and states."""

from typing import Union, Dict, Any

from ..fetcher import ApiResult, Fetcher, prepare_input
from ..schemas.miscellaneous import (
    ListBanksInput,
    ListBanksSuccess,
    ListCountriesSuccess,
    ListStatesInput,
    ListStatesSuccess,
)


class Miscellaneous(Fetcher):

    async def list_banks(self, filters: Union[ListBanksInput, Dict[str, Any]]) -> ApiResult:
        body = prepare_input(ListBanksInput, filters)
        return await self.request("/bank", ListBanksSuccess, body=body)

    async def list_countries(self) -> ApiResult:
        return await self.request("/country", ListCountriesSuccess)

    async def list_states(self, filters: Union[ListStatesInput, Dict[str, Any]]) -> ApiResult:
        """States used for address verification in ``filters.country``."""
        body = prepare_input(ListStatesInput, filters)
        return await self.request("/address_verification/states", ListStatesSuccess, body=body)
