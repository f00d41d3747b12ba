"""HTTP exchange shared by every Paystack resource module."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Dict, Any, List, Tuple, Type, TypeVar, Generic, Union

import httpx
from pydantic import BaseModel, ValidationError

from .schemas.common import GenericResponse

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
InputT = TypeVar("InputT", bound=BaseModel)


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of a resource call.

    Exactly one of ``data`` and ``error`` is set. Upstream error responses
    are returned as ``data`` validated against the endpoint's error shape.
    ``error`` holds the validation failure when the body matched neither.
    """
    data: Optional[T] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_result(model: Type[T], raw: Any) -> ApiResult:
    """Validate a decoded response body against ``model``."""
    try:
        return ApiResult(data=model.model_validate(raw))
    except ValidationError as e:
        return ApiResult(error=e)


def prepare_input(model: Type[InputT], value: Union[InputT, Dict[str, Any]]) -> Dict[str, Any]:
    """Validate caller input and render it with wire-format keys.

    Raises:
        ValidationError: If ``value`` does not satisfy ``model``.
    """
    if not isinstance(value, model):
        value = model.model_validate(value)
    return value.model_dump(mode="json", by_alias=True, exclude_none=True)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def encode_query(body: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Flatten a body into query parameters; lists repeat their key."""
    params: List[Tuple[str, str]] = []
    for key, value in body.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, _query_value(v)) for v in value)
        else:
            params.append((key, _query_value(value)))
    return params


class Fetcher:
    """Base for resource modules.

    Builds the request (bearer auth, query string for GET, JSON body
    otherwise), performs it on the shared client and decodes the JSON body.
    """

    def __init__(self, secret_key: str, base_url: str, http_client: httpx.AsyncClient):
        self._secret_key = secret_key
        self._base_url = base_url.rstrip("/")
        self._http = http_client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    async def send(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
    ) -> Tuple[httpx.Response, Any]:
        """Perform a request against the API.

        Args:
            path: Endpoint path, appended to the base URL.
            method: HTTP method.
            body: Query parameters for GET, JSON body for other methods.

        Returns:
            The raw response and its decoded JSON body (None if not JSON).

        Raises:
            httpx.HTTPError: On transport failures.
        """
        url = f"{self._base_url}{path}"
        headers = {"Authorization": f"Bearer {self._secret_key}"}
        params = None
        json_body = None
        if method == "GET":
            if body:
                params = encode_query(body) or None
        elif body is not None:
            json_body = body

        response = await self._http.request(
            method, url, headers=headers, params=params, json=json_body
        )
        try:
            raw = response.json()
        except ValueError:
            raw = None

        if not response.is_success:
            logger.error(f"API error response ({response.status_code}) for {method} {path}: {raw}")
        return response, raw

    async def request(
        self,
        path: str,
        success_model: Type[T],
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        error_model: Type[BaseModel] = GenericResponse,
    ) -> ApiResult:
        """Fetch ``path`` and validate the body against the matching shape."""
        response, raw = await self.send(path, method, body)
        model = success_model if response.is_success else error_model
        return parse_result(model, raw)
