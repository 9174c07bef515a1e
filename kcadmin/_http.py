"""Internal HTTP transport for the kcadmin SDK."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union
from urllib.parse import quote

import httpx

from .exceptions import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TransportError,
)

logger = logging.getLogger(__name__)

TokenProvider = Union[str, Callable[[], Union[str, Awaitable[str]]]]

_ERROR_MAP: dict[int, type[ServerError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def segment(value: Any) -> str:
    """Percent-encode a single path segment (realm names may contain spaces)."""
    return quote(str(value), safe="")


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: Any
    headers: httpx.Headers


class HttpClient:
    """Low-level async HTTP client wrapping httpx.

    Every call reads the bearer token once from ``token``, which is either a
    string snapshot or a callable (sync or async) returning the current token.
    """

    def __init__(
        self,
        base_url: str,
        token: TokenProvider,
        *,
        timeout: Optional[float] = None,
        verify: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token
        if client is not None:
            self._client = client
            self._owns_client = False
        else:
            kwargs: dict[str, Any] = {"verify": verify}
            if timeout is not None:
                kwargs["timeout"] = timeout
            if transport is not None:
                kwargs["transport"] = transport
            self._client = httpx.AsyncClient(**kwargs)
            self._owns_client = True

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _access_token(self) -> str:
        if isinstance(self._token, str):
            return self._token
        token = self._token()
        if inspect.isawaitable(token):
            token = await token
        return token

    async def _headers(self, json_response: bool) -> dict[str, str]:
        headers: dict[str, str] = {"Authorization": f"Bearer {await self._access_token()}"}
        if json_response:
            headers["Accept"] = "application/json"
        return headers

    @staticmethod
    def _parse_body(resp: httpx.Response, json_response: bool) -> Any:
        if not resp.content:
            return None
        if not json_response:
            return resp.text
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(e) from e

    @staticmethod
    def _error_body(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def _handle_response(self, resp: httpx.Response, expected_status: int, json_response: bool) -> ApiResponse:
        if resp.status_code == expected_status:
            return ApiResponse(resp.status_code, self._parse_body(resp, json_response), resp.headers)

        body = self._error_body(resp)
        logger.warning(
            "%s %s returned %s (expected %s)",
            resp.request.method, resp.request.url, resp.status_code, expected_status,
        )
        cls = _ERROR_MAP.get(resp.status_code)
        if cls is None:
            raise ServerError(resp.status_code, body)
        raise cls(body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        expected_status: int = 200,
        json_response: bool = True,
    ) -> ApiResponse:
        url = f"{self._base_url}{path}"
        headers = await self._headers(json_response)
        logger.debug("%s %s", method, url)
        try:
            resp = await self._client.request(method, url, headers=headers, json=json, params=params)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(e) from e
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return self._handle_response(resp, expected_status, json_response)

    async def get(self, path: str, params: Optional[dict[str, Any]] = None, expected_status: int = 200) -> Any:
        resp = await self.request("GET", path, params=params, expected_status=expected_status)
        return resp.body

    async def post(self, path: str, json: Any = None, expected_status: int = 201) -> ApiResponse:
        return await self.request("POST", path, json=json, expected_status=expected_status)

    async def put(self, path: str, json: Any = None, expected_status: int = 204) -> ApiResponse:
        return await self.request("PUT", path, json=json, expected_status=expected_status)

    async def delete(self, path: str, expected_status: int = 204, json_response: bool = True) -> ApiResponse:
        return await self.request("DELETE", path, expected_status=expected_status, json_response=json_response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
