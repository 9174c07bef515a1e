"""kcadmin SDK client."""

from __future__ import annotations

from typing import Optional

import httpx

from ._http import HttpClient, TokenProvider
from .config import ClientSettings
from .services import ClientsService, FederatedIdentityService, UsersService


class KeycloakAdminClient:
    """Main client for the Keycloak Admin REST API.

    ``token`` is either an access token string or a callable (sync or async)
    returning the current one; it is read once per request and never
    refreshed here.

    Usage:
        async with KeycloakAdminClient("http://localhost:8080", token) as client:
            resources = await client.clients.authorizations.resources.find("master", client_uuid)
            await client.federated_identity.create("master", user_id, "github", link)
    """

    def __init__(
        self,
        base_url: str,
        token: TokenProvider,
        *,
        timeout: Optional[float] = None,
        verify: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._http = HttpClient(
            base_url,
            token,
            timeout=timeout,
            verify=verify,
            transport=transport,
            client=http_client,
        )
        self.clients = ClientsService(self._http)
        self.users = UsersService(self._http)
        self.federated_identity = FederatedIdentityService(self._http)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        token: TokenProvider,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> KeycloakAdminClient:
        return cls(
            settings.base_url,
            token,
            timeout=settings.timeout_seconds,
            verify=settings.verify_ssl,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._http.base_url

    async def aclose(self) -> None:
        """Close the underlying HTTP client, unless it was supplied by the caller."""
        await self._http.aclose()

    async def __aenter__(self) -> KeycloakAdminClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"KeycloakAdminClient(base_url={self.base_url!r})"
