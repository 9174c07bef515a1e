from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..exceptions import LocalValidationError, TransportError
from ..types import Document, as_payload
from .resources import ResourcesService
from .roles import ClientRolesService

if TYPE_CHECKING:
    from .._http import HttpClient

DEFAULT_INSTALLATION_PROVIDER = "keycloak-oidc-keycloak-json"


class AuthorizationsService:
    def __init__(self, http: HttpClient) -> None:
        self.resources = ResourcesService(http)


class ClientsService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http
        self.roles = ClientRolesService(http)
        self.authorizations = AuthorizationsService(http)

    @staticmethod
    def _path(realm: str, client_id: Optional[str] = None) -> str:
        path = f"/admin/realms/{segment(realm)}/clients"
        if client_id:
            path += f"/{segment(client_id)}"
        return path

    async def find(self, realm: str, options: Optional[dict[str, Any]] = None) -> Any:
        """List the clients of a realm, or fetch one.

        ``options["id"]`` selects a single client by server id. Any other
        option (``clientId``, ``first``, ``max``, ``search``...) is passed as
        a query parameter to the list endpoint.
        """
        params = dict(options or {})
        client_id = params.pop("id", None)
        if client_id:
            return await self._http.get(self._path(realm, client_id))
        return await self._http.get(self._path(realm), params=params or None)

    async def create(self, realm: str, new_client: Optional[Document]) -> dict:
        if new_client is None:
            raise LocalValidationError("client is missing")
        resp = await self._http.post(self._path(realm), json=as_payload(new_client))
        # Empty body; the new id is the last segment of the Location header.
        location = resp.headers.get("location", "").rstrip("/")
        if not location:
            raise TransportError(ValueError("create response did not include a Location header"))
        return await self.find(realm, {"id": location.rsplit("/", 1)[-1]})

    async def update(self, realm: str, updated_client: Optional[Document]) -> dict:
        if updated_client is None:
            raise LocalValidationError("client is missing")
        payload = as_payload(updated_client)
        if not payload.get("id"):
            raise LocalValidationError("client id is missing")
        await self._http.put(self._path(realm, payload["id"]), json=payload)
        return await self.find(realm, {"id": payload["id"]})

    async def remove(self, realm: str, client_id: Optional[str]) -> None:
        if not client_id:
            raise LocalValidationError("id is missing")
        await self._http.delete(self._path(realm, client_id))

    async def get_client_secret(self, realm: str, client_id: str) -> dict:
        if not client_id:
            raise LocalValidationError("id is missing")
        return await self._http.get(f"{self._path(realm, client_id)}/client-secret")

    async def installation(
        self,
        realm: str,
        client_id: str,
        provider: str = DEFAULT_INSTALLATION_PROVIDER,
    ) -> dict:
        """Return the adapter configuration generated for the client by ``provider``."""
        if not client_id:
            raise LocalValidationError("id is missing")
        return await self._http.get(f"{self._path(realm, client_id)}/installation/providers/{segment(provider)}")
