from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..exceptions import LocalValidationError, TransportError
from ..types import Document, as_payload

if TYPE_CHECKING:
    from .._http import HttpClient


class ResourcesService:
    """Authorization resources registered under a client's resource server.

    ``client_id`` is always the server-assigned id of the client, not its
    ``clientId``.
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    @staticmethod
    def _path(realm: str, client_id: str, resource_id: Optional[str] = None) -> str:
        path = f"/admin/realms/{segment(realm)}/clients/{segment(client_id)}/authz/resource-server/resource"
        if resource_id:
            path += f"/{segment(resource_id)}"
        return path

    async def create(self, realm: str, client_id: str, resource: Optional[Document]) -> dict:
        """Create a resource and return it as stored by the server.

        The name must be unique within the client; a duplicate raises
        ``ConflictError``.
        """
        if resource is None:
            raise LocalValidationError("resource is missing")
        resp = await self._http.post(self._path(realm, client_id), json=as_payload(resource))
        created = resp.body if isinstance(resp.body, dict) else {}
        resource_id = created.get("_id")
        if not resource_id:
            raise TransportError(ValueError("create response did not include the resource _id"))
        return await self.find(realm, client_id, resource_id)

    async def find(self, realm: str, client_id: str, resource_id: Optional[str] = None) -> Any:
        """Return every resource of the client, or a single one when ``resource_id`` is given."""
        return await self._http.get(self._path(realm, client_id, resource_id))

    async def update(self, realm: str, client_id: str, resource: Optional[Document]) -> dict:
        """Replace a resource with ``resource`` (which must carry its ``_id``) and return the stored copy."""
        if resource is None:
            raise LocalValidationError("resource is missing")
        payload = as_payload(resource)
        resource_id = payload.get("_id")
        if not resource_id:
            raise LocalValidationError("resource _id is missing")
        await self._http.put(self._path(realm, client_id, resource_id), json=payload)
        return await self.find(realm, client_id, resource_id)

    async def remove(self, realm: str, client_id: str, resource_id: Optional[str]) -> None:
        if not resource_id:
            raise LocalValidationError("resourceId is missing")
        await self._http.delete(self._path(realm, client_id, resource_id))
