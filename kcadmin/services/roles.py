from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..exceptions import LocalValidationError
from ..types import Document, as_payload

if TYPE_CHECKING:
    from .._http import HttpClient


class ClientRolesService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    @staticmethod
    def _path(realm: str, client_id: str, role_name: Optional[str] = None) -> str:
        path = f"/admin/realms/{segment(realm)}/clients/{segment(client_id)}/roles"
        if role_name:
            path += f"/{segment(role_name)}"
        return path

    async def find(self, realm: str, client_id: str, role_name: Optional[str] = None) -> Any:
        return await self._http.get(self._path(realm, client_id, role_name))

    async def create(self, realm: str, client_id: str, new_role: Optional[Document]) -> dict:
        if new_role is None:
            raise LocalValidationError("role is missing")
        payload = as_payload(new_role)
        if not payload.get("name"):
            raise LocalValidationError("role name is missing")
        await self._http.post(self._path(realm, client_id), json=payload)
        return await self.find(realm, client_id, payload["name"])
