from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..exceptions import LocalValidationError
from ..types import Document, as_payload

if TYPE_CHECKING:
    from .._http import HttpClient


def _user_path(realm: str, user_id: Optional[str] = None) -> str:
    path = f"/admin/realms/{segment(realm)}/users"
    if user_id:
        path += f"/{segment(user_id)}"
    return path


class RoleMappingsService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def find(self, realm: str, user_id: str) -> dict:
        """Return the realm and client role mappings of a user."""
        if not user_id:
            raise LocalValidationError("userId is missing")
        return await self._http.get(f"{_user_path(realm, user_id)}/role-mappings")


class UsersService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http
        self.role_mappings = RoleMappingsService(http)

    async def find(self, realm: str, options: Optional[dict[str, Any]] = None) -> Any:
        """List users, or fetch one with ``options["userId"]``.

        Remaining options (``username``, ``email``, ``search``, ``first``,
        ``max``...) become query parameters.
        """
        params = dict(options or {})
        user_id = params.pop("userId", None)
        if user_id:
            return await self._http.get(_user_path(realm, user_id))
        return await self._http.get(_user_path(realm), params=params or None)

    async def update(self, realm: str, user: Optional[Document]) -> dict:
        if user is None:
            raise LocalValidationError("user is missing")
        payload = as_payload(user)
        if not payload.get("id"):
            raise LocalValidationError("user id is missing")
        await self._http.put(_user_path(realm, payload["id"]), json=payload)
        return await self.find(realm, {"userId": payload["id"]})

    async def remove(self, realm: str, user_id: Optional[str]) -> None:
        if not user_id:
            raise LocalValidationError("userId is missing")
        await self._http.delete(_user_path(realm, user_id))
