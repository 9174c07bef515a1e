from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .._http import segment
from ..exceptions import LocalValidationError
from ..types import Document, as_payload

if TYPE_CHECKING:
    from .._http import HttpClient


class FederatedIdentityService:
    """Links between local users and identity provider accounts."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    @staticmethod
    def _path(realm: str, user_id: str, provider_id: Optional[str] = None) -> str:
        path = f"/admin/realms/{segment(realm)}/users/{segment(user_id)}/federated-identity"
        if provider_id:
            path += f"/{segment(provider_id)}"
        return path

    async def find(self, realm: str, user_id: str) -> list:
        if not user_id:
            raise LocalValidationError("userId is missing")
        return await self._http.get(self._path(realm, user_id))

    async def create(
        self,
        realm: str,
        user_id: str,
        provider_id: str,
        representation: Optional[Document],
    ) -> Any:
        """Link ``user_id`` to an account at ``provider_id``.

        The server answers 204 with no body, which is returned as is. The link
        has no identifier of its own, so nothing is re-fetched.
        """
        if not user_id:
            raise LocalValidationError("userId is missing")
        if not provider_id:
            raise LocalValidationError("providerId is missing")
        if representation is None:
            raise LocalValidationError("representation is missing")
        resp = await self._http.post(
            self._path(realm, user_id, provider_id),
            json=as_payload(representation),
            expected_status=204,
        )
        return resp.body

    async def remove(self, realm: str, user_id: str, provider_id: str) -> Any:
        if not user_id:
            raise LocalValidationError("userId is missing")
        if not provider_id:
            raise LocalValidationError("providerId is missing")
        resp = await self._http.delete(self._path(realm, user_id, provider_id), json_response=False)
        return resp.body
