from __future__ import annotations

from typing import Optional

from ._base import Representation


class ClientRepresentation(Representation):
    id: Optional[str] = None
    clientId: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    protocol: Optional[str] = None
    publicClient: Optional[bool] = None
    bearerOnly: Optional[bool] = None
    serviceAccountsEnabled: Optional[bool] = None
    authorizationServicesEnabled: Optional[bool] = None
    redirectUris: Optional[list[str]] = None
    webOrigins: Optional[list[str]] = None
    rootUrl: Optional[str] = None
    baseUrl: Optional[str] = None


class CredentialRepresentation(Representation):
    type: Optional[str] = None
    value: Optional[str] = None
