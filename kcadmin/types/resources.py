from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from ._base import Representation


class ScopeRepresentation(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    displayName: Optional[str] = None
    iconUri: Optional[str] = None


class ResourceRepresentation(Representation):
    # The server keys the resource identifier as "_id".
    id: Optional[str] = Field(default=None, alias="_id")
    name: Optional[str] = None
    displayName: Optional[str] = None
    type: Optional[str] = None
    uris: Optional[list[str]] = None
    scopes: Optional[list[ScopeRepresentation]] = None
    owner: Optional[Any] = None
    ownerManagedAccess: Optional[bool] = None
    icon_uri: Optional[str] = None
    attributes: Optional[dict[str, list[str]]] = None
