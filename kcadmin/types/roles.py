from __future__ import annotations

from typing import Any, Optional

from ._base import Representation


class RoleRepresentation(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    composite: Optional[bool] = None
    clientRole: Optional[bool] = None
    containerId: Optional[str] = None
    attributes: Optional[dict[str, list[str]]] = None


class MappingsRepresentation(Representation):
    realmMappings: Optional[list[RoleRepresentation]] = None
    clientMappings: Optional[dict[str, Any]] = None
