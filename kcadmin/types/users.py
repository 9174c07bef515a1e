from __future__ import annotations

from typing import Optional

from ._base import Representation


class UserRepresentation(Representation):
    id: Optional[str] = None
    username: Optional[str] = None
    enabled: Optional[bool] = None
    emailVerified: Optional[bool] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None
    createdTimestamp: Optional[int] = None
    requiredActions: Optional[list[str]] = None
    attributes: Optional[dict[str, list[str]]] = None
