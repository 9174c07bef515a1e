from __future__ import annotations

from typing import Optional

from ._base import Representation


class FederatedIdentityRepresentation(Representation):
    identityProvider: Optional[str] = None
    userId: Optional[str] = None
    userName: Optional[str] = None
