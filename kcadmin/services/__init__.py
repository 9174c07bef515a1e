from __future__ import annotations

from .clients import AuthorizationsService, ClientsService
from .federated_identity import FederatedIdentityService
from .resources import ResourcesService
from .roles import ClientRolesService
from .users import RoleMappingsService, UsersService

__all__ = [
    "AuthorizationsService",
    "ClientRolesService",
    "ClientsService",
    "FederatedIdentityService",
    "ResourcesService",
    "RoleMappingsService",
    "UsersService",
]
