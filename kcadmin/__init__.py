"""Keycloak Admin REST API async client."""

import logging

from .client import KeycloakAdminClient
from .config import ClientSettings
from .exceptions import (
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    KeycloakAdminError,
    LocalValidationError,
    NotFoundError,
    ServerError,
    TransportError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KeycloakAdminClient",
    "ClientSettings",
    "KeycloakAdminError",
    "LocalValidationError",
    "TransportError",
    "ServerError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
