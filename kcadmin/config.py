from __future__ import annotations

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "http://localhost:8080"


class ClientSettings(BaseSettings):
    """Connection settings read from ``KEYCLOAK_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KEYCLOAK_",
        case_sensitive=False,
        env_ignore_empty=True,
        frozen=True,
    )

    base_url: str = DEFAULT_BASE_URL
    # None keeps the httpx default timeout.
    timeout_seconds: Optional[float] = None
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> ClientSettings:
        return cls()

    @field_validator("base_url")
    @classmethod
    def base_url_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("KEYCLOAK_BASE_URL must not be empty")
        return value

    @field_validator("timeout_seconds")
    @classmethod
    def timeout_positive(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("KEYCLOAK_TIMEOUT_SECONDS must be greater than 0")
        return value
