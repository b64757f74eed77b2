"""
Pydantic models for the files the tool reads and writes.

- `Auth0Credentials`: the Deploy CLI config file (`config.json`)
- `TenantSettings`: `tenant.json` in the empty scaffold
- `DatabaseConnection`: the default database connection descriptor
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

REQUIRED_CREDENTIAL_FIELDS = ("domain", "client_id", "client_secret")


class Auth0Credentials(BaseModel):
    """
    Management API credentials in the Auth0 Deploy CLI config format.

    Serialized with the AUTH0_* keys the Deploy CLI expects. A record is
    usable only when domain, client ID and client secret are all non-empty.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    domain: str = Field(default="", alias="AUTH0_DOMAIN")
    client_id: str = Field(default="", alias="AUTH0_CLIENT_ID")
    client_secret: str = Field(default="", alias="AUTH0_CLIENT_SECRET", repr=False)
    allow_delete: bool = Field(default=True, alias="AUTH0_ALLOW_DELETE")

    @field_validator("domain", "client_id", "client_secret", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """A JSON null counts as an empty value, not a type error."""
        return "" if v is None else v

    @field_validator("allow_delete", mode="before")
    @classmethod
    def parse_allow_delete(cls, v: Any) -> bool:
        """Parse allow_delete from bool or string; anything else falls back to True."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str) and v.strip().lower() in ("true", "false"):
            return v.strip().lower() == "true"
        return True

    @property
    def missing_fields(self) -> list[str]:
        """Required fields that are empty or whitespace-only."""
        return [name for name in REQUIRED_CREDENTIAL_FIELDS if not getattr(self, name).strip()]

    def is_complete(self) -> bool:
        return not self.missing_fields

    def to_config(self) -> dict[str, Any]:
        """Deploy CLI config payload (AUTH0_* keys)."""
        return self.model_dump(by_alias=True)


class TenantSettings(BaseModel):
    """Tenant-level settings written to tenant.json."""

    friendly_name: str
    picture_url: str = ""
    support_email: str = ""
    support_url: str = ""


class DatabaseConnection(BaseModel):
    """Database connection descriptor in the Deploy CLI directory format."""

    name: str = Field(..., min_length=1)
    strategy: str = "auth0"
    enabled_clients: list[str] = Field(default_factory=list)
