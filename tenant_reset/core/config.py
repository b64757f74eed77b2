"""Tool configuration using Pydantic Settings.

Values come from environment variables prefixed with ``TENANT_RESET_``.

Optionally, you may point `ENV_FILE` at a local env file. Nothing is loaded
from `.env` unless it is requested explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fixed by the Auth0 Deploy CLI directory format
SCAFFOLD_SUBDIRECTORIES = (
    "database-connections",
    "clients",
    "resource-servers",
    "rules",
    "hooks",
    "actions",
    "pages",
)


class Settings(BaseSettings):
    """
    Settings for a tenant reset run.

    Every field has a default, so running the tool with no environment at all
    resets the tenant from the current working directory.
    """

    model_config = SettingsConfigDict(
        env_file=os.getenv("ENV_FILE") or None,
        env_prefix="TENANT_RESET_",
        extra="ignore",
    )

    # Working area
    base_dir: Path = Field(default_factory=Path.cwd)
    credentials_filename: str = "config.json"
    scaffold_dirname: str = "tenant"

    # External executables
    auth0_cli: str = "auth0"
    deploy_cli: str = "a0deploy"

    # `auth0 roles list` returns a single default-sized page unless asked for more
    role_list_limit: int = Field(default=1000, ge=1, le=1000)

    # Scaffold content
    tenant_friendly_name: str = "My Auth0 Tenant"
    default_connection_name: str = "Username-Password-Authentication"

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log_level and reject names the logging module does not know."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a standard logging level, got '{v}'")
        return level

    @field_validator("credentials_filename", "scaffold_dirname", "default_connection_name")
    @classmethod
    def validate_plain_name(cls, v: str) -> str:
        """These names become single path components and must stay inside their parent."""
        name = v.strip()
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(f"must be a plain file or directory name, got '{v}'")
        return name


@dataclass(frozen=True)
class ResetPaths:
    """Filesystem locations used by one run, resolved once from the settings."""

    base_dir: Path
    credentials_file: Path
    scaffold_dir: Path

    @classmethod
    def from_settings(cls, settings: Settings) -> ResetPaths:
        base_dir = settings.base_dir.expanduser().resolve()
        return cls(
            base_dir=base_dir,
            credentials_file=base_dir / settings.credentials_filename,
            scaffold_dir=base_dir / settings.scaffold_dirname,
        )
