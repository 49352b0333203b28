# pathroute/core/config.py
"""
Process-level settings.

Environment variables override defaults. Routing rules themselves
(collections, type prefixes, tenant domains) live in the YAML files named
by ``router_config_paths``.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_format: str = Field(default="text", description="'text' or 'json'")

    # Config file paths (glob patterns)
    router_config_paths: list[str] = Field(
        default_factory=lambda: ["config/router.yaml"]
    )

    tenant_header: str = Field(
        default="x-tenant",
        description="Header carrying an explicit tenant slug",
    )


settings = Settings()
