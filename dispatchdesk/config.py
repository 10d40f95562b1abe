# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for DispatchDesk."""

    app_name: str = "DispatchDesk"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./dispatchdesk.db"

    # Sessions
    session_expiry_days: int = 7
    session_cookie_secure: bool = False

    # CORS (comma separated)
    cors_origins: str = "http://localhost:3000"

    # RBAC bootstrap
    seed_on_startup: bool = True
    default_user_role: str = "user"
    sysadmin_username: str = "sysadmin"
    sysadmin_password: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
