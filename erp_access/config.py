# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden with an environment variable of the same
    name (case-insensitive) or through a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "ERP Access"
    database_url: str = "sqlite:///./erp_access.db"
    create_tables: bool = True

    session_expiry_days: int = 7
    cookie_secure: bool = False

    cors_origins: list[str] = ["http://localhost:5173"]
    log_level: str = "INFO"

    # Optional bootstrap account, created on startup when no user has that name
    seed_admin_username: str | None = None
    seed_admin_email: str | None = None
    seed_admin_password: str | None = None


settings = Settings()
