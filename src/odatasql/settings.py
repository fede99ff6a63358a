"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the OData to DocumentDB SQL translator.

    Values are read from ``ODATASQL_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="ODATASQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Query shape
    root_alias: str = "c"  # alias of the document in FROM and field references
    type_field: str = "_t"  # discriminator field holding the document type
    formatter: str = "documentdb"

    # Parse assembled queries with sqlglot and log problems (non-blocking)
    validate_sql: bool = False


def configure_logging(settings: Settings) -> None:
    """Apply ``settings.log_level`` to the root logger (for hosting apps)."""
    logging.basicConfig(level=settings.log_level.upper())
