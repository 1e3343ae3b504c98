"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for runner label rewriting.

    Values are read from ``RELABEL_``-prefixed environment variables and from
    a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="RELABEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Parser safety limits
    max_document_size: int = 5_000_000  # characters
    max_node_count: int = 50_000
    max_depth: int = 50

    # Reserved workflow keys
    jobs_key: str = "jobs"
    runner_key: str = "runs-on"


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``settings.log_level`` to the root logger (for hosting tools)."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())
