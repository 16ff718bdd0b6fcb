"""Application configuration via pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sha1_digest.padding import BLOCK_SIZE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHA1_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # File read unit; whole blocks only
    chunk_size: int = 4096

    log_level: LogLevel = "INFO"

    @field_validator("chunk_size")
    @classmethod
    def _check_chunk_size(cls, value: int) -> int:
        if value <= 0 or value % BLOCK_SIZE:
            raise ValueError(f"chunk_size must be a positive multiple of {BLOCK_SIZE}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def get_settings(**overrides: object) -> Settings:
    """Create a Settings instance, allowing overrides for testing."""
    return Settings(**overrides)  # type: ignore[arg-type]
