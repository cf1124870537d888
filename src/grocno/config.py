"""Runtime settings for grocno.

Loaded with Pydantic Settings from environment variables (and an
optional ``.env`` file in the working directory).  CLI flags override
these values per invocation.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    data_dir: Path = Field(Path.home() / ".grocno", alias="GROCNO_DATA_DIR")

    # Catalog
    default_sort: Literal["price", "name"] | None = Field(None, alias="GROCNO_DEFAULT_SORT")

    # Logging
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached :class:`Settings` so the environment is parsed once."""
    return Settings()


__all__ = ["Settings", "get_settings"]
