"""Runtime configuration.

Values come from ``STOREFRONT_*`` environment variables or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    data_dir: Path = Field(default=_PROJECT_ROOT / "data")
    default_store_id: int | None = Field(
        default=None,
        description="Store used when a command does not name one; None means the primary store",
    )
    currency: str = Field(default="USD", min_length=3, max_length=3)
    log_level: str = Field(default="WARNING")
    log_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
