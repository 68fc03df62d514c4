"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the menus.
- Every value has a default: with an empty environment the program behaves
  exactly like the plain console tool.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "avtorent"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "avtorent"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "avtorent"
    return Path.home() / ".config" / "avtorent"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env files).
    - One settings contract shared by the CLI commands and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="AVTORENT_",
        extra="ignore",
        case_sensitive=False,
        # Project first, then the per-user file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    language: Language = Field(
        default=Language.ENGLISH,
        description="Language of prompts and messages (en/ru).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level of the diagnostic log written to stderr.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner when the session starts.",
    )
    color: bool = Field(
        default=True,
        description="Colored output; false forces plain text.",
    )

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
