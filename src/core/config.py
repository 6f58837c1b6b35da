"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets adapters (HTTP) and the renderer read config the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "github-activity"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "github-activity"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "github-activity"
    return Path.home() / ".config" / "github-activity"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Every field can be overridden with a `GH_ACTIVITY_<FIELD>` env var.
    """

    model_config = SettingsConfigDict(
        env_prefix="GH_ACTIVITY_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of the GitHub REST API.",
    )
    user_agent: str = Field(
        default="github-activity-cli",
        min_length=1,
        description="User-Agent sent with the events request.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        description="Request timeout (seconds). None keeps the httpx default.",
    )

    default_limit: int = Field(
        default=30,
        ge=1,
        le=100,
        description="Page size used when --limit is not given.",
    )
    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Language for user-facing messages (en/pt).",
    )
    error_body_max_chars: int = Field(
        default=500,
        ge=0,
        description="Max characters of a failed response body shown to the user.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for the structlog pipeline (stderr).",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json)$",
        description="Log renderer: console or json.",
    )
