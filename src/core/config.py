"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- Lets the CLI and services read the same typed settings.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "person-records"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "person-records"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "person-records"
    return Path.home() / ".config" / "person-records"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing and validation at the edge (env vars) without logic in the core.
    - One configuration contract shared by the CLI and services.
    """

    model_config = SettingsConfigDict(
        env_prefix="PERSON_RECORDS_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    output_path: Path = Field(
        default=Path("persons.txt"),
        description="Text file the demo writes its records to (truncated on each run).",
    )
    echo_console: bool = Field(
        default=True,
        description="Print record blocks to standard output as well as the file.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Standard logging level name.",
    )
    log_json: bool = Field(
        default=False,
        description="Emit logs as JSON lines instead of key-value text.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level
