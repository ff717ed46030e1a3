"""passgen settings.

Every generation default (length, count, range policy, dedupe, log level)
can be set once through ``PASSGEN_*`` variables or a `.env` file instead of
repeating flags. `passgen config set` edits the per-user file; explicit CLI
flags always take precedence.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_DIR_NAME = "passgen"
ENV_PREFIX = "PASSGEN_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def get_user_config_dir() -> Path:
    """Where `config set` stores the per-user `.env`.

    %APPDATA% on Windows, Application Support on macOS, XDG elsewhere.
    """

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars(env_path: Path) -> dict[str, str]:
    """KEY=VALUE pairs from `env_path`; comments and junk lines are skipped."""

    if not env_path.is_file():
        return {}

    values: dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        values[key] = value.strip().strip("\"'")
    return values


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the per-user `.env` and return its path.

    Keys already in the file survive unless overridden; `None` values are
    skipped so callers can pass unset options straight through.
    """

    env_path = env_path or get_user_env_file()
    merged = read_user_env_vars(env_path)
    merged.update({key: value for key, value in values.items() if value is not None})

    body = "\n".join(f"{key}={merged[key]}" for key in sorted(merged))
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(f"# {APP_DIR_NAME} defaults, managed by `passgen config set`\n{body}\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Generation defaults and diagnostics level.

    Values come from ``PASSGEN_*`` environment variables, then the project
    `.env`, then the per-user `.env`. CLI flags always win over these.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        # Later files override earlier ones.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_length: int = Field(
        default=12,
        ge=1,
        description="Password length used when -l is not given.",
    )
    default_count: int = Field(
        default=1,
        ge=1,
        description="Number of passwords used when -n is not given.",
    )
    strict_ranges: bool = Field(
        default=False,
        description="Fail on malformed custom range parts instead of skipping them.",
    )
    dedupe: bool = Field(
        default=False,
        description="Remove duplicate characters from the alphabet by default.",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level for diagnostics on stderr.",
    )
