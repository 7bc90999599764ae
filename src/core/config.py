"""Settings for fakeiban.

Generation defaults (country, mode, batch size, fill policy) and logging
options come from `FAKEIBAN_*` environment variables, a project `.env` and the
per-user `.env` written by `fakeiban doctor set-defaults`.

Services take explicit arguments first; settings are only the fallback used at
the service/CLI boundary.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import MAX_BATCH_QUANTITY, FillPolicy, GenerationMode

APP_DIR_NAME = "fakeiban"


def get_user_config_dir() -> Path:
    """Per-user configuration directory for the current platform."""

    if sys.platform.startswith("win"):
        root = os.environ.get("APPDATA") or str(Path.home())
    elif sys.platform == "darwin":
        root = str(Path.home() / "Library" / "Application Support")
    else:
        root = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(root) / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars(env_path: Path) -> dict[str, str]:
    """KEY=VALUE pairs of a .env file; comments, blank and malformed lines are skipped."""

    if not env_path.is_file():
        return {}

    pairs = (
        line.split("=", 1)
        for line in map(str.strip, env_path.read_text(encoding="utf-8").splitlines())
        if line and not line.startswith("#") and "=" in line
    )
    return {name.strip(): raw.strip().strip("\"'") for name, raw in pairs if name.strip()}


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Merge `values` into the user .env (keys sorted) and return its path."""

    target = env_path if env_path is not None else get_user_env_file()
    merged = read_user_env_vars(target)
    merged.update((name, value) for name, value in values.items() if value is not None)

    body = "".join(f"{name}={merged[name]}\n" for name in sorted(merged))
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text("# fakeiban user config (.env)\n" + body, encoding="utf-8")
    return target


class AppSettings(BaseSettings):
    """fakeiban settings, validated when read from the environment or `.env` files."""

    model_config = SettingsConfigDict(
        env_prefix="FAKEIBAN_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_country: str = Field(
        default="DE",
        min_length=2,
        max_length=2,
        description="Country code used when none is given.",
    )
    default_mode: GenerationMode = Field(
        default=GenerationMode.VALID,
        description="Generation mode used when none is given.",
    )
    default_quantity: int = Field(
        default=5,
        ge=1,
        le=MAX_BATCH_QUANTITY,
        description="How many IBANs a batch produces by default.",
    )
    max_quantity: int = Field(
        default=MAX_BATCH_QUANTITY,
        ge=1,
        le=MAX_BATCH_QUANTITY,
        description="Upper bound applied to batch quantities.",
    )

    letter_probability: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Chance of a letter per BBAN position (approximate fill policy).",
    )
    custom_bank_code_max: int = Field(
        default=8,
        ge=0,
        le=30,
        description="Maximum number of custom bank code characters kept as BBAN prefix.",
    )
    fill_policy: FillPolicy = Field(
        default=FillPolicy.APPROXIMATE,
        description="How BBAN positions are filled (approximate/structural).",
    )
    show_masked: bool = Field(
        default=False,
        description="Show masked IBANs in the CLI output by default.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level for the fakeiban logger.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path.",
    )
