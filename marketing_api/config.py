"""Runtime configuration for the API, read from the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator


DATA_DIR = Path(__file__).resolve().parent / "data"

_TRUTHY = {"1", "true", "yes", "on"}


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    # Empty values count as unset.
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


class AppConfig(BaseModel):
    """Port, dataset locations and cache switch for one app instance."""

    host: str = "0.0.0.0"
    port: int = 3000
    campaigns_path: Path = DATA_DIR / "marketing-data.json"
    users_path: Path = DATA_DIR / "users.json"
    encrypted_users_path: Path = DATA_DIR / "encrypted-users.json"
    cache_enabled: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        # Aliases such as WARN resolve to their canonical name (WARNING).
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int) or level == logging.NOTSET:
            raise ValueError(f"unknown log level: {value}")
        return logging.getLevelName(level)

    @classmethod
    def from_env(cls) -> "AppConfig":
        defaults = cls()
        return cls(
            host=_env("MARKETING_API_HOST", defaults.host),
            port=_env("MARKETING_API_PORT", str(defaults.port)),
            campaigns_path=Path(_env("MARKETING_DATA_PATH", str(defaults.campaigns_path))),
            users_path=Path(_env("USERS_DATA_PATH", str(defaults.users_path))),
            encrypted_users_path=Path(
                _env("ENCRYPTED_USERS_DATA_PATH", str(defaults.encrypted_users_path))
            ),
            cache_enabled=(_env("MARKETING_API_CACHE", "") or "").lower() in _TRUTHY,
            log_level=_env("LOG_LEVEL", defaults.log_level),
        )
