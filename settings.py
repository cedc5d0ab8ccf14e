from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    # Persistence (serverless-friendly default: off)
    persist_to_disk: bool
    data_dir: Path | None

    # i18n
    locale: str | None

    # Logging
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    persist_to_disk = _env_bool("PERSIST_TO_DISK", False)

    # None means "use persistence.paths.data_dir()"
    raw_data_dir = _env_str("PLUGIN_DATA_DIR")
    data_dir = Path(raw_data_dir).expanduser() if raw_data_dir else None

    locale = _env_str("PLUGIN_LOCALE")

    log_level = (_env_str("LOG_LEVEL") or "INFO").upper()
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        persist_to_disk=persist_to_disk,
        data_dir=data_dir,
        locale=locale,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )
