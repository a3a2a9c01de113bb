"""Runtime configuration read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .errors import ConfigError
from .store.employee_store import STORAGE_KEY


@dataclass(frozen=True)
class Settings:
    """Validated runtime settings.

    Env:
      - HR_DATA_DIR (default ./db): directory probed for DB.xlsx/json/yml/csv
      - HR_STORAGE_PATH (default ./data/hr_storage.db)
      - HR_STORAGE_KEY (default hrSystemData)
      - HR_LOG_PATH (optional JSON log file)
      - PORT (default 8000)
      - ALLOWED_ORIGINS (comma-separated, default *)
    """

    data_dir: Path
    storage_path: Path
    storage_key: str = STORAGE_KEY
    log_path: Optional[Path] = None
    port: int = 8000
    allowed_origins: Tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        log_path = env.get("HR_LOG_PATH")
        allowed = tuple(o.strip() for o in env.get("ALLOWED_ORIGINS", "*").split(",") if o.strip()) or ("*",)
        return cls(
            data_dir=Path(env.get("HR_DATA_DIR", "db")).expanduser(),
            storage_path=Path(env.get("HR_STORAGE_PATH", "data/hr_storage.db")).expanduser(),
            storage_key=env.get("HR_STORAGE_KEY", STORAGE_KEY),
            log_path=Path(log_path).expanduser() if log_path else None,
            port=_parse_port(env.get("PORT", "8000")),
            allowed_origins=allowed,
        )


def _parse_port(raw_value: str) -> int:
    try:
        port = int(raw_value)
    except ValueError as exc:
        raise ConfigError(f"Invalid PORT value '{raw_value}': expected an integer") from exc
    if not 0 <= port <= 65535:
        raise ConfigError(f"Invalid PORT value '{raw_value}': out of range")
    return port


__all__ = ["Settings"]
