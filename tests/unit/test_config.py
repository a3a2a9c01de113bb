"""Unit tests for environment settings."""
from __future__ import annotations

from pathlib import Path

import pytest

from hr_records.config import Settings
from hr_records.errors import ConfigError


def test_defaults() -> None:
    settings = Settings.from_env({})

    assert settings.data_dir == Path("db")
    assert settings.storage_path == Path("data/hr_storage.db")
    assert settings.storage_key == "hrSystemData"
    assert settings.log_path is None
    assert settings.port == 8000
    assert settings.allowed_origins == ("*",)


def test_overrides() -> None:
    settings = Settings.from_env(
        {
            "HR_DATA_DIR": "/srv/db",
            "HR_LOG_PATH": "/var/log/hr.jsonl",
            "PORT": "9000",
            "ALLOWED_ORIGINS": "https://a.example, https://b.example,",
        }
    )

    assert settings.data_dir == Path("/srv/db")
    assert settings.log_path == Path("/var/log/hr.jsonl")
    assert settings.port == 9000
    assert settings.allowed_origins == ("https://a.example", "https://b.example")


@pytest.mark.parametrize("port", ["abc", "70000"])
def test_invalid_port_raises(port: str) -> None:
    with pytest.raises(ConfigError):
        Settings.from_env({"PORT": port})
