from __future__ import annotations

import pytest

from pos_admin.app.config import AppConfig
from pos_admin.clients.pos_sdk.config import ClientConfig, ConfigError, load_config

ENV_KEYS = [
    "POS_API_BASE_URL",
    "POS_TIMEOUT_SECONDS",
    "POS_VERIFY_SSL",
    "POS_SESSION_TTL_MS",
    "POS_SESSION_DIR",
    "POS_PAGE_SIZE",
    "POS_LOG_LEVEL",
    "POS_ENV",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        # env values loaded from .env files are rolled back on teardown
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


def test_client_config_defaults() -> None:
    config = load_config()

    assert config == ClientConfig()
    assert config.api_base_url == "http://localhost:5000"
    assert config.session_ttl_ms == 3_600_000


def test_client_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("POS_API_BASE_URL", "https://pos.example.com/")
    monkeypatch.setenv("POS_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("POS_VERIFY_SSL", "false")
    monkeypatch.setenv("POS_SESSION_TTL_MS", "60000")
    monkeypatch.setenv("POS_SESSION_DIR", "/tmp/pos")

    config = load_config()

    assert config.api_base_url == "https://pos.example.com"
    assert config.timeout_seconds == 3.5
    assert config.verify_ssl is False
    assert config.session_ttl_ms == 60000
    assert config.session_dir == "/tmp/pos"


def test_client_config_reads_env_file(tmp_path) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("POS_TIMEOUT_SECONDS=7\n", encoding="utf-8")

    assert load_config(str(env_file)).timeout_seconds == 7.0


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("POS_API_BASE_URL", "ftp://pos"),
        ("POS_TIMEOUT_SECONDS", "0"),
        ("POS_TIMEOUT_SECONDS", "fast"),
        ("POS_SESSION_TTL_MS", "-1"),
    ],
)
def test_client_config_rejects_invalid_values(monkeypatch, key: str, value: str) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigError, match=key):
        load_config()


def test_app_config_defaults_and_validation(monkeypatch) -> None:
    config = AppConfig.from_env()
    assert (config.page_size, config.log_level, config.env_name) == (10, "INFO", "dev")

    monkeypatch.setenv("POS_PAGE_SIZE", "0")
    with pytest.raises(ValueError, match="POS_PAGE_SIZE"):
        AppConfig.from_env()

    monkeypatch.setenv("POS_PAGE_SIZE", "25")
    monkeypatch.setenv("POS_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="POS_LOG_LEVEL"):
        AppConfig.from_env()
