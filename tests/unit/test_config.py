import pytest

from catalog_client_sdk.config import SDKConfig, parse_bool
from catalog_console.app.config import AppConfig


def _clear_env(monkeypatch) -> None:
    for name in (
        "CATALOG_API_BASE_URL",
        "CATALOG_TIMEOUT_SECONDS",
        "CATALOG_VERIFY_SSL",
        "CATALOG_RETRY_MAX_ATTEMPTS",
        "CATALOG_RETRY_BACKOFF_MS",
        "CATALOG_PAGE_SIZE",
        "CATALOG_FENCE_REQUESTS",
        "CATALOG_SURFACE_UNEXPECTED_ERRORS",
        "CATALOG_TOKEN_KEY",
        "CATALOG_STORAGE_PATH",
        "CATALOG_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_sdk_config_defaults(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)

    config = SDKConfig.from_env(env_file=str(tmp_path / "missing.env"))

    assert config.base_url == "http://localhost:3000/"
    assert config.timeout_seconds == 30
    assert config.verify_ssl is True
    assert config.retry_max_attempts == 1
    assert config.retry_backoff_ms == 150


def test_sdk_config_reads_env_file(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    env_file = tmp_path / ".env"
    env_file.write_text("CATALOG_API_BASE_URL=https://api.example.test\nCATALOG_VERIFY_SSL=no\n", encoding="utf-8")

    config = SDKConfig.from_env(env_file=str(env_file))

    assert config.base_url == "https://api.example.test/"
    assert config.verify_ssl is False


def test_app_config_defaults(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)

    config = AppConfig.from_env(env_file=str(tmp_path / "missing.env"))

    assert config.default_page_size == 5
    assert config.fence_requests is False
    assert config.surface_unexpected_errors is False
    assert config.token_key == "TOKEN"
    assert config.storage_path is None
    assert config.log_level == "INFO"


def test_app_config_overrides(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CATALOG_PAGE_SIZE", "10")
    monkeypatch.setenv("CATALOG_FENCE_REQUESTS", "true")
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")

    config = AppConfig.from_env(env_file=str(tmp_path / "missing.env"))

    assert config.default_page_size == 10
    assert config.fence_requests is True
    assert config.log_level == "DEBUG"


def test_app_config_rejects_bad_page_size(monkeypatch, tmp_path) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CATALOG_PAGE_SIZE", "0")

    with pytest.raises(ValueError):
        AppConfig.from_env(env_file=str(tmp_path / "missing.env"))


def test_parse_bool_falls_back_to_default() -> None:
    assert parse_bool("on") is True
    assert parse_bool("off") is False
    assert parse_bool("maybe", default=False) is False
    assert parse_bool(None) is True
