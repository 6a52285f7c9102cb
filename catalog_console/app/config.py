from __future__ import annotations

from dataclasses import dataclass

from dotenv import load_dotenv

from catalog_client_sdk.auth_store import DEFAULT_TOKEN_KEY
from catalog_client_sdk.config import env, parse_bool

DEFAULT_PAGE_SIZE = 5
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    default_page_size: int = DEFAULT_PAGE_SIZE
    fence_requests: bool = False
    surface_unexpected_errors: bool = False
    token_key: str = DEFAULT_TOKEN_KEY
    storage_path: str | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        load_dotenv(env_file, override=False)
        config = cls(
            default_page_size=int(env("PAGE_SIZE", str(DEFAULT_PAGE_SIZE))),
            fence_requests=parse_bool(env("FENCE_REQUESTS"), default=False),
            surface_unexpected_errors=parse_bool(env("SURFACE_UNEXPECTED_ERRORS"), default=False),
            token_key=env("TOKEN_KEY", DEFAULT_TOKEN_KEY),
            storage_path=env("STORAGE_PATH"),
            log_level=env("LOG_LEVEL", "INFO").upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.default_page_size < 1:
            raise ValueError("CATALOG_PAGE_SIZE must be >= 1")
        if not self.token_key:
            raise ValueError("CATALOG_TOKEN_KEY must not be empty")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"CATALOG_LOG_LEVEL is not a logging level: {self.log_level}")
