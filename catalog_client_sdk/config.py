from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "CATALOG_"
DEFAULT_BASE_URL = "http://localhost:3000/"
_TRUE_VALUES = frozenset({"1", "true", "t", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "f", "no", "n", "off"})


@dataclass(frozen=True)
class SDKConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    retry_max_attempts: int = 1
    retry_backoff_ms: int = 150

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "SDKConfig":
        """Build the transport settings from ``CATALOG_*`` variables.

        Values already present in the process environment win over the ones
        in ``env_file``.
        """
        load_dotenv(env_file, override=False)
        defaults = cls()
        return cls(
            base_url=_with_trailing_slash(env("API_BASE_URL", defaults.base_url)),
            timeout_seconds=float(env("TIMEOUT_SECONDS", str(defaults.timeout_seconds))),
            verify_ssl=parse_bool(env("VERIFY_SSL"), default=defaults.verify_ssl),
            retry_max_attempts=max(1, int(env("RETRY_MAX_ATTEMPTS", str(defaults.retry_max_attempts)))),
            retry_backoff_ms=max(0, int(env("RETRY_BACKOFF_MS", str(defaults.retry_backoff_ms)))),
        )


def env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None or not value.strip():
        return default
    return value.strip()


def _with_trailing_slash(url: str | None) -> str:
    if not url:
        return DEFAULT_BASE_URL
    return url if url.endswith("/") else f"{url}/"


def parse_bool(value: str | bool | None, default: bool = True) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default
