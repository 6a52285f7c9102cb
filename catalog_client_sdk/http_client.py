from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx

from catalog_client_sdk.config import SDKConfig
from catalog_client_sdk.errors import ApiError
from catalog_client_sdk.session import SessionContext


class HttpClient:
    def __init__(
        self,
        config: SDKConfig | None = None,
        session: SessionContext | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or SDKConfig.from_env()
        self.session = session or SessionContext()
        self._client = client or httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_ssl,
        )
        self._retry_max_attempts = max(1, self.config.retry_max_attempts)
        self._retry_backoff_ms = max(0, self.config.retry_backoff_ms)
        self._auth_error_handler: Callable[[ApiError], None] | None = None
        self._auth_headers = self.session.auth_headers()
        self._unsubscribe = self.session.subscribe(self._reissue_auth_headers)

    def register_auth_error_handler(self, handler: Callable[[ApiError], None] | None) -> None:
        self._auth_error_handler = handler

    def _reissue_auth_headers(self, _token: str | None) -> None:
        self._auth_headers = self.session.auth_headers()

    async def request(
        self,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        request_headers = dict(headers or {})
        request_headers.update(self._auth_headers)

        normalized_path = path.lstrip("/")
        allow_retry = method.upper() == "GET"

        for attempt in range(1, self._retry_max_attempts + 1):
            try:
                response = await self._client.request(
                    method=method.upper(),
                    url=normalized_path,
                    json=json_body,
                    headers=request_headers,
                    params=params,
                )
            except httpx.TimeoutException as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise ApiError(
                        code="TIMEOUT_ERROR",
                        message="Timed out while calling the catalog API",
                        details=str(exc),
                    ) from exc
                await self._backoff(attempt)
                continue
            except httpx.TransportError as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise ApiError(
                        code="NETWORK_ERROR",
                        message="Network error while calling the catalog API",
                        details=str(exc),
                    ) from exc
                await self._backoff(attempt)
                continue

            if response.status_code >= 400:
                error = ApiError.from_http_response(response)
                if allow_retry and self._is_retryable_status(error.status_code) and attempt < self._retry_max_attempts:
                    await self._backoff(attempt)
                    continue
                if error.status_code in {401, 403} and self._auth_error_handler:
                    self._auth_error_handler(error)
                raise error

            try:
                payload = response.json()
            except ValueError:
                return {}
            return payload if isinstance(payload, dict) else {"payload": payload}

        raise ApiError(code="NETWORK_ERROR", message="Network error while calling the catalog API", details="retry exhausted")

    async def aclose(self) -> None:
        self._unsubscribe()
        await self._client.aclose()

    async def _backoff(self, attempt: int) -> None:
        await asyncio.sleep((self._retry_backoff_ms * attempt) / 1000)

    @staticmethod
    def _is_retryable_status(status_code: int | None) -> bool:
        return bool(status_code and 500 <= status_code <= 599)
