from __future__ import annotations

from typing import Any

from catalog_client_sdk.http_client import HttpClient
from catalog_client_sdk.normalizers import normalize_entity, normalize_listing


class ResourceClient:
    """REST calls for one catalog resource (``/categories``, ``/suppliers``, ...)."""

    def __init__(self, http_client: HttpClient, resource: str) -> None:
        self.http_client = http_client
        self.resource = resource.strip("/")

    async def list_page(self, page: int, page_size: int) -> dict[str, Any]:
        payload = await self.http_client.request(
            "GET",
            f"/{self.resource}",
            params={"page": page, "pageSize": page_size},
        )
        return normalize_listing(payload, page=page, page_size=page_size)

    async def get(self, entity_id: str) -> dict[str, Any]:
        payload = await self.http_client.request("GET", f"/{self.resource}/{entity_id}")
        return normalize_entity(payload)

    async def create(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.http_client.request("POST", f"/{self.resource}", json_body=body)

    async def update(self, entity_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self.http_client.request("PUT", f"/{self.resource}/{entity_id}", json_body=body)

    async def soft_delete(self, entity_id: str) -> dict[str, Any]:
        return await self.http_client.request("PATCH", f"/{self.resource}/delete/{entity_id}")
