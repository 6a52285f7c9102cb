from __future__ import annotations

import logging
from typing import Any

import pytest

from catalog_client_sdk.auth_store import AuthStore
from catalog_client_sdk.errors import ApiError
from catalog_client_sdk.session import SessionContext
from catalog_console.app.ui.components.notifications import MessageType


class InMemoryCatalogApi:
    """Stand-in for ``ResourceClient`` that keeps records in a list and honors soft delete."""

    def __init__(self, records: list[dict[str, Any]] | None = None) -> None:
        self.records: list[dict[str, Any]] = [dict(record, isDeleted=False) for record in records or []]
        self.calls: list[tuple[str, Any]] = []
        self.fail_with: dict[str, Exception] = {}
        self._next_id = len(self.records) + 1

    def _maybe_fail(self, operation: str) -> None:
        error = self.fail_with.pop(operation, None)
        if error is not None:
            raise error

    def _visible(self) -> list[dict[str, Any]]:
        return [record for record in self.records if not record["isDeleted"]]

    async def list_page(self, page: int, page_size: int) -> dict[str, Any]:
        self.calls.append(("list_page", (page, page_size)))
        self._maybe_fail("list_page")
        visible = self._visible()
        start = (page - 1) * page_size
        rows = [dict(record) for record in visible[start : start + page_size]]
        return {"rows": rows, "page": page, "page_size": page_size, "total": len(visible)}

    async def get(self, entity_id: str) -> dict[str, Any]:
        self.calls.append(("get", entity_id))
        self._maybe_fail("get")
        for record in self.records:
            if record["_id"] == entity_id:
                return dict(record)
        raise ApiError(code="HTTP_ERROR", message="not found", status_code=404)

    async def create(self, body: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("create", body))
        self._maybe_fail("create")
        record = {"_id": f"id-{self._next_id}", **body}
        self._next_id += 1
        self.records.append(record)
        return {"message": "Record created"}

    async def update(self, entity_id: str, body: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("update", (entity_id, body)))
        self._maybe_fail("update")
        for record in self.records:
            if record["_id"] == entity_id:
                record.update(body)
        return {"message": "Record updated"}

    async def soft_delete(self, entity_id: str) -> dict[str, Any]:
        self.calls.append(("soft_delete", entity_id))
        self._maybe_fail("soft_delete")
        for record in self.records:
            if record["_id"] == entity_id:
                record["isDeleted"] = True
        return {"message": "Record deleted"}

    def list_calls(self) -> list[tuple[int, int]]:
        return [args for name, args in self.calls if name == "list_page"]


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[tuple[str, MessageType]] = []

    def notify(self, content: str, type: MessageType = MessageType.SUCCESS) -> None:
        self.messages.append((content, type))

    def of_type(self, message_type: MessageType) -> list[str]:
        return [content for content, kind in self.messages if kind == message_type]


def category_records(count: int) -> list[dict[str, Any]]:
    return [{"_id": f"c{index}", "name": f"Category {index}", "description": ""} for index in range(1, count + 1)]


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def fake_api() -> InMemoryCatalogApi:
    return InMemoryCatalogApi(category_records(7))


@pytest.fixture()
def auth_store(tmp_path) -> AuthStore:
    return AuthStore(path=tmp_path / "storage.json")


@pytest.fixture()
def session(auth_store: AuthStore) -> SessionContext:
    return SessionContext(store=auth_store)


@pytest.fixture()
def quiet_logger() -> logging.Logger:
    logger = logging.getLogger("tests.catalog_console")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture()
def make_api():
    def _make(count: int = 0) -> InMemoryCatalogApi:
        return InMemoryCatalogApi(category_records(count))

    return _make
