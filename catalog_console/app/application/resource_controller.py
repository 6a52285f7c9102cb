from __future__ import annotations

import logging
from typing import Any, Protocol

from catalog_console.app.application.failure_boundary import FailureBoundary, server_message
from catalog_console.app.application.state.controller_state import ControllerStatus, InFlight, MutationResult
from catalog_console.app.config import DEFAULT_PAGE_SIZE
from catalog_console.app.domain.models.entity import Entity
from catalog_console.app.domain.schemas import EntitySchema
from catalog_console.app.infrastructure.logging.logger import get_logger, log_action
from catalog_console.app.ui.components.notifications import MessageType, NotificationSink
from catalog_console.app.ui.forms import Form, FormResult
from catalog_console.app.ui.pagination import PaginationState


class ResourceApi(Protocol):
    async def list_page(self, page: int, page_size: int) -> dict[str, Any]: ...

    async def create(self, body: dict[str, Any]) -> dict[str, Any]: ...

    async def update(self, entity_id: str, body: dict[str, Any]) -> dict[str, Any]: ...

    async def soft_delete(self, entity_id: str) -> dict[str, Any]: ...


class ResourceController(FailureBoundary):
    """Owns the current page, the pagination cursor and both forms of one resource.

    Every operation is its own failure boundary: errors are logged and the
    snapshot stays as it was. Server validation errors of create and delete
    are also notified; a failed update is only logged. A failed load keeps
    the requested page in the cursor. Nothing raises past an operation.

    With ``fence_requests`` each ``load_page`` takes a sequence number and a
    response that is not the latest issued one is discarded. Without it the
    last response to resolve wins, whichever page it belongs to.
    """

    def __init__(
        self,
        client: ResourceApi,
        schema: EntitySchema,
        notifier: NotificationSink,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        fence_requests: bool = False,
        surface_unexpected_errors: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.schema = schema
        self.notifier = notifier
        self.fence_requests = fence_requests
        self.surface_unexpected_errors = surface_unexpected_errors
        self.logger = logger or get_logger(f"catalog_console.{schema.resource}")

        self.snapshot: list[Entity] = []
        self.pagination = PaginationState(page=1, page_size=max(1, page_size))
        self.selection: Entity | None = None
        self.edit_open = False
        self.refresh_token = 0
        self.last_error: dict[str, Any] | None = None

        self.create_form = Form(schema, name=f"add-{schema.resource}-form", handler=self.create)
        self.edit_form = Form(schema, name=f"update-{schema.resource}-form", handler=self._update_selected)

        self._in_flight = InFlight()
        self._request_seq = 0

    @property
    def status(self) -> ControllerStatus:
        return self._in_flight.status

    @property
    def resource(self) -> str:
        return self.schema.resource

    async def load_page(self, page: int | None = None, page_size: int | None = None) -> list[Entity]:
        if page is not None:
            self.pagination.page = max(1, page)
        if page_size is not None:
            self.pagination.page_size = max(1, page_size)
        requested_page = self.pagination.page
        requested_size = self.pagination.page_size

        self._request_seq += 1
        seq = self._request_seq
        self._in_flight.loads += 1
        try:
            listing = await self.client.list_page(requested_page, requested_size)
            entities = [Entity.from_payload(row) for row in listing.get("rows", [])]
        except Exception as error:  # noqa: BLE001
            self._diagnose("load_page", error, page=requested_page, page_size=requested_size)
            return self.snapshot
        finally:
            self._in_flight.loads -= 1

        if self.fence_requests and seq != self._request_seq:
            log_action(
                self.logger,
                module=self.resource,
                action="load_page",
                outcome="discarded_stale",
                page=requested_page,
                page_size=requested_size,
                level=logging.DEBUG,
            )
            return self.snapshot

        self.snapshot = entities
        total = listing.get("total")
        if total is not None:
            self.pagination.total = int(total)
        log_action(
            self.logger,
            module=self.resource,
            action="load_page",
            outcome="success",
            page=requested_page,
            page_size=requested_size,
            level=logging.DEBUG,
        )
        return self.snapshot

    async def change_page(self, page: int, page_size: int | None = None) -> list[Entity]:
        return await self.load_page(page, page_size or self.pagination.page_size)

    async def invalidate_and_reload(self) -> list[Entity]:
        self.refresh_token += 1
        return await self.load_page()

    async def create(self, fields: dict[str, Any]) -> MutationResult:
        body = {**fields, "isDeleted": False}
        self._in_flight.mutations += 1
        try:
            response = await self.client.create(body)
        except Exception as error:  # noqa: BLE001
            return self._mutation_failed("create", error)
        finally:
            self._in_flight.mutations -= 1

        self.create_form.reset()
        message = server_message(response, f"{self.schema.label}: record created")
        self.notifier.notify(message, MessageType.SUCCESS)
        log_action(self.logger, module=self.resource, action="create", outcome="success")
        await self.invalidate_and_reload()
        return MutationResult(ok=True, message=message)

    def select_for_edit(self, entity: Entity) -> None:
        self.selection = entity
        self.edit_open = True
        self.edit_form.bind(entity.copy_fields())

    def close_edit(self) -> None:
        self.edit_open = False
        self.selection = None

    async def update(self, entity_id: str, fields: dict[str, Any]) -> MutationResult:
        submitted = dict(fields)
        self._in_flight.mutations += 1
        try:
            response = await self.client.update(entity_id, submitted)
        except Exception as error:  # noqa: BLE001
            payload = self._diagnose("update", error, entity_id=entity_id)
            return MutationResult(ok=False, error=payload)
        finally:
            self._in_flight.mutations -= 1

        self.edit_form.reset()
        self.close_edit()
        message = server_message(response, f"{self.schema.label}: record updated")
        self.notifier.notify(message, MessageType.SUCCESS)
        self.snapshot = [entity.merged(submitted) if entity.id == entity_id else entity for entity in self.snapshot]
        log_action(self.logger, module=self.resource, action="update", outcome="success", entity_id=entity_id)
        return MutationResult(ok=True, message=message)

    async def delete(self, entity_id: str) -> MutationResult:
        self._in_flight.mutations += 1
        try:
            response = await self.client.soft_delete(entity_id)
        except Exception as error:  # noqa: BLE001
            return self._mutation_failed("delete", error, entity_id=entity_id)
        finally:
            self._in_flight.mutations -= 1

        if self.selection is not None and self.selection.id == entity_id:
            self.close_edit()
        message = server_message(response, f"{self.schema.label}: record deleted")
        self.notifier.notify(message, MessageType.SUCCESS)
        log_action(self.logger, module=self.resource, action="delete", outcome="success", entity_id=entity_id)
        await self.invalidate_and_reload()
        return MutationResult(ok=True, message=message)

    async def submit_create(self) -> FormResult:
        return await self.create_form.submit()

    async def submit_edit(self) -> FormResult:
        return await self.edit_form.submit()

    async def _update_selected(self, values: dict[str, Any]) -> MutationResult:
        if self.selection is None:
            return MutationResult(ok=False, message="No record selected for edit.")
        return await self.update(self.selection.id, values)
