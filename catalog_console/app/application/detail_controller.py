from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from catalog_console.app.application.failure_boundary import FailureBoundary, server_message
from catalog_console.app.application.state.controller_state import MutationResult
from catalog_console.app.domain.models.entity import Entity
from catalog_console.app.domain.schemas import EntitySchema
from catalog_console.app.infrastructure.logging.logger import get_logger, log_action
from catalog_console.app.navigation import list_location
from catalog_console.app.ui.components.notifications import MessageType, NotificationSink
from catalog_console.app.ui.forms import Form, FormResult

ADD_ID = "add"


class DetailApi(Protocol):
    async def get(self, entity_id: str) -> dict[str, Any]: ...

    async def create(self, body: dict[str, Any]) -> dict[str, Any]: ...

    async def update(self, entity_id: str, body: dict[str, Any]) -> dict[str, Any]: ...

    async def soft_delete(self, entity_id: str) -> dict[str, Any]: ...


class ResourceDetailController(FailureBoundary):
    """Single-record page: ``/<resource>/add`` creates, ``/<resource>/<id>`` edits."""

    def __init__(
        self,
        client: DetailApi,
        schema: EntitySchema,
        notifier: NotificationSink,
        navigate: Callable[[str], Any],
        entity_id: str,
        *,
        surface_unexpected_errors: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.client = client
        self.schema = schema
        self.notifier = notifier
        self.navigate = navigate
        self.entity_id = entity_id
        self.surface_unexpected_errors = surface_unexpected_errors
        self.logger = logger or get_logger(f"catalog_console.{schema.resource}")
        self.entity: Entity | None = None
        self.last_error: dict[str, Any] | None = None
        self.form = Form(schema, name=f"{schema.resource}-detail-form", handler=self.save)

    @property
    def resource(self) -> str:
        return self.schema.resource

    @property
    def is_edit(self) -> bool:
        return self.entity_id != ADD_ID

    async def load(self) -> Entity | None:
        if not self.is_edit:
            return None
        try:
            payload = await self.client.get(self.entity_id)
            entity = Entity.from_payload(payload)
        except Exception as error:  # noqa: BLE001
            self._diagnose("get", error, entity_id=self.entity_id)
            return None
        self.entity = entity
        self.form.bind(entity.copy_fields())
        return entity

    async def submit(self) -> FormResult:
        return await self.form.submit()

    async def save(self, values: dict[str, Any]) -> MutationResult:
        action = "update" if self.is_edit else "create"
        try:
            if self.is_edit:
                response = await self.client.update(self.entity_id, dict(values))
            else:
                response = await self.client.create({**values, "isDeleted": False})
        except Exception as error:  # noqa: BLE001
            if self.is_edit:
                return MutationResult(ok=False, error=self._diagnose(action, error, entity_id=self.entity_id))
            return self._mutation_failed(action, error)

        self.form.reset()
        message = server_message(response, f"{self.schema.label}: record saved")
        self.notifier.notify(message, MessageType.SUCCESS)
        log_action(self.logger, module=self.resource, action=action, outcome="success", entity_id=self.entity_id)
        self.navigate(list_location(self.resource))
        return MutationResult(ok=True, message=message)

    async def delete(self) -> MutationResult:
        if not self.is_edit:
            return MutationResult(ok=False, message="Nothing to delete on the add page.")
        try:
            response = await self.client.soft_delete(self.entity_id)
        except Exception as error:  # noqa: BLE001
            return self._mutation_failed("delete", error, entity_id=self.entity_id)

        message = server_message(response, f"{self.schema.label}: record deleted")
        self.notifier.notify(message, MessageType.SUCCESS)
        log_action(self.logger, module=self.resource, action="delete", outcome="success", entity_id=self.entity_id)
        self.navigate(list_location(self.resource))
        return MutationResult(ok=True, message=message)
