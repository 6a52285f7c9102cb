from __future__ import annotations

import logging
from typing import Any

from catalog_console.app.application.state.controller_state import MutationResult
from catalog_console.app.infrastructure.errors.error_mapper import ErrorMapper
from catalog_console.app.infrastructure.logging.logger import log_action
from catalog_console.app.ui.components.notifications import MessageType, NotificationSink


class FailureBoundary:
    resource: str
    logger: logging.Logger
    notifier: NotificationSink
    surface_unexpected_errors: bool
    last_error: dict[str, Any] | None

    def _mutation_failed(self, action: str, error: Exception, entity_id: str | None = None) -> MutationResult:
        payload = self._diagnose(action, error, entity_id=entity_id)
        messages = ErrorMapper.validation_messages(error)
        if messages:
            for message in messages:
                self.notifier.notify(message, MessageType.ERROR)
            return MutationResult(ok=False, errors=tuple(messages), error=payload)
        if self.surface_unexpected_errors:
            self.notifier.notify(str(payload["message"]), MessageType.ERROR)
        return MutationResult(ok=False, error=payload)

    def _diagnose(
        self,
        action: str,
        error: Exception,
        entity_id: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        payload = ErrorMapper.to_payload(error)
        self.last_error = payload
        log_action(
            self.logger,
            module=self.resource,
            action=action,
            outcome="error",
            entity_id=entity_id,
            page=page,
            page_size=page_size,
            trace_id=payload.get("trace_id"),
            detail=f"{payload['code']}: {payload['message']}",
            level=logging.WARNING,
        )
        return payload


def server_message(response: Any, default: str) -> str:
    if isinstance(response, dict) and response.get("message"):
        return str(response["message"])
    return default
