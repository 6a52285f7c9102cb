from __future__ import annotations

from collections.abc import Callable
from typing import Any

from catalog_client_sdk.http_client import HttpClient
from catalog_client_sdk.resources_client import ResourceClient

from catalog_console.app.application.detail_controller import ResourceDetailController
from catalog_console.app.application.resource_controller import ResourceController
from catalog_console.app.config import AppConfig
from catalog_console.app.domain.schemas import CATEGORY_SCHEMA, PRODUCT_SCHEMA, SCHEMAS, SUPPLIER_SCHEMA
from catalog_console.app.infrastructure.logging.logger import get_logger
from catalog_console.app.ui.components.notifications import NotificationSink


def build_resource_controller(
    resource: str,
    http_client: HttpClient,
    notifier: NotificationSink,
    config: AppConfig | None = None,
) -> ResourceController:
    config = config or AppConfig()
    schema = SCHEMAS[resource]
    return ResourceController(
        ResourceClient(http_client, schema.resource),
        schema,
        notifier,
        page_size=config.default_page_size,
        fence_requests=config.fence_requests,
        surface_unexpected_errors=config.surface_unexpected_errors,
        logger=get_logger(f"catalog_console.{resource}", config.log_level),
    )


def build_category_controller(http_client: HttpClient, notifier: NotificationSink, config: AppConfig | None = None) -> ResourceController:
    return build_resource_controller(CATEGORY_SCHEMA.resource, http_client, notifier, config)


def build_supplier_controller(http_client: HttpClient, notifier: NotificationSink, config: AppConfig | None = None) -> ResourceController:
    return build_resource_controller(SUPPLIER_SCHEMA.resource, http_client, notifier, config)


def build_product_controller(http_client: HttpClient, notifier: NotificationSink, config: AppConfig | None = None) -> ResourceController:
    return build_resource_controller(PRODUCT_SCHEMA.resource, http_client, notifier, config)


def build_detail_controller(
    resource: str,
    entity_id: str,
    http_client: HttpClient,
    notifier: NotificationSink,
    navigate: Callable[[str], Any],
    config: AppConfig | None = None,
) -> ResourceDetailController:
    config = config or AppConfig()
    schema = SCHEMAS[resource]
    return ResourceDetailController(
        ResourceClient(http_client, schema.resource),
        schema,
        notifier,
        navigate,
        entity_id,
        surface_unexpected_errors=config.surface_unexpected_errors,
        logger=get_logger(f"catalog_console.{resource}", config.log_level),
    )
