from __future__ import annotations

import asyncio
from pathlib import Path

from catalog_client_sdk.auth_store import AuthStore
from catalog_client_sdk.config import SDKConfig
from catalog_client_sdk.errors import ApiError
from catalog_client_sdk.http_client import HttpClient
from catalog_client_sdk.session import SessionContext

from catalog_console.app.application.resource_controller import ResourceController
from catalog_console.app.config import AppConfig
from catalog_console.app.infrastructure.logging.logger import get_logger, log_action
from catalog_console.app.navigation import LOCATIONS, Navigator
from catalog_console.app.pages import (
    build_category_controller,
    build_detail_controller,
    build_product_controller,
    build_supplier_controller,
)
from catalog_console.app.resource_console import Prompt, ResourceConsole
from catalog_console.app.ui.components.notifications import ConsoleNotifier, MessageType

MENU = {
    "1": ("products", build_product_controller),
    "2": ("categories", build_category_controller),
    "3": ("suppliers", build_supplier_controller),
}


def _print_runtime_config(sdk_config: SDKConfig, app_config: AppConfig) -> None:
    print("Catalog console")
    print(f"Base URL: {sdk_config.base_url}")
    print(f"Timeout: {sdk_config.timeout_seconds}s")
    print(f"GET retry: {sdk_config.retry_max_attempts} attempts, backoff base {sdk_config.retry_backoff_ms}ms")
    print(f"Page size: {app_config.default_page_size}")


def _login(session: SessionContext, navigator: Navigator, prompt: Prompt) -> bool:
    print("\nLogin")
    token = prompt("token (empty to exit): ").strip()
    if not token:
        return False
    session.set_token(token)
    navigator.navigate(LOCATIONS["HOME"])
    return True


async def run(sdk_config: SDKConfig, app_config: AppConfig, prompt: Prompt = input) -> None:
    logger = get_logger("catalog_console", app_config.log_level)
    store = AuthStore(path=Path(app_config.storage_path) if app_config.storage_path else None)
    session = SessionContext(store=store, token_key=app_config.token_key)
    http_client = HttpClient(config=sdk_config, session=session)
    navigator = Navigator(session)
    notifier = ConsoleNotifier()
    controllers: dict[str, ResourceController] = {}

    def _handle_http_auth_error(error: ApiError) -> None:
        if error.status_code == 401:
            log_action(logger, module="session", action="auth_error", outcome="logout", trace_id=error.trace_id)
            notifier.notify("Session expired, log in again.", MessageType.WARNING)
            session.clear()
            return
        notifier.notify("Not allowed to perform this action.", MessageType.WARNING)

    http_client.register_auth_error_handler(_handle_http_auth_error)

    def _controller(option: str) -> ResourceController:
        resource, build = MENU[option]
        if resource not in controllers:
            controllers[resource] = build(http_client, notifier, app_config)
        return controllers[resource]

    _print_runtime_config(sdk_config, app_config)
    try:
        while True:
            if not session.is_authenticated():
                if not _login(session, navigator, prompt):
                    return
                continue

            print("\nMenu")
            print("1. Products")
            print("2. Categories")
            print("3. Suppliers")
            print("4. Logout")
            print("5. Exit")
            option = prompt("Select an option: ").strip()

            if option in MENU:
                controller = _controller(option)
                resource = controller.resource
                console = ResourceConsole(
                    controller,
                    navigator,
                    lambda entity_id, resource=resource: build_detail_controller(
                        resource, entity_id, http_client, notifier, navigator.navigate, app_config
                    ),
                    prompt=prompt,
                )
                await console.run()
            elif option == "4":
                session.clear()
                controllers.clear()
                log_action(logger, module="session", action="logout", outcome="success")
            elif option == "5":
                return
            else:
                print("Invalid option.")
    finally:
        await http_client.aclose()


def main() -> None:
    asyncio.run(run(SDKConfig.from_env(), AppConfig.from_env()))


if __name__ == "__main__":
    main()
