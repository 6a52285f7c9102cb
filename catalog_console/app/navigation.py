from __future__ import annotations

from dataclasses import dataclass

from catalog_client_sdk.session import SessionContext

from catalog_console.app.domain.schemas import SCHEMAS

LOCATIONS = {
    "HOME": "/",
    "LOGIN": "/login",
    "PRODUCTS": "/products",
    "CATEGORIES": "/categories",
    "SUPPLIERS": "/suppliers",
}


@dataclass(frozen=True)
class NavRoute:
    key: str
    resource: str | None = None
    entity_id: str | None = None


def list_location(resource: str) -> str:
    return f"/{resource}"


def detail_location(resource: str, entity_id: str) -> str:
    return f"/{resource}/{entity_id}"


def resolve_route(path: str, session: SessionContext) -> NavRoute:
    """Map a location to a route; without a token everything goes to login."""
    parts = [part for part in path.strip().split("/") if part]
    if not session.is_authenticated():
        return NavRoute("login")
    if not parts:
        return NavRoute("home")
    if parts == ["login"]:
        return NavRoute("login")
    resource = parts[0]
    if resource not in SCHEMAS or len(parts) > 2:
        return NavRoute("not_found")
    if len(parts) == 1:
        return NavRoute("list", resource=resource)
    return NavRoute("detail", resource=resource, entity_id=parts[1])


class Navigator:
    """Current location plus a redirect to login whenever the token goes away."""

    def __init__(self, session: SessionContext, start: str = "/") -> None:
        self.session = session
        self.history: list[str] = []
        self.location = start
        self.navigate(start)
        session.subscribe(self._on_token_changed)

    @property
    def route(self) -> NavRoute:
        return resolve_route(self.location, self.session)

    def navigate(self, path: str) -> NavRoute:
        route = resolve_route(path, self.session)
        self.location = LOCATIONS["LOGIN"] if route.key == "login" else path
        self.history.append(self.location)
        return route

    def _on_token_changed(self, token: str | None) -> None:
        if not token:
            self.navigate(LOCATIONS["LOGIN"])
