from __future__ import annotations

from collections.abc import Callable

from catalog_client_sdk.auth_store import DEFAULT_TOKEN_KEY, AuthStore

TokenListener = Callable[[str | None], None]


class SessionContext:
    """Holds the bearer token and tells subscribers when it changes.

    The token is read once from the store at construction; afterwards every
    change goes through ``set_token``/``clear`` so subscribers (the transport
    client, navigation) re-issue their state explicitly.
    """

    def __init__(self, store: AuthStore | None = None, token_key: str = DEFAULT_TOKEN_KEY) -> None:
        self._store = store or AuthStore()
        self.token_key = token_key
        self._token = self._store.get_item(token_key)
        self._listeners: list[TokenListener] = []

    @property
    def token(self) -> str | None:
        return self._token

    def is_authenticated(self) -> bool:
        return bool(self._token)

    def auth_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    def set_token(self, token: str) -> None:
        normalized = token.strip()
        if not normalized:
            raise ValueError("token must not be empty")
        self._store.set_item(self.token_key, normalized)
        self._token = normalized
        self._notify()

    def clear(self) -> None:
        self._store.remove_item(self.token_key)
        self._token = None
        self._notify()

    def subscribe(self, listener: TokenListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._token)
