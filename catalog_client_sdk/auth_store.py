from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from catalog_client_sdk.config import env

DEFAULT_TOKEN_KEY = "TOKEN"


@dataclass
class AuthStore:
    """Key/value file that plays the role of the browser's local storage."""

    app_name: str = "catalog-console"
    filename: str = "local_storage.json"
    path: Path | None = None

    def _path(self) -> Path:
        if self.path is not None:
            target = Path(self.path)
        else:
            configured = env("STORAGE_PATH")
            target = Path(configured) if configured else Path(user_data_dir(self.app_name, "Catalog")) / self.filename
        target.parent.mkdir(parents=True, exist_ok=True)
        return target

    def _load(self) -> dict[str, str]:
        path = self._path()
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (ValueError, OSError):
            return {}
        return {str(key): str(value) for key, value in data.items()} if isinstance(data, dict) else {}

    def _save(self, data: dict[str, str]) -> None:
        path = self._path()
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        try:
            path.chmod(0o600)
        except OSError:
            pass

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)
