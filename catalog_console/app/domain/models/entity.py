from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

_RESERVED_KEYS = {"_id", "id", "isDeleted", "__v"}


@dataclass(frozen=True)
class Entity:
    id: str
    fields: dict[str, Any] = field(default_factory=dict)
    is_deleted: bool = False

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Entity":
        raw_id = payload.get("_id", payload.get("id"))
        if raw_id in (None, ""):
            raise ValueError("entity payload has no id")
        fields = {key: value for key, value in payload.items() if key not in _RESERVED_KEYS}
        return cls(id=str(raw_id), fields=fields, is_deleted=bool(payload.get("isDeleted", False)))

    def get(self, key: str, default: Any = None) -> Any:
        if key in ("id", "_id"):
            return self.id
        return self.fields.get(key, default)

    def copy_fields(self) -> dict[str, Any]:
        return copy.deepcopy(self.fields)

    def merged(self, values: dict[str, Any]) -> "Entity":
        return Entity(id=self.id, fields={**self.fields, **values}, is_deleted=self.is_deleted)

    def to_row(self) -> dict[str, Any]:
        return {"id": self.id, **self.fields}
