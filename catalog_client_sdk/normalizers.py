from __future__ import annotations

from typing import Any


def normalize_listing(payload: Any, *, page: int = 1, page_size: int = 5) -> dict[str, Any]:
    safe_page = max(1, int(page or 1))
    safe_page_size = max(1, int(page_size or 5))

    rows: list[Any] = []
    total: int | None = None

    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in ("payload", "rows", "items", "data"):
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break
        total = _to_int(payload.get("total"))

    return {
        "rows": [row for row in rows if isinstance(row, dict)],
        "page": safe_page,
        "page_size": safe_page_size,
        "total": max(0, total) if total is not None else None,
    }


def normalize_entity(payload: Any) -> dict[str, Any]:
    if isinstance(payload, dict) and isinstance(payload.get("payload"), dict):
        return payload["payload"]
    if isinstance(payload, dict):
        return payload
    return {}


def _to_int(value: Any) -> int | None:
    try:
        if value is None or value == "" or isinstance(value, bool):
            return None
        return int(value)
    except (TypeError, ValueError):
        return None
