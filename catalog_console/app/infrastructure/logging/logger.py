import json
import logging
from datetime import datetime, timezone


def get_logger(name: str, level: str | int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    outcome: str,
    entity_id: str | None = None,
    page: int | None = None,
    page_size: int | None = None,
    trace_id: str | None = None,
    detail: str | None = None,
    level: int = logging.INFO,
) -> None:
    logger.log(
        level,
        json.dumps(
            {
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "module": module,
                "action": action,
                "outcome": outcome,
                "entity_id": entity_id,
                "page": page,
                "page_size": page_size,
                "trace_id": trace_id,
                "detail": detail,
            },
            ensure_ascii=False,
        ),
    )
