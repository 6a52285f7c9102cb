from __future__ import annotations

from enum import Enum
from typing import Protocol


class MessageType(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class NotificationSink(Protocol):
    def notify(self, content: str, type: MessageType = MessageType.SUCCESS) -> None: ...


class ConsoleNotifier:
    def notify(self, content: str, type: MessageType = MessageType.SUCCESS) -> None:
        print(f"[{type.value}] {content}")

