from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ControllerStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class MutationResult:
    ok: bool
    message: str | None = None
    errors: tuple[str, ...] = ()
    error: dict[str, Any] | None = None


@dataclass
class InFlight:
    loads: int = 0
    mutations: int = 0

    @property
    def status(self) -> ControllerStatus:
        if self.mutations:
            return ControllerStatus.SUBMITTING
        if self.loads:
            return ControllerStatus.LOADING
        return ControllerStatus.IDLE
