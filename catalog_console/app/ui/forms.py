from __future__ import annotations

import copy
import inspect
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from catalog_console.app.domain.schemas import EntitySchema, FieldSpec

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_REGEX = re.compile(r"^\+?[0-9][0-9 .-]{6,18}[0-9]$")

SubmitHandler = Callable[[dict[str, Any]], Awaitable[Any] | Any]


class FormStatus(str, Enum):
    IDLE = "idle"
    DIRTY = "dirty"
    VALID = "valid"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FormResult:
    values: dict[str, Any]
    field_errors: dict[str, str]
    outcome: Any = None
    submitted: bool = False

    @property
    def first_invalid_field(self) -> str | None:
        return next(iter(self.field_errors), None)

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0


@dataclass
class FormState:
    status: FormStatus = FormStatus.IDLE
    submit_enabled: bool = False
    submit_disabled_reason: str = "Fill in the required fields."


class Form:
    """Schema-driven input surface shared by the create and the edit flow."""

    def __init__(self, schema: EntitySchema, name: str = "form", handler: SubmitHandler | None = None) -> None:
        self.schema = schema
        self.name = name
        self._handler = handler
        self.values: dict[str, Any] = schema.defaults()
        self.field_errors: dict[str, str] = {}
        self.status = FormStatus.IDLE

    def bind(self, initial_values: dict[str, Any]) -> None:
        values = self.schema.defaults()
        for key in self.schema.keys:
            if key in initial_values:
                values[key] = copy.deepcopy(initial_values[key])
        self.values = values
        self.field_errors = {}
        self.status = FormStatus.IDLE

    def set_value(self, key: str, value: Any) -> None:
        self.schema.field(key)
        self.values[key] = value
        self.field_errors.pop(key, None)
        self.status = FormStatus.DIRTY

    def reset(self) -> None:
        self.values = self.schema.defaults()
        self.field_errors = {}
        self.status = FormStatus.IDLE

    def validate(self) -> FormResult:
        cleaned: dict[str, Any] = {}
        field_errors: dict[str, str] = {}
        for spec in self.schema.fields:
            value, error = _clean_field(spec, self.values.get(spec.key))
            cleaned[spec.key] = value
            if error:
                field_errors[spec.key] = error
        self.field_errors = field_errors
        self.status = FormStatus.VALID if not field_errors else FormStatus.DIRTY
        return FormResult(values=cleaned, field_errors=field_errors)

    async def submit(self) -> FormResult:
        result = self.validate()
        if not result.is_valid or self._handler is None:
            return result

        self.status = FormStatus.SUBMITTING
        try:
            outcome = self._handler(copy.deepcopy(result.values))
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception:
            self.status = FormStatus.ERROR
            raise
        ok = getattr(outcome, "ok", True)
        if self.status == FormStatus.SUBMITTING:
            self.status = FormStatus.SUCCESS if ok else FormStatus.ERROR
        result.outcome = outcome
        result.submitted = True
        return result


def _clean_field(spec: FieldSpec, raw: Any) -> tuple[Any, str | None]:
    if isinstance(raw, str):
        raw = raw.strip()
    empty = raw is None or raw == ""

    if empty:
        if spec.required:
            return spec.default, f"{spec.label} is required."
        return spec.default, None

    if spec.kind == "number":
        try:
            number = float(raw)
        except (TypeError, ValueError):
            return raw, f"{spec.label} must be a number."
        if spec.min_value is not None and number < spec.min_value:
            return raw, f"{spec.label} must be at least {spec.min_value:g}."
        return (int(number) if number.is_integer() else number), None

    text = str(raw)
    if spec.max_length is not None and len(text) > spec.max_length:
        return text, f"{spec.label} cannot exceed {spec.max_length} characters."
    if spec.kind == "email":
        text = text.lower()
        if not EMAIL_REGEX.match(text):
            return text, f"{spec.label} is not valid. Use the user@domain.com format."
    if spec.kind == "phone" and not PHONE_REGEX.match(text):
        return text, f"{spec.label} is not a valid phone number."
    return text, None


def build_form_state(result: FormResult) -> FormState:
    if result.is_valid:
        return FormState(status=FormStatus.VALID, submit_enabled=True, submit_disabled_reason="")

    first_invalid_field = result.first_invalid_field or "form"
    return FormState(
        status=FormStatus.DIRTY,
        submit_enabled=False,
        submit_disabled_reason=f"Fix '{first_invalid_field}' before submitting.",
    )

