from __future__ import annotations

from dataclasses import dataclass
from typing import Any

FIELD_KINDS = {"text", "email", "phone", "number", "reference"}


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    kind: str = "text"
    required: bool = True
    default: Any = ""
    max_length: int | None = None
    min_value: float | None = None
    listed: bool = True

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"unknown field kind: {self.kind}")


@dataclass(frozen=True)
class EntitySchema:
    resource: str
    label: str
    fields: tuple[FieldSpec, ...]

    @property
    def keys(self) -> list[str]:
        return [spec.key for spec in self.fields]

    def field(self, key: str) -> FieldSpec:
        for spec in self.fields:
            if spec.key == key:
                return spec
        raise KeyError(key)

    def defaults(self) -> dict[str, Any]:
        return {spec.key: spec.default for spec in self.fields}

    def listed_fields(self) -> list[FieldSpec]:
        return [spec for spec in self.fields if spec.listed]


CATEGORY_SCHEMA = EntitySchema(
    resource="categories",
    label="Categories",
    fields=(
        FieldSpec("name", "Name", max_length=50),
        FieldSpec("description", "Description", required=False, max_length=500),
    ),
)

SUPPLIER_SCHEMA = EntitySchema(
    resource="suppliers",
    label="Suppliers",
    fields=(
        FieldSpec("name", "Name", max_length=100),
        FieldSpec("email", "Email", kind="email", max_length=50),
        FieldSpec("phoneNumber", "Phone number", kind="phone", max_length=20),
        FieldSpec("address", "Address", max_length=500),
    ),
)

PRODUCT_SCHEMA = EntitySchema(
    resource="products",
    label="Products",
    fields=(
        FieldSpec("name", "Name", max_length=50),
        FieldSpec("price", "Price", kind="number", default=0, min_value=0),
        FieldSpec("discount", "Discount (%)", kind="number", required=False, default=0, min_value=0),
        FieldSpec("stock", "Stock", kind="number", required=False, default=0, min_value=0),
        FieldSpec("categoryId", "Category", kind="reference"),
        FieldSpec("supplierId", "Supplier", kind="reference"),
        FieldSpec("description", "Description", required=False, max_length=3000, listed=False),
    ),
)

SCHEMAS: dict[str, EntitySchema] = {
    schema.resource: schema for schema in (CATEGORY_SCHEMA, SUPPLIER_SCHEMA, PRODUCT_SCHEMA)
}
