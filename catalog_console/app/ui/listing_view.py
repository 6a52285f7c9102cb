from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from catalog_console.app.domain.models.entity import Entity
from catalog_console.app.domain.schemas import EntitySchema
from catalog_console.app.ui.pagination import PaginationState
from catalog_console.app.ui.table_printer import render_table

ROW_NUMBER_KEY = "__no__"


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str


class ListSource(Protocol):
    schema: EntitySchema
    snapshot: list[Entity]
    pagination: PaginationState

    async def change_page(self, page: int, page_size: int) -> Any: ...

    def select_for_edit(self, entity: Entity) -> Any: ...

    async def delete(self, entity_id: str) -> Any: ...


def build_columns(schema: EntitySchema) -> list[ColumnDef]:
    columns = [ColumnDef(ROW_NUMBER_KEY, "No")]
    columns.extend(ColumnDef(spec.key, spec.label) for spec in schema.listed_fields())
    columns.append(ColumnDef("id", "ID"))
    return columns


class ListView:
    """Text rendering of a controller's current page.

    Holds no list state of its own; the only thing it remembers is which row
    is waiting for a delete confirmation.
    """

    def __init__(self, source: ListSource) -> None:
        self.source = source
        self.columns = build_columns(source.schema)
        self.pending_delete_id: str | None = None

    def rows(self) -> list[dict[str, Any]]:
        pagination = self.source.pagination
        return [
            {ROW_NUMBER_KEY: pagination.row_number(index), **entity.to_row()}
            for index, entity in enumerate(self.source.snapshot)
        ]

    def render(self) -> str:
        pagination = self.source.pagination
        table = render_table(
            self.source.schema.label.upper(),
            self.rows(),
            [(column.key, column.label) for column in self.columns],
        )
        footer = (
            f"page {pagination.page}/{pagination.total_pages} "
            f"| page_size {pagination.page_size} | total {pagination.total}"
        )
        return f"{table}\n{footer}"

    def entity_at(self, row_number: int) -> Entity | None:
        pagination = self.source.pagination
        index = row_number - 1 - pagination.page_size * (pagination.page - 1)
        if 0 <= index < len(self.source.snapshot):
            return self.source.snapshot[index]
        return None

    async def change_page(self, page: int, page_size: int | None = None) -> Any:
        size = page_size or self.source.pagination.page_size
        return await self.source.change_page(max(1, page), max(1, size))

    async def next_page(self) -> Any:
        pagination = self.source.pagination
        if not pagination.has_next:
            return None
        return await self.change_page(pagination.page + 1)

    async def prev_page(self) -> Any:
        pagination = self.source.pagination
        if not pagination.has_prev:
            return None
        return await self.change_page(pagination.page - 1)

    def edit(self, entity: Entity) -> Any:
        return self.source.select_for_edit(entity)

    def request_delete(self, entity_id: str) -> None:
        self.pending_delete_id = entity_id

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    async def confirm_delete(self) -> Any:
        entity_id = self.pending_delete_id
        if entity_id is None:
            return None
        self.pending_delete_id = None
        return await self.source.delete(entity_id)
