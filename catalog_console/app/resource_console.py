from __future__ import annotations

from collections.abc import Callable

from catalog_console.app.application.detail_controller import ADD_ID, ResourceDetailController
from catalog_console.app.application.resource_controller import ResourceController
from catalog_console.app.domain.models.entity import Entity
from catalog_console.app.navigation import LOCATIONS, Navigator, detail_location, list_location
from catalog_console.app.ui.forms import Form, FormResult, build_form_state
from catalog_console.app.ui.listing_view import ListView
from catalog_console.app.ui.table_printer import normalize_value

Prompt = Callable[[str], str]
DetailFactory = Callable[[str], ResourceDetailController]


def fill_form(form: Form, prompt: Prompt) -> None:
    for spec in form.schema.fields:
        current = normalize_value(form.values.get(spec.key))
        suffix = "" if spec.required else " (optional)"
        raw = prompt(f"{spec.label}{suffix} [{current}]: ").strip()
        if raw:
            form.set_value(spec.key, raw)


def print_form_errors(result: FormResult) -> None:
    state = build_form_state(result)
    for key, message in result.field_errors.items():
        print(f"[error] {key}: {message}")
    if state.submit_disabled_reason:
        print(f"[form] {state.submit_disabled_reason}")


class ResourceConsole:
    def __init__(
        self,
        controller: ResourceController,
        navigator: Navigator,
        detail_factory: DetailFactory,
        prompt: Prompt = input,
    ) -> None:
        self.controller = controller
        self.navigator = navigator
        self.detail_factory = detail_factory
        self.prompt = prompt
        self.view = ListView(controller)

    async def run(self) -> None:
        resource = self.controller.resource
        self.navigator.navigate(list_location(resource))
        print(f"[loading] Loading {resource} page={self.controller.pagination.page}...")
        await self.controller.load_page()

        while self.navigator.route.key == "list":
            print(self.view.render())
            print(
                "\nCommands: n=next, p=prev, g=goto, z=page_size, r=refresh, "
                "c=create, e=edit, d=delete, o=open detail, b=back"
            )
            command = self.prompt("cmd: ").strip().lower()

            if command == "n":
                await self.view.next_page()
            elif command == "p":
                await self.view.prev_page()
            elif command == "g":
                requested = self.prompt("page: ").strip()
                if requested.isdigit():
                    await self.view.change_page(int(requested))
            elif command == "z":
                requested_size = self.prompt("page_size: ").strip()
                if requested_size.isdigit() and int(requested_size) > 0:
                    await self.view.change_page(self.controller.pagination.page, int(requested_size))
            elif command == "r":
                print(f"[refresh] Reloading {resource}...")
                await self.controller.invalidate_and_reload()
            elif command == "c":
                await self._create()
            elif command == "e":
                await self._edit()
            elif command == "d":
                await self._delete()
            elif command == "o":
                await self._open_detail()
            elif command == "b":
                self.navigator.navigate(LOCATIONS["HOME"])
                return
            else:
                print("Invalid option.")

    async def _create(self) -> None:
        fill_form(self.controller.create_form, self.prompt)
        result = await self.controller.submit_create()
        if not result.is_valid:
            print_form_errors(result)

    async def _edit(self) -> None:
        entity = self._pick_row()
        if entity is None:
            return
        self.view.edit(entity)
        fill_form(self.controller.edit_form, self.prompt)
        if self.prompt("Save changes? [y/N]: ").strip().lower() != "y":
            self.controller.close_edit()
            return
        result = await self.controller.submit_edit()
        if not result.is_valid:
            print_form_errors(result)

    async def _delete(self) -> None:
        entity = self._pick_row()
        if entity is None:
            return
        self.view.request_delete(entity.id)
        if self.prompt("Delete this record? [y/N]: ").strip().lower() == "y":
            await self.view.confirm_delete()
        else:
            self.view.cancel_delete()

    async def _open_detail(self) -> None:
        raw = self.prompt(f"row number or '{ADD_ID}': ").strip().lower()
        if raw == ADD_ID:
            entity_id = ADD_ID
        else:
            entity = self.view.entity_at(int(raw)) if raw.isdigit() else None
            if entity is None:
                print("[error] No such row on this page.")
                return
            entity_id = entity.id
        self.navigator.navigate(detail_location(self.controller.resource, entity_id))
        await run_detail(self.detail_factory(entity_id), self.prompt)
        self.navigator.navigate(list_location(self.controller.resource))
        await self.controller.invalidate_and_reload()

    def _pick_row(self) -> Entity | None:
        raw = self.prompt("row number: ").strip()
        entity = self.view.entity_at(int(raw)) if raw.isdigit() else None
        if entity is None:
            print("[error] No such row on this page.")
        return entity


async def run_detail(detail: ResourceDetailController, prompt: Prompt = input) -> None:
    if detail.is_edit and await detail.load() is None:
        print(f"[error] {detail.resource}/{detail.entity_id} could not be loaded.")
        return

    while True:
        title = f"{detail.schema.label} / {detail.entity_id}"
        print(f"\n{title}")
        for spec in detail.schema.fields:
            print(f"  {spec.label}: {normalize_value(detail.form.values.get(spec.key))}")
        delete_label = ", x=delete" if detail.is_edit else ""
        command = prompt(f"Commands: s=save{delete_label}, b=back\ncmd: ").strip().lower()

        if command == "s":
            fill_form(detail.form, prompt)
            result = await detail.submit()
            if not result.is_valid:
                print_form_errors(result)
            elif result.outcome is not None and result.outcome.ok:
                return
        elif command == "x" and detail.is_edit:
            if prompt("Delete this record? [y/N]: ").strip().lower() == "y":
                outcome = await detail.delete()
                if outcome.ok:
                    return
        elif command == "b":
            return
        else:
            print("Invalid option.")
