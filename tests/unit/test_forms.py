import asyncio

from catalog_console.app.domain.schemas import CATEGORY_SCHEMA, PRODUCT_SCHEMA, SUPPLIER_SCHEMA
from catalog_console.app.ui.forms import Form, FormStatus, build_form_state


def test_required_fields_and_max_length() -> None:
    form = Form(CATEGORY_SCHEMA)

    result = form.validate()
    assert result.field_errors == {"name": "Name is required."}

    form.set_value("name", "x" * 51)
    result = form.validate()
    assert result.field_errors == {"name": "Name cannot exceed 50 characters."}


def test_supplier_email_is_lowercased_and_phone_checked() -> None:
    form = Form(SUPPLIER_SCHEMA)
    form.bind({"name": "ACME", "email": "Sales@ACME.io ", "phoneNumber": "12", "address": "Main St 1"})

    result = form.validate()

    assert result.values["email"] == "sales@acme.io"
    assert set(result.field_errors) == {"phoneNumber"}

    form.set_value("phoneNumber", "+1 555-010-2030")
    assert form.validate().is_valid


def test_product_numbers_are_converted_and_bounded() -> None:
    form = Form(PRODUCT_SCHEMA)
    form.bind({"name": "Shoe", "price": "19.90", "stock": "4", "categoryId": "c1", "supplierId": "s1"})

    result = form.validate()
    assert result.is_valid
    assert result.values["price"] == 19.9
    assert result.values["stock"] == 4
    assert result.values["discount"] == 0

    form.set_value("price", "-1")
    assert form.validate().field_errors == {"price": "Price must be at least 0."}

    form.set_value("price", "cheap")
    assert form.validate().field_errors == {"price": "Price must be a number."}


def test_bind_copies_only_schema_keys_by_value() -> None:
    tags = ["a"]
    form = Form(CATEGORY_SCHEMA)

    form.bind({"name": "Shoes", "isDeleted": False, "description": tags})
    tags.append("b")

    assert set(form.values) == {"name", "description"}
    assert form.values["description"] == ["a"]


def test_set_value_rejects_unknown_field() -> None:
    form = Form(CATEGORY_SCHEMA)

    try:
        form.set_value("price", 1)
        raised = False
    except KeyError:
        raised = True

    assert raised


def test_submit_passes_a_copy_of_cleaned_values_to_handler() -> None:
    received = []

    async def _handler(values):
        received.append(values)
        values["name"] = "mutated"

    form = Form(CATEGORY_SCHEMA, handler=_handler)
    form.set_value("name", " Shoes ")

    result = asyncio.run(form.submit())

    assert result.submitted is True
    assert received == [{"name": "mutated", "description": ""}]
    assert result.values["name"] == "Shoes"
    assert form.status == FormStatus.SUCCESS


def test_submit_skips_handler_when_invalid() -> None:
    calls = []
    form = Form(CATEGORY_SCHEMA, handler=lambda values: calls.append(values))

    result = asyncio.run(form.submit())

    assert result.submitted is False
    assert calls == []


def test_build_form_state_disables_submit_until_valid() -> None:
    form = Form(CATEGORY_SCHEMA)

    blocked = build_form_state(form.validate())
    form.set_value("name", "Shoes")
    ready = build_form_state(form.validate())

    assert blocked.submit_enabled is False
    assert "name" in blocked.submit_disabled_reason
    assert ready.submit_enabled is True
