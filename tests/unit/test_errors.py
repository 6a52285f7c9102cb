import httpx

from catalog_client_sdk.errors import ApiError
from catalog_console.app.infrastructure.errors.error_mapper import ErrorMapper


def test_validation_errors_are_read_from_flat_errors_array() -> None:
    response = httpx.Response(
        400,
        json={"errors": ["Name is required", "Price must be positive"]},
        headers={"X-Trace-ID": "trace-1"},
    )

    error = ApiError.from_http_response(response)

    assert error.code == "VALIDATION_ERROR"
    assert error.is_validation_error is True
    assert error.errors == ["Name is required", "Price must be positive"]
    assert error.trace_id == "trace-1"
    assert error.status_code == 400


def test_non_string_errors_are_not_validation_errors() -> None:
    response = httpx.Response(400, json={"errors": [{"field": "name"}], "message": "bad"})

    error = ApiError.from_http_response(response)

    assert error.code == "HTTP_ERROR"
    assert error.errors == []
    assert error.message == "bad"


def test_non_json_error_body_keeps_text() -> None:
    error = ApiError.from_http_response(httpx.Response(502, text="Bad gateway"))

    assert error.code == "HTTP_ERROR"
    assert error.message == "Bad gateway"
    assert error.status_code == 502


def test_error_mapper_validation_messages() -> None:
    error = ApiError(code="VALIDATION_ERROR", message="bad", status_code=400, errors=["one", "two"])

    assert ErrorMapper.validation_messages(error) == ["one", "two"]
    assert ErrorMapper.validation_messages(RuntimeError("boom")) == []
    assert ErrorMapper.to_payload(error)["errors"] == ["one", "two"]


def test_error_mapper_maps_http_status_buckets() -> None:
    not_found = ErrorMapper.to_payload(ApiError(code="HTTP_ERROR", message="raw", status_code=404, trace_id="t-404"))
    server = ErrorMapper.to_payload(ApiError(code="HTTP_ERROR", message="raw", status_code=503))

    assert not_found["code"] == "NOT_FOUND"
    assert not_found["trace_id"] == "t-404"
    assert server["code"] == "INTERNAL_ERROR"
    assert server["suggestion"]


def test_error_mapper_fallback_internal_error() -> None:
    payload = ErrorMapper.to_payload(RuntimeError("boom"))

    assert payload["code"] == "INTERNAL_ERROR"
    assert payload["message"] == "boom"
