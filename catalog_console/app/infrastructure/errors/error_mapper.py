from catalog_client_sdk.errors import ApiError


class ErrorMapper:
    _KNOWN_CODES = {
        "VALIDATION_ERROR": ("The request did not pass server validation.", "Review the form fields and try again."),
        "TIMEOUT_ERROR": ("The server took too long to respond.", "Try the action again."),
        "NETWORK_ERROR": ("The catalog API is not reachable.", "Check the network and the API base URL."),
        "INTERNAL_ERROR": ("Unexpected error in the operation.", "Try again and report it if it persists."),
    }

    _STATUS_HINTS = {
        401: ("AUTH_REQUIRED", "The session is not authenticated.", "Log in again."),
        403: ("PERMISSION_DENIED", "Permission denied for this operation.", "Ask an administrator for access."),
        404: ("NOT_FOUND", "The record no longer exists.", "Reload the list."),
        422: ("VALIDATION_ERROR", "The request did not pass server validation.", "Review the form fields and try again."),
        500: ("INTERNAL_ERROR", "Internal error in the catalog API.", "Try again and share the trace_id if it persists."),
    }

    @classmethod
    def validation_messages(cls, error: Exception) -> list[str]:
        if isinstance(error, ApiError) and error.is_validation_error:
            return list(error.errors)
        return []

    @classmethod
    def to_payload(cls, error: Exception) -> dict:
        if isinstance(error, ApiError):
            status_code = error.status_code or -1
            mapped = cls._STATUS_HINTS.get(status_code)
            if mapped is None and status_code >= 500:
                mapped = cls._STATUS_HINTS[500]
            if mapped is not None:
                code, message, suggestion = mapped
            else:
                message, suggestion = cls._KNOWN_CODES.get(
                    error.code,
                    (error.message, "Contact support with the trace_id."),
                )
                code = error.code
            return {
                "code": code,
                "message": message,
                "details": error.details,
                "errors": list(error.errors),
                "trace_id": error.trace_id,
                "status_code": error.status_code,
                "suggestion": suggestion,
            }
        return {
            "code": "INTERNAL_ERROR",
            "message": str(error),
            "details": None,
            "errors": [],
            "trace_id": None,
            "status_code": None,
            "suggestion": "Try again and report it if it persists.",
        }

