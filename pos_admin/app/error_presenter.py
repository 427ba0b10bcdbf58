from __future__ import annotations

from typing import Any

from pos_admin.clients.pos_sdk.exceptions import (
    ApiError,
    ApplicationError,
    TransportError,
    UnauthenticatedError,
)


def build_error_payload(error: Exception | None, field_errors: dict[str, str] | None = None) -> dict[str, Any]:
    if field_errors:
        return {
            "category": "validation",
            "code": "VALIDATION_FAILED",
            "message": "; ".join(f"{key}: {value}" for key, value in field_errors.items()),
            "status_code": None,
            "action": _suggest_action("validation"),
        }
    if isinstance(error, ApiError):
        category = _classify_api_error(error)
        return {
            "category": category,
            "code": error.code,
            "message": error.message,
            "status_code": error.status_code,
            "action": _suggest_action(category),
        }
    return {
        "category": "internal",
        "code": "INTERNAL_ERROR",
        "message": str(error),
        "status_code": None,
        "action": "Retry",
    }


def print_error_banner(payload: dict[str, Any]) -> None:
    status = payload.get("status_code") or "n/a"
    print(
        "[ERROR] "
        f"code={payload.get('code')} "
        f"message={payload.get('message')} "
        f"status={status} "
        f"category={payload.get('category')} "
        f"action={payload.get('action')}"
    )


def _classify_api_error(error: ApiError) -> str:
    if isinstance(error, UnauthenticatedError):
        return "unauthenticated"
    if isinstance(error, ApplicationError):
        return "application"
    if isinstance(error, TransportError):
        return "network/timeout"
    if error.status_code and error.status_code >= 500:
        return "server"
    return "request"


def _suggest_action(category: str) -> str:
    if category == "unauthenticated":
        return "Go to login"
    if category == "application":
        return "Review the message"
    if category == "validation":
        return "Fix the highlighted fields"
    return "Retry"
