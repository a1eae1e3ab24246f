"""Application exceptions and validation error formatting."""

from collections.abc import Sequence
from typing import Any

from fastapi import status

from user_registry.models.user import ValidationErrorItem

ID_NOT_INTEGER = "ID should be an integer"

# FastAPI request locations -> names reported to clients
_LOCATIONS = {
    "body": "body",
    "path": "params",
    "query": "query",
    "header": "headers",
    "cookie": "cookies",
}


class AppException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UserNotFoundError(AppException):
    """Raised when no stored user has the requested id."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__("User is not found", status_code=status.HTTP_404_NOT_FOUND)


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> list[ValidationErrorItem]:
    """Convert pydantic error dicts into the client-facing error list.

    Args:
        errors: Errors as returned by ``RequestValidationError.errors()``

    Returns:
        One item per failed rule, in the order pydantic reported them
    """
    items: list[ValidationErrorItem] = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        source = str(loc[0]) if loc else "body"
        field = ".".join(str(part) for part in loc[1:])
        location = _LOCATIONS.get(source, source)

        msg = error.get("msg", "Invalid value")
        if source == "path":
            msg = ID_NOT_INTEGER
        elif error.get("type") == "json_invalid":
            msg = "Malformed JSON body"

        items.append(
            ValidationErrorItem(
                value=error.get("input"),
                msg=msg,
                path=field,
                location=location,
            )
        )
    return items
