"""User models for the User Registry API."""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

NAME_REQUIRED = "Name is required"
NAME_MANDATORY = "Name is mandatory"
EMAIL_INVALID = "Valid email is required"


def _clean_name(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("name_empty", message)
    return value.strip()


def _check_email(value: Any) -> str:
    # validate_email also accepts "Name <addr>" and padded input; only a bare address is allowed
    if not isinstance(value, str) or value != value.strip() or "<" in value or ">" in value:
        raise PydanticCustomError("email_invalid", EMAIL_INVALID)
    try:
        _, address = validate_email(value)
    except PydanticCustomError:
        raise PydanticCustomError("email_invalid", EMAIL_INVALID) from None
    if address.lower() != value.lower():
        raise PydanticCustomError("email_invalid", EMAIL_INVALID)
    return value


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., gt=0, description="Unique identifier assigned by the service")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user", json_schema_extra={"format": "email"})

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }


class UserCreate(BaseModel):
    """Payload for creating a user.

    Missing fields are validated as empty strings so that they fail with the
    same rule message as blank ones. ``name`` is trimmed; ``email`` is kept
    exactly as submitted.
    """

    name: str = Field("", validate_default=True, description="Full name of the user")
    email: str = Field(
        "",
        validate_default=True,
        description="Email address of the user",
        json_schema_extra={"format": "email"},
    )

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value: Any) -> str:
        return _clean_name(value, NAME_REQUIRED)

    @field_validator("email", mode="before")
    @classmethod
    def email_is_valid(cls, value: Any) -> str:
        return _check_email(value)

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }


class UserUpdate(UserCreate):
    """Payload for replacing a user's name and email."""

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value: Any) -> str:
        return _clean_name(value, NAME_MANDATORY)


class MessageResponse(BaseModel):
    """Plain message body used for deletions and not-found errors."""

    message: str


class ValidationErrorItem(BaseModel):
    """A single failed validation rule."""

    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response caused by invalid input."""

    errors: list[ValidationErrorItem]
