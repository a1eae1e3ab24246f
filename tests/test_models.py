"""Tests for user payload validation."""

import pytest
from pydantic import ValidationError

from user_registry.models.user import UserCreate, UserUpdate


@pytest.mark.unit
def test_name_is_trimmed_and_email_kept() -> None:
    payload = UserCreate(name="  Ann  ", email="Ann@X.com")

    assert payload.name == "Ann"
    assert payload.email == "Ann@X.com"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["", "   ", None, 5])
def test_blank_name_rejected(name: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(name=name, email="ann@x.com")

    errors = exc_info.value.errors()
    assert [e["loc"] for e in errors] == [("name",)]
    assert errors[0]["msg"] == "Name is required"


@pytest.mark.unit
def test_update_uses_its_own_name_message() -> None:
    with pytest.raises(ValidationError) as exc_info:
        UserUpdate(name="", email="ann@x.com")

    assert exc_info.value.errors()[0]["msg"] == "Name is mandatory"


@pytest.mark.unit
@pytest.mark.parametrize(
    "email",
    ["not-an-email", "ann@", "@x.com", "", 12, "Ann <ann@x.com>", "<ann@x.com>", " ann@x.com", "ann@x.com "],
)
def test_invalid_email_rejected(email: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        UserCreate(name="Ann", email=email)

    errors = exc_info.value.errors()
    assert [e["loc"] for e in errors] == [("email",)]
    assert errors[0]["msg"] == "Valid email is required"


@pytest.mark.unit
def test_missing_fields_fail_both_rules() -> None:
    with pytest.raises(ValidationError) as exc_info:
        UserCreate()

    assert {e["loc"] for e in exc_info.value.errors()} == {("name",), ("email",)}
