"""User API routes."""

from typing import Annotated, TypeVar

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from user_registry.models.user import (
    MessageResponse,
    User,
    UserCreate,
    UserUpdate,
    ValidationErrorResponse,
)
from user_registry.services import get_user_store
from user_registry.services.user_store import UserStore

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "User is not found"}}
_INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse, "description": "Validation errors"}}

# Optional sign and ASCII digits only; no decimals, padding or underscores
USER_ID_PATTERN = r"^[-+]?[0-9]+$"

PayloadT = TypeVar("PayloadT", UserCreate, UserUpdate)


def parse_user_id(user_id: Annotated[str, Path(pattern=USER_ID_PATTERN, description="User ID")]) -> int:
    return int(user_id)


UserId = Annotated[int, Depends(parse_user_id)]


def _payload_or_empty(payload: PayloadT | None, model: type[PayloadT]) -> PayloadT:
    """Validate a request without a body as an empty JSON object."""
    if payload is not None:
        return payload
    try:
        return model.model_validate({})
    except ValidationError as exc:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in exc.errors(include_url=False)]
        ) from exc


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={status.HTTP_201_CREATED: {"description": "User is created"}, **_INVALID},
)
async def create_user(
    payload: Annotated[UserCreate | None, Body()] = None,
    store: UserStore = Depends(get_user_store),
) -> User:
    return store.create_user(_payload_or_empty(payload, UserCreate))


@router.get("", response_model=list[User], summary="List all users")
async def list_users(store: UserStore = Depends(get_user_store)) -> list[User]:
    return store.list_users()


@router.get(
    "/{user_id}",
    response_model=User,
    summary="Get a user by ID",
    responses={status.HTTP_200_OK: {"description": "The requested user is found"}, **_INVALID, **_NOT_FOUND},
)
async def get_user(user_id: UserId, store: UserStore = Depends(get_user_store)) -> User:
    return store.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=User,
    summary="Update a user by ID",
    responses={status.HTTP_200_OK: {"description": "User is updated"}, **_INVALID, **_NOT_FOUND},
)
async def update_user(
    user_id: UserId,
    payload: Annotated[UserUpdate | None, Body()] = None,
    store: UserStore = Depends(get_user_store),
) -> User:
    return store.update_user(user_id, _payload_or_empty(payload, UserUpdate))


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user by ID",
    responses={status.HTTP_200_OK: {"description": "User is deleted"}, **_INVALID, **_NOT_FOUND},
)
async def delete_user(user_id: UserId, store: UserStore = Depends(get_user_store)) -> MessageResponse:
    store.delete_user(user_id)
    return MessageResponse(message="User is deleted")
