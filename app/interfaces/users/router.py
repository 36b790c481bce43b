"""
FastAPI router for users.

Same dispatch as the task routes: validated request in, service call,
enveloped response out. Duplicate emails surface from the store and are
answered 409 by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.application.users.dtos import CreateUserCommand, UpdateUserCommand
from app.application.users.user_service import UserService
from app.interfaces.schemas import ERROR_RESPONSES, Envelope, ErrorEnvelope
from app.interfaces.users.dependencies import get_user_service
from app.interfaces.users.schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserIdRequest,
    UserResponse,
)
from app.shared.responses import send_error, send_success
from app.shared.security.rate_limiting import rate_limited
from app.shared.status_codes import StatusCodes
from app.shared.validation import validate

router = APIRouter(prefix="/users", tags=["users"])

USER_NOT_FOUND = "User not found"

WRITE_RESPONSES = {**ERROR_RESPONSES, 409: {"model": ErrorEnvelope}}


@router.get(
    "",
    response_model=Envelope[list[UserResponse]],
    summary="List users",
)
@rate_limited
async def list_users(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    users = await service.list_users()
    return send_success(
        [UserResponse.from_entity(user) for user in users],
        "Users retrieved successfully",
    )


@router.post(
    "",
    response_model=Envelope[UserResponse],
    responses=WRITE_RESPONSES,
    summary="Create a user",
    description="Register a user. The email must not belong to another user.",
)
@rate_limited
async def create_user(
    request: Request,
    payload: CreateUserRequest = Depends(validate(CreateUserRequest)),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    command = CreateUserCommand(name=payload.body.name, email=payload.body.email)
    user = await service.create_user(command)
    return send_success(UserResponse.from_entity(user), "User created successfully")


@router.get(
    "/{id}",
    response_model=Envelope[UserResponse],
    responses=ERROR_RESPONSES,
    summary="Get a user",
)
@rate_limited
async def get_user(
    request: Request,
    payload: UserIdRequest = Depends(validate(UserIdRequest)),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    user = await service.get_user(payload.params.id)
    if user is None:
        return send_error(USER_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(UserResponse.from_entity(user), "User retrieved successfully")


@router.put(
    "/{id}",
    response_model=Envelope[UserResponse],
    responses=WRITE_RESPONSES,
    summary="Update a user",
)
@rate_limited
async def update_user(
    request: Request,
    payload: UpdateUserRequest = Depends(validate(UpdateUserRequest)),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    command = UpdateUserCommand(name=payload.body.name, email=payload.body.email)
    user = await service.update_user(payload.params.id, command)
    if user is None:
        return send_error(USER_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(UserResponse.from_entity(user), "User updated successfully")


@router.delete(
    "/{id}",
    response_model=Envelope[UserResponse],
    responses=ERROR_RESPONSES,
    summary="Delete a user",
)
@rate_limited
async def delete_user(
    request: Request,
    payload: UserIdRequest = Depends(validate(UserIdRequest)),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    user = await service.delete_user(payload.params.id)
    if user is None:
        return send_error(USER_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(UserResponse.from_entity(user), "User deleted successfully")
