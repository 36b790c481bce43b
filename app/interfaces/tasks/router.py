"""
FastAPI router for tasks.

Each route takes the validated request from the validation gate, calls
the TaskService and wraps the outcome in the response envelope.
A None result from the service becomes a 404. Raised faults are mapped
by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.application.tasks.dtos import CreateTaskCommand, UpdateTaskCommand
from app.application.tasks.task_service import TaskService
from app.interfaces.schemas import ERROR_RESPONSES, Envelope
from app.interfaces.tasks.dependencies import get_task_service
from app.interfaces.tasks.schemas import (
    CreateTaskRequest,
    TaskIdRequest,
    TaskResponse,
    UpdateTaskRequest,
)
from app.shared.responses import send_error, send_success
from app.shared.security.rate_limiting import rate_limited
from app.shared.status_codes import StatusCodes
from app.shared.validation import validate

router = APIRouter(prefix="/tasks", tags=["tasks"])

TASK_NOT_FOUND = "Task not found"


@router.get(
    "",
    response_model=Envelope[list[TaskResponse]],
    summary="List tasks",
    description="Return every task, newest first.",
)
@rate_limited
async def list_tasks(
    request: Request,
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    tasks = await service.list_tasks()
    return send_success(
        [TaskResponse.from_entity(task) for task in tasks],
        "Tasks retrieved successfully",
    )


@router.post(
    "",
    status_code=StatusCodes.CREATED,
    response_model=Envelope[TaskResponse],
    responses=ERROR_RESPONSES,
    summary="Create a task",
)
@rate_limited
async def create_task(
    request: Request,
    payload: CreateTaskRequest = Depends(validate(CreateTaskRequest)),
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    command = CreateTaskCommand(
        title=payload.body.title,
        description=payload.body.description,
        completed=payload.body.completed,
    )
    task = await service.create_task(command)
    return send_success(
        TaskResponse.from_entity(task),
        "Task created successfully",
        StatusCodes.CREATED,
    )


@router.get(
    "/{id}",
    response_model=Envelope[TaskResponse],
    responses=ERROR_RESPONSES,
    summary="Get a task",
)
@rate_limited
async def get_task(
    request: Request,
    payload: TaskIdRequest = Depends(validate(TaskIdRequest)),
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    task = await service.get_task(payload.params.id)
    if task is None:
        return send_error(TASK_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(TaskResponse.from_entity(task), "Task retrieved successfully")


@router.put(
    "/{id}",
    response_model=Envelope[TaskResponse],
    responses=ERROR_RESPONSES,
    summary="Update a task",
    description="Partially update a task; omitted fields keep their value.",
)
@rate_limited
async def update_task(
    request: Request,
    payload: UpdateTaskRequest = Depends(validate(UpdateTaskRequest)),
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    command = UpdateTaskCommand(
        title=payload.body.title,
        description=payload.body.description,
        completed=payload.body.completed,
    )
    task = await service.update_task(payload.params.id, command)
    if task is None:
        return send_error(TASK_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(TaskResponse.from_entity(task), "Task updated successfully")


@router.delete(
    "/{id}",
    response_model=Envelope[TaskResponse],
    responses=ERROR_RESPONSES,
    summary="Delete a task",
    description="Delete a task and return the deleted record.",
)
@rate_limited
async def delete_task(
    request: Request,
    payload: TaskIdRequest = Depends(validate(TaskIdRequest)),
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    task = await service.delete_task(payload.params.id)
    if task is None:
        return send_error(TASK_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(TaskResponse.from_entity(task), "Task deleted successfully")


@router.patch(
    "/{id}/toggle",
    response_model=Envelope[TaskResponse],
    responses=ERROR_RESPONSES,
    summary="Toggle task completion",
)
@rate_limited
async def toggle_task(
    request: Request,
    payload: TaskIdRequest = Depends(validate(TaskIdRequest)),
    service: TaskService = Depends(get_task_service),
) -> JSONResponse:
    task = await service.toggle_task(payload.params.id)
    if task is None:
        return send_error(TASK_NOT_FOUND, StatusCodes.NOT_FOUND)
    return send_success(
        TaskResponse.from_entity(task), "Task status toggled successfully"
    )
