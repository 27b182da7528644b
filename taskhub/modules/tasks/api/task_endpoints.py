"""
Task API Endpoints
"""
import logging
from datetime import datetime
from typing import Optional
from databases import Database
from fastapi import APIRouter, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from taskhub.modules.api_models import CamelModel
from taskhub.modules.database import get_database
from taskhub.modules.schema import ID_MAX
from taskhub.modules.tasks.repositories.task_repository import TaskRepository
from taskhub.modules.tasks.services.task_service import TaskService
from taskhub.modules.users.auth.middleware import get_current_principal
from taskhub.modules.users.auth.tokens import Principal
from taskhub.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("taskhub.tasks.api")

router = APIRouter(prefix="/tasks", tags=["tasks"])


class CreateTaskRequest(CamelModel):
    user_id: int = Field(ge=1, le=ID_MAX)
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    user_id: int


def get_task_service(database: Database = Depends(get_database)) -> TaskService:
    return TaskService(TaskRepository(database), UserRepository(database))


async def read_create_task_request(request: Request) -> CreateTaskRequest:
    """
    Parse and validate the POST /tasks body.

    The body is read inside the handler rather than declared as a parameter,
    so the bearer dependency has already run and an anonymous caller gets 401
    even when the body is malformed.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise RequestValidationError(
            [{"loc": ("body",), "msg": "JSON decode error", "type": "json_invalid"}]
        )

    try:
        return CreateTaskRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors()]
        )


@router.post(
    "",
    status_code=201,
    response_model=TaskResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CreateTaskRequest.model_json_schema()}},
        }
    },
)
async def create_task(
    request: Request,
    response: Response,
    principal: Principal = Depends(get_current_principal),
    task_service: TaskService = Depends(get_task_service)
):
    """Create a task for a user. Requires a bearer token."""
    body = await read_create_task_request(request)
    logger.debug(f"[task_endpoints.create_task] caller={principal.user_id}, user_id={body.user_id}")

    task = await task_service.create_task(
        user_id=body.user_id,
        title=body.title,
        description=body.description,
        due_date=body.due_date
    )
    response.headers["Location"] = f"/tasks/{task.id}"
    return task.to_dict()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, task_service: TaskService = Depends(get_task_service)):
    """Get task details by ID."""
    task = await task_service.get_task(task_id)
    return task.to_dict()
