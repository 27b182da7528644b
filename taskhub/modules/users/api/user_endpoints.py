"""
User Management API Endpoints

REST API endpoints for user CRUD operations.
"""
import logging
from datetime import datetime
from typing import List, Optional
from databases import Database
from fastapi import APIRouter, Depends, Response
from taskhub.modules.api_models import CamelModel
from taskhub.modules.database import get_database
from taskhub.modules.tasks.api.task_endpoints import TaskResponse, get_task_service
from taskhub.modules.tasks.services.task_service import TaskService
from taskhub.modules.users.repositories.user_repository import UserRepository
from taskhub.modules.users.services.user_service import UserService

logger = logging.getLogger("taskhub.users.api")

router = APIRouter(prefix="/users", tags=["users"])


# Request/Response Models
class UserRequest(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    created_at: datetime


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    return UserService(UserRepository(database))


@router.get("", response_model=List[UserResponse])
async def list_users(user_service: UserService = Depends(get_user_service)):
    """List all users."""
    users = await user_service.list_users()
    return [user.to_dict() for user in users]


@router.post("", status_code=201, response_model=UserResponse)
async def create_user(
    request: UserRequest,
    response: Response,
    user_service: UserService = Depends(get_user_service)
):
    """Create a user without credentials."""
    logger.debug(f"[user_endpoints.create_user] username={request.username}, email={request.email}")

    user = await user_service.create_user(username=request.username, email=request.email)
    response.headers["Location"] = f"/users/{user.id}"
    return user.to_dict()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Get user details by ID."""
    user = await user_service.get_user(user_id)
    return user.to_dict()


@router.put("/{user_id}", status_code=204)
async def update_user(
    user_id: int,
    request: UserRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Replace username and email."""
    logger.debug(f"[user_endpoints.update_user] user_id={user_id}")

    await user_service.update_user(user_id, username=request.username, email=request.email)
    return Response(status_code=204)


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Delete a user and all of their tasks."""
    logger.debug(f"[user_endpoints.delete_user] user_id={user_id}")

    await user_service.delete_user(user_id)
    return Response(status_code=204)


@router.get("/{user_id}/tasks", response_model=List[TaskResponse])
async def list_user_tasks(user_id: int, task_service: TaskService = Depends(get_task_service)):
    """List the tasks owned by a user; 404 if the user does not exist."""
    tasks = await task_service.list_tasks_for_user(user_id)
    return [task.to_dict() for task in tasks]
