"""
Task Service

Business logic for task operations.
"""
import logging
from datetime import datetime
from typing import List, Optional
from taskhub.modules.clock import to_naive_utc
from taskhub.modules.errors import NotFoundError, ValidationError
from taskhub.modules.schema import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from taskhub.modules.tasks.domain.task import Task
from taskhub.modules.tasks.repositories.task_repository import TaskRepository
from taskhub.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("taskhub.tasks.service")


class TaskService:
    """Service for task business logic."""

    def __init__(self, repository: TaskRepository, user_repository: UserRepository):
        self.repository = repository
        self.user_repository = user_repository

    async def create_task(
        self,
        user_id: int,
        title: Optional[str],
        description: Optional[str] = None,
        due_date: Optional[datetime] = None
    ) -> Task:
        """
        Create a task for an existing user.

        Raises:
            ValidationError: If the title is blank or a field is too long
            NotFoundError: If the owning user does not exist
        """
        title = (title or "").strip()
        if not title:
            raise ValidationError("Title is required.")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(f"Title must be at most {TITLE_MAX_LENGTH} characters.")

        if description is not None:
            description = description.strip()
            if len(description) > DESCRIPTION_MAX_LENGTH:
                raise ValidationError(f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters.")

        logger.debug(f"[TaskService.create_task] user_id={user_id}, title={title}")

        if not await self.user_repository.exists(user_id):
            raise NotFoundError(f"User {user_id} not found.")

        task_id = await self.repository.create(
            user_id=user_id,
            title=title,
            description=description,
            due_date=to_naive_utc(due_date)
        )
        logger.info(f"[TaskService.create_task] Created task {task_id} for user {user_id}")

        task_data = await self.repository.get_by_id(task_id)
        return Task.from_dict(task_data)

    async def get_task(self, task_id: int) -> Task:
        task_data = await self.repository.get_by_id(task_id)
        if not task_data:
            raise NotFoundError(f"Task {task_id} not found.")
        return Task.from_dict(task_data)

    async def list_tasks_for_user(self, user_id: int) -> List[Task]:
        """
        List a user's tasks.

        An empty result is disambiguated with an existence check so that a
        missing user is reported as NotFoundError rather than an empty list.
        """
        logger.debug(f"[TaskService.list_tasks_for_user] user_id={user_id}")

        tasks_data = await self.repository.list_for_user(user_id)
        if not tasks_data and not await self.user_repository.exists(user_id):
            raise NotFoundError(f"User {user_id} not found.")
        return [Task.from_dict(task_data) for task_data in tasks_data]
