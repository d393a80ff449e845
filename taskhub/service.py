"""Task operations on top of a repository."""

from __future__ import annotations

from taskhub.models import Task
from taskhub.repository import RepositoryError, TaskRepository


class TaskService:
    """Business operations for tasks."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def create_task(self, user_id: int, title: str, description: str) -> Task:
        """Create a new, not yet done task for *user_id*."""
        new_task = Task(user_id=user_id, title=title, description=description, is_done=False)
        try:
            return self._repository.create(new_task)
        except RepositoryError as exc:
            raise RepositoryError(f"failed to create task: {exc}") from exc

    def get_task(self, task_id: int) -> Task:
        """Return the task with *task_id*."""
        return self._repository.get(task_id)

    def list_tasks(self) -> list[Task]:
        """Return every task."""
        return self._repository.list()

    def list_tasks_by_user(self, user_id: int) -> list[Task]:
        """Return the tasks owned by *user_id*."""
        return self._repository.list_by_user(user_id)

    def update_task(self, task: Task) -> Task:
        """Save *task* as given."""
        return self._repository.update(task)

    def delete_task(self, task_id: int) -> None:
        """Remove the task with *task_id*."""
        self._repository.delete(task_id)