"""RPC-style request handling for the task service."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Protocol

from taskhub.models import Task
from taskhub.service import TaskService


class StatusCode(enum.IntEnum):
    """Status codes reported to callers."""

    OK = 0
    NOT_FOUND = 5
    INTERNAL = 13


class RpcError(Exception):
    """A failed call, carrying a status code and a message."""

    def __init__(self, code: StatusCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass
class TaskMessage:
    id: int = 0
    user_id: int = 0
    title: str = ""
    description: str = ""
    is_done: bool = False

    @classmethod
    def from_task(cls, task: Task) -> TaskMessage:
        return cls(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            is_done=task.is_done,
        )


@dataclass
class GetUserRequest:
    id: int = 0


class UserClient(Protocol):
    """A client of the users service."""

    def get_user(self, request: GetUserRequest) -> Any:
        """Return the user named by *request*, raising if there is none."""


@dataclass
class CreateTaskRequest:
    user_id: int = 0
    title: str = ""
    description: str = ""


@dataclass
class CreateTaskResponse:
    task: TaskMessage | None = None


@dataclass
class GetTaskRequest:
    id: int = 0


@dataclass
class ListTasksRequest:
    pass


@dataclass
class ListTasksByUserRequest:
    user_id: int = 0


@dataclass
class ListTasksResponse:
    tasks: list[TaskMessage] = field(default_factory=list)


@dataclass
class UpdateTaskRequest:
    id: int = 0
    title: str = ""
    description: str = ""
    is_done: bool = False


@dataclass
class UpdateTaskResponse:
    task: TaskMessage | None = None


@dataclass
class DeleteTaskRequest:
    id: int = 0


@dataclass
class DeleteTaskResponse:
    pass


class Handler:
    """Serves task requests, checking users against the users service."""

    def __init__(self, service: TaskService, user_client: UserClient) -> None:
        self._service = service
        self._user_client = user_client

    def create_task(self, request: CreateTaskRequest) -> CreateTaskResponse:
        try:
            self._user_client.get_user(GetUserRequest(id=request.user_id))
        except Exception as exc:
            raise RpcError(
                StatusCode.NOT_FOUND, f"user {request.user_id} not found: {exc}"
            ) from exc
        try:
            task = self._service.create_task(request.user_id, request.title, request.description)
        except Exception as exc:
            raise RpcError(StatusCode.INTERNAL, f"failed to create task: {exc}") from exc
        return CreateTaskResponse(task=TaskMessage.from_task(task))

    def get_task(self, request: GetTaskRequest) -> TaskMessage:
        try:
            task = self._service.get_task(request.id)
        except Exception as exc:
            raise RpcError(StatusCode.NOT_FOUND, f"task not found: {exc}") from exc
        return TaskMessage.from_task(task)

    def list_tasks(self, request: ListTasksRequest) -> ListTasksResponse:
        try:
            tasks = self._service.list_tasks()
        except Exception as exc:
            raise RpcError(StatusCode.INTERNAL, f"failed to list tasks: {exc}") from exc
        return ListTasksResponse(tasks=[TaskMessage.from_task(task) for task in tasks])

    def list_tasks_by_user(self, request: ListTasksByUserRequest) -> ListTasksResponse:
        try:
            tasks = self._service.list_tasks_by_user(request.user_id)
        except Exception as exc:
            raise RpcError(StatusCode.INTERNAL, f"failed to list tasks by user: {exc}") from exc
        return ListTasksResponse(tasks=[TaskMessage.from_task(task) for task in tasks])

    def update_task(self, request: UpdateTaskRequest) -> UpdateTaskResponse:
        to_update = Task(
            id=request.id,
            user_id=0,
            title=request.title,
            description=request.description,
            is_done=request.is_done,
        )
        try:
            updated = self._service.update_task(to_update)
        except Exception as exc:
            raise RpcError(StatusCode.INTERNAL, f"failed to update task: {exc}") from exc
        return UpdateTaskResponse(
            task=TaskMessage(
                id=updated.id,
                title=updated.title,
                description=updated.description,
                is_done=updated.is_done,
            )
        )

    def delete_task(self, request: DeleteTaskRequest) -> DeleteTaskResponse:
        try:
            self._service.delete_task(request.id)
        except Exception as exc:
            raise RpcError(StatusCode.INTERNAL, f"failed to delete task: {exc}") from exc
        return DeleteTaskResponse()