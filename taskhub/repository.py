"""Persistence of tasks in a SQL store."""

from __future__ import annotations

import sqlite3

from taskhub.models import Task

_SELECT = "SELECT id, user_id, title, description, is_done FROM tasks"


class RepositoryError(Exception):
    """Raised when the store rejects an operation."""


class TaskNotFoundError(RepositoryError, LookupError):
    """Raised when no task has the requested id."""

    def __init__(self, message: str = "task not found") -> None:
        super().__init__(message)


def _to_task(row: tuple) -> Task:
    task_id, user_id, title, description, is_done = row
    return Task(
        id=task_id,
        user_id=user_id,
        title=title,
        description=description,
        is_done=bool(is_done),
    )


class TaskRepository:
    """Reads and writes tasks through a DB-API connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def _insert(self, task: Task) -> None:
        values = (task.user_id, task.title, task.description, int(task.is_done))
        with self._connection:
            if task.id:
                cursor = self._connection.execute(
                    "INSERT INTO tasks (id, user_id, title, description, is_done) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (task.id, *values),
                )
            else:
                cursor = self._connection.execute(
                    "INSERT INTO tasks (user_id, title, description, is_done) VALUES (?, ?, ?, ?)",
                    values,
                )
        task.id = cursor.lastrowid

    def create(self, task: Task) -> Task:
        """Store *task*, assign its id when it has none, and return it."""
        try:
            self._insert(task)
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to create task: {exc}") from exc
        return task

    def get(self, task_id: int) -> Task:
        """Return the task with *task_id*."""
        try:
            row = self._connection.execute(
                f"{_SELECT} WHERE id = ? ORDER BY id LIMIT 1", (task_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to get task: {exc}") from exc
        if row is None:
            raise TaskNotFoundError()
        return _to_task(row)

    def list(self) -> list[Task]:
        """Return every stored task."""
        try:
            rows = self._connection.execute(f"{_SELECT} ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to list tasks: {exc}") from exc
        return [_to_task(row) for row in rows]

    def list_by_user(self, user_id: int) -> list[Task]:
        """Return the tasks owned by *user_id*."""
        try:
            rows = self._connection.execute(
                f"{_SELECT} WHERE user_id = ? ORDER BY id", (user_id,)
            ).fetchall()
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to list tasks by user: {exc}") from exc
        return [_to_task(row) for row in rows]

    def update(self, task: Task) -> Task:
        """Save every field of *task*, inserting it when it is not stored yet."""
        try:
            if task.id:
                with self._connection:
                    self._connection.execute(
                        "INSERT INTO tasks (id, user_id, title, description, is_done) "
                        "VALUES (?, ?, ?, ?, ?) "
                        "ON CONFLICT(id) DO UPDATE SET user_id = excluded.user_id, "
                        "title = excluded.title, description = excluded.description, "
                        "is_done = excluded.is_done",
                        (task.id, task.user_id, task.title, task.description, int(task.is_done)),
                    )
            else:
                self._insert(task)
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to update task: {exc}") from exc
        return task

    def delete(self, task_id: int) -> None:
        """Remove the task with *task_id*; a missing task is not an error."""
        try:
            with self._connection:
                self._connection.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to delete task: {exc}") from exc