"""The task record stored by the service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Task:
    """A single to-do item owned by a user."""

    id: int = 0
    user_id: int = 0
    title: str = ""
    description: str = ""
    is_done: bool = False