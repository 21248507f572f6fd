# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The only transition is pending -> completed; there is no way back.
    """

    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str | None = None
    due_date: date | None = None
    completed: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self.completed else TaskStatus.PENDING

    @property
    def has_description(self) -> bool:
        return bool(self.description and self.description.strip())
