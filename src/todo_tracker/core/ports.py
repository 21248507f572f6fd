# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the console layer.

Menu handlers depend on this Protocol instead of the concrete TaskStore,
which keeps the store swappable and makes testing easier.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def create(self, title: str, description: str | None, due_date: date | None) -> Task: ...
    def list_pending(self) -> list[Task]: ...
    def search_by_title(self, query: str) -> list[Task]: ...
    def find_by_id(self, task_id: int) -> Task | None: ...
    def mark_completed(self, task_id: int) -> bool: ...
    def delete(self, task_id: int) -> bool: ...
    def list_all(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...
