# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
import threading
from datetime import date

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Tasks live in an insertion-ordered dict keyed by id. Ids come from a
    counter owned by the store: they start at 1, grow by 1 on every create
    and are never handed out again, even after a delete.

    Thread-safety:
    - id allocation and every mutation of the dict happen under one lock

    Nothing is validated here; callers pass a non-blank title and a parsed date.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        logger.info("TaskStore ready total=%s", self.count_tasks())

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create(self, title: str, description: str | None, due_date: date | None) -> Task:
        with self._lock:
            task = Task(
                id=next(self._ids),
                title=title,
                description=description,
                due_date=due_date,
            )
            self._tasks[task.id] = task
        logger.debug("Task added id=%s due_date=%s", task.id, due_date)
        return task

    def list_pending(self) -> list[Task]:
        """
        Pending tasks ordered by due date, undated tasks last.

        sorted() is stable, so tasks sharing a due date (or having none)
        keep their insertion order.
        """
        with self._lock:
            pending = [t for t in self._tasks.values() if not t.completed]
        return sorted(pending, key=lambda t: (t.due_date is None, t.due_date or date.min))

    def search_by_title(self, query: str) -> list[Task]:
        """Case-insensitive substring match on title. An empty query matches every task."""
        needle = query.lower()
        with self._lock:
            return [t for t in self._tasks.values() if needle in t.title.lower()]

    def find_by_id(self, task_id: int) -> Task | None:
        with self._lock:
            return self._tasks.get(task_id)

    def mark_completed(self, task_id: int) -> bool:
        """
        Mark a task completed.

        Returns True if the task exists (re-marking a completed task is a no-op),
        False if there is no task with this id.
        """
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return False
            task.completed = True
        logger.debug("Task completed id=%s", task_id)
        return True

    def delete(self, task_id: int) -> bool:
        with self._lock:
            removed = self._tasks.pop(task_id, None)
        if removed is None:
            return False
        logger.debug("Task deleted id=%s", task_id)
        return True

    def list_all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())
