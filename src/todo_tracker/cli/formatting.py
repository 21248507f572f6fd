# src/todo_tracker/cli/formatting.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task, TaskStatus

NO_DESCRIPTION = "(no description)"
NO_DUE_DATE = "—"

_STATUS_LABELS = {
    TaskStatus.PENDING: "pending",
    TaskStatus.COMPLETED: "done",
}


def format_task(task: Task) -> str:
    description = task.description if task.has_description else NO_DESCRIPTION
    due = task.due_date.isoformat() if task.due_date is not None else NO_DUE_DATE
    return f"#{task.id} | {task.title} | {description} | due: {due} | {_STATUS_LABELS[task.status]}"


def format_task_list(tasks: Iterable[Task], empty_message: str) -> str:
    lines = [format_task(t) for t in tasks]
    if not lines:
        return empty_message
    return "\n".join(lines)
