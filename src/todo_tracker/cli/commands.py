# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from .formatting import format_task, format_task_list
from .inputs import parse_due_date, parse_task_id, parse_title

Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt], str]

MENU_TITLE = "=== ToDo List ==="
EXIT_KEY = "0"
EXIT_LABEL = "Exit"

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu used by the console connector (1..6, plus 0 to exit)."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, choice: str, prompt: Prompt) -> str:
        """
        Run the handler registered for `choice` ("1", "add", ...).
        Returns the reply to print. Input errors raised by handlers propagate.
        """
        key = choice.strip().lower()
        handler = self._handlers.get(key)
        if handler is None:
            logger.debug("Unknown menu choice %r", key)
            return "Invalid option."
        return handler(state, prompt)

    def build_menu(self) -> str:
        lines = [MENU_TITLE]
        for key, label in self._labels.items():
            lines.append(f"{key}) {label}")
        lines.append(f"{EXIT_KEY}) {EXIT_LABEL}")
        return "\n".join(lines)


registry = MenuRegistry()


def cmd_create(state: AppState, prompt: Prompt) -> str:
    title = parse_title(prompt("Title (required): "))
    description = prompt("Description (optional): ").strip() or None
    due_date = parse_due_date(prompt("Due date (dd/mm/yyyy) or empty: "))

    task = state.task_store.create(title, description, due_date)
    return f"Created: {format_task(task)}"


def cmd_list_pending(state: AppState, prompt: Prompt) -> str:
    return format_task_list(state.task_store.list_pending(), "No pending tasks.")


def cmd_search(state: AppState, prompt: Prompt) -> str:
    query = prompt("Title contains: ").strip()
    return format_task_list(state.task_store.search_by_title(query), "Nothing found.")


def cmd_complete(state: AppState, prompt: Prompt) -> str:
    task_id = parse_task_id(prompt("Task ID: "))
    if not state.task_store.mark_completed(task_id):
        return "Not found."

    task = state.task_store.find_by_id(task_id)
    if task is None:
        # Deleted between the two calls; only possible with concurrent callers.
        return "Not found."
    return f"Completed: {format_task(task)}"


def cmd_delete(state: AppState, prompt: Prompt) -> str:
    task_id = parse_task_id(prompt("Task ID: "))
    return "Deleted." if state.task_store.delete(task_id) else "Not found."


def cmd_list_all(state: AppState, prompt: Prompt) -> str:
    return format_task_list(state.task_store.list_all(), "No tasks.")


registry.register("1", cmd_create, label="Create new task", aliases=["add", "new"])
registry.register("2", cmd_list_pending, label="List pending tasks", aliases=["pending"])
registry.register("3", cmd_search, label="Search tasks by title", aliases=["search"])
registry.register("4", cmd_complete, label="Mark task as completed", aliases=["done"])
registry.register("5", cmd_delete, label="Delete task", aliases=["rm", "delete"])
registry.register("6", cmd_list_all, label="List all tasks", aliases=["all", "list"])
