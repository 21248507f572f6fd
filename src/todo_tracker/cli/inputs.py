# src/todo_tracker/cli/inputs.py

"""
Parsing of raw console input.

All validation lives here, before anything reaches the task store.
Each parser either returns a clean value or raises InvalidInputError
with a message that can be shown to the user as-is.
"""

from __future__ import annotations

from datetime import date, datetime

DATE_FORMAT = "%d/%m/%Y"


class InvalidInputError(ValueError):
    """Recoverable user input error; the session continues."""


def parse_title(raw: str) -> str:
    title = raw.strip()
    if not title:
        raise InvalidInputError("Title cannot be empty.")
    return title


def parse_due_date(raw: str) -> date | None:
    """Parse a dd/mm/yyyy date (e.g. 25/12/2024). Blank input means no due date."""
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise InvalidInputError("Invalid date.") from None


def parse_task_id(raw: str) -> int:
    text = raw.strip()
    if not text.isdecimal():
        raise InvalidInputError("Invalid task id.")
    return int(text)
