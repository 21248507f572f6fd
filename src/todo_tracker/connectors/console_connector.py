# src/todo_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import EXIT_KEY
from ..cli.commands import registry as menu_registry
from ..cli.inputs import InvalidInputError
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_WORDS = (EXIT_KEY, "exit", "quit")


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Menu REPL: show the menu, read a choice, run it, repeat.

    Only the exit choice, EOF or Ctrl+C end the session; every error raised
    while handling a choice is reported and the loop goes on.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())

    while True:
        write("")
        write(menu_registry.build_menu())
        choice = ""
        try:
            choice = read_line("Choose: ").strip()
            if choice.lower() in EXIT_WORDS:
                logger.info("Console exit command received.")
                break
            reply = menu_registry.handle(state, choice, read_line)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break
        except InvalidInputError as e:
            write(str(e))
            continue
        except Exception as e:
            logger.exception("Menu handler crashed (choice=%r).", choice)
            write(f"Error: {e}")
            continue

        write(reply)

    write("See you!")
    logger.info("Console connector finished.")
