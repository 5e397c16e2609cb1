"""Interactive keeper session on top of prompt_toolkit."""

import os
import sys
from typing import Callable, Dict, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from cli.commands import get_catalog, handle_add, handle_files, handle_list
from cli.completer import KeeperCompleter
from cli.constants import (
    HELP_TEXT,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
    WELCOME_TITLE,
)
from cli.models import AddCommand, CommandRequest, FilesCommand, ListCommand
from cli.parser import ParseError, parse_command
from keeper.catalog import Catalog

HANDLERS: Dict[type, Callable[..., str]] = {
    AddCommand: handle_add,
    ListCommand: handle_list,
    FilesCommand: handle_files,
}


def clear_screen() -> None:
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def welcome_text(catalog: Catalog) -> str:
    return f"{WELCOME_TITLE}\nStoring files in {catalog.files_dir}\n{WELCOME_HELP}"


def dispatch_command(cmd_obj: CommandRequest, catalog: Optional[Catalog] = None) -> str:
    """Route a parsed command to its handler."""
    handler = HANDLERS.get(type(cmd_obj))
    if handler is None:
        return f"Unknown command type: {type(cmd_obj)}"
    return handler(cmd_obj, catalog=catalog)


def run_line(line: str, catalog: Optional[Catalog] = None) -> Optional[str]:
    """
    Run one line typed at the prompt.

    Handles 'help' and the catalog commands. Terminal actions ('clear',
    'exit') are left to the loop.

    Returns:
        Text to print, or None for a blank line
    """
    stripped = line.strip()
    if not stripped:
        return None
    if stripped == "help":
        return HELP_TEXT

    try:
        cmd_obj = parse_command(line)
    except ParseError as e:
        return f"Error: {e}"
    return dispatch_command(cmd_obj, catalog)


def repl_loop(catalog: Optional[Catalog] = None) -> None:
    """Prompt for commands until 'exit' or end of input."""
    catalog = catalog or get_catalog()
    session: PromptSession = PromptSession(
        completer=KeeperCompleter(), history=InMemoryHistory(), style=STYLE
    )

    print(welcome_text(catalog))

    while True:
        try:
            line = session.prompt([("class:prompt", PROMPT_TEXT)])
        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nGoodbye!")
            break

        command = line.strip()
        if command == "exit":
            print("Goodbye!")
            break
        if command == "clear":
            clear_screen()
            print(welcome_text(catalog))
            continue

        output = run_line(line, catalog)
        if output is not None:
            print(output)
