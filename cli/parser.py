"""Command parser for CLI input."""

import shlex

from cli.models import AddCommand, CommandRequest, FilesCommand, ListCommand


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Add/List/Files)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "add":
        return _parse_add(tokens[1:])
    elif command_name == "list":
        return _parse_no_args(tokens[1:], "list", ListCommand)
    elif command_name == "files":
        return _parse_no_args(tokens[1:], "files", FilesCommand)
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_add(args: list[str]) -> AddCommand:
    """Parse 'add <title> <path>' command."""
    if len(args) != 2:
        raise ParseError("add requires exactly 2 arguments: <title> <path> (quote titles with spaces)")

    title, path = args
    return AddCommand(title=title, path=path)


def _parse_no_args(args: list[str], name: str, command_type):
    if args:
        raise ParseError(f"{name} takes no arguments")
    return command_type()
