"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class AddCommand:
    """Import a file from disk as a new asset."""

    title: str
    path: str
    command: Literal["add"] = "add"


@dataclass(frozen=True)
class ListCommand:
    """List assets in the catalog."""

    command: Literal["list"] = "list"


@dataclass(frozen=True)
class FilesCommand:
    """List managed file records."""

    command: Literal["files"] = "files"


CommandRequest = AddCommand | ListCommand | FilesCommand
