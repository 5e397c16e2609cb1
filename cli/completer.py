"""Custom completer for the Asset Keeper CLI with file autocompletion."""

from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS
from stores.extensions import KnownExtension


class KeeperCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - File path completion for the path argument of 'add'
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        if tokens[0].lower() != "add":
            return

        # 'add <title> <path>': only the third token is a path.
        position = len(tokens) if is_typing_new_token else len(tokens) - 1
        if position != 2:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_paths(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_paths(self, partial: str) -> Iterable[Completion]:
        """
        Complete directories and importable files below the partial path.

        Paths are relative to the current working directory.
        """
        typed_dir, _, name_prefix = partial.rpartition("/")
        search_dir = Path.cwd() / typed_dir if typed_dir else Path.cwd()

        if not search_dir.is_dir():
            return

        candidates = []
        for item in search_dir.iterdir():
            if not item.name.lower().startswith(name_prefix.lower()):
                continue
            if item.is_dir():
                candidates.append(f"{item.name}/")
            elif item.is_file() and KnownExtension.from_path(item) is not None:
                candidates.append(item.name)

        prefix = f"{typed_dir}/" if typed_dir else ""
        for name in sorted(candidates):
            yield Completion(f"{prefix}{name}", start_position=-len(partial))
