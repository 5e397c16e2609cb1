"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["add", "list", "files", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2E9E6B bold",
        "command": "#0088ff bold",
    }
)

WELCOME_TITLE = "Asset Keeper - local asset catalog"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "keeper> "

HELP_TEXT = """Available commands:
  add <title> <path>      Copy a file into the catalog as a new asset
  list                    List assets with their stored file and tags
  files                   List stored files
  clear                   Clear screen and redisplay welcome message
  help                    Show this help
  exit                    Exit REPL

Only .png files can be added. The catalog lives for this session only.
Examples:
  add "Tall sword" swords/tall.png
  list"""
