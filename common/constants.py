"""Project-wide constants (default locations, log format)."""

from pathlib import Path

DEFAULT_SAVE_DIR: Path = Path.home() / ".asset_keeper"
FILES_DIR_NAME: str = "files"

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
