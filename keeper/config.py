"""Configuration settings for the asset keeper."""

import os
from pathlib import Path

from common.constants import DEFAULT_SAVE_DIR, FILES_DIR_NAME


SAVE_DIR = Path(os.environ.get("ASSET_KEEPER_SAVE_DIR", str(DEFAULT_SAVE_DIR))).expanduser()

FILES_DIR = Path(os.environ.get("ASSET_KEEPER_FILES_DIR", str(SAVE_DIR / FILES_DIR_NAME))).expanduser()
