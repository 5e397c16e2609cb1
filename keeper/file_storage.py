"""Manages physical files in the managed files directory: copy in and locate."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CopyOutcome:
    """
    Result of copying a file into managed storage.

    Exactly one of a successful copy or an `error` is reported; the copy
    never raises.
    """
    source: Path
    destination: Path
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def get_stored_path(files_dir: Path, relative_path: Path) -> Path:
    """
    Get the full location of a stored file.

    Args:
        files_dir: Managed files directory
        relative_path: Storage path handed out by the file store

    Returns:
        Path object for the stored file
    """
    return files_dir / relative_path


def discard_partial_copy(destination: Path) -> None:
    """
    Remove whatever a failed copy left at its destination.

    Errors are logged and not raised, so they never hide the copy error.
    """
    try:
        destination.unlink(missing_ok=True)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not remove partial copy at {destination}: {e}")


def copy_into_storage(source: Path, destination: Path) -> CopyOutcome:
    """
    Copy a file's bytes to its managed location.

    Does not create directories: the destination's parent must already
    exist. An existing file at the destination is overwritten. When the
    copy fails, nothing is left at the destination.

    Args:
        source: Arbitrary path to copy from
        destination: Full path inside the managed files directory

    Returns:
        CopyOutcome describing success or the error that stopped the copy
    """
    try:
        shutil.copyfile(source, destination)
    except shutil.SameFileError as e:
        # The destination is the caller's own source file; leave it alone.
        return CopyOutcome(source=source, destination=destination, error=e)
    except (OSError, ValueError) as e:
        # ValueError: paths with embedded null characters.
        discard_partial_copy(destination)
        return CopyOutcome(source=source, destination=destination, error=e)
    return CopyOutcome(source=source, destination=destination)
