"""Custom exception classes for the asset keeper."""

from pathlib import Path


class AssetKeeperError(Exception):
    """
    Base exception class for all asset keeper errors.
    """
    pass


class UnsupportedExtensionError(AssetKeeperError):
    """
    Raised when a source file's extension is missing or not allow-listed.

    Raised before anything is stored, so the caller can retry with another file.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Extension of \"{path}\" is not known.")


class CopyFailedError(AssetKeeperError):
    """
    Raised when copying a file into the managed files directory fails.

    The provisional file record has already been removed when this is raised.
    The underlying error (normally an OSError) is kept on `cause`.
    """

    def __init__(self, source: Path, destination: Path, cause: Exception):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(
            f"Could not copy asset \"{source}\" to the file storage at \"{destination}\": {cause}"
        )


class StorageInitError(AssetKeeperError):
    """
    Raised when the save or files directory cannot be created.
    """

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not create directory at \"{path}\": {cause}")
