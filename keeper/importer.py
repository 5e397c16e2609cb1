"""Imports files from arbitrary disk paths into managed storage."""

from pathlib import Path

from common.logging_config import get_logger
from keeper.exceptions import CopyFailedError, UnsupportedExtensionError
from keeper.file_storage import copy_into_storage, get_stored_path
from keeper.tag_inspector import inspect_tags
from stores.asset_store import AssetId, AssetStore
from stores.extensions import KnownExtension, PathLike
from stores.file_store import FileId, FileStore

logger = get_logger(__name__)


class ImportCoordinator:
    """
    Copies files into the managed files directory and records them.

    Every import goes through the same three steps: allocate a file record,
    attempt the copy, then either commit (tag the file, create the asset) or
    roll back by removing the record again. After a failed import the file
    store holds exactly the records it held before; only the allocated id is
    skipped.
    """

    def __init__(self, files: FileStore, assets: AssetStore, files_dir: Path):
        """
        Args:
            files: Store receiving the file records
            assets: Store receiving the asset records
            files_dir: Existing managed files directory
        """
        self.files = files
        self.assets = assets
        self.files_dir = Path(files_dir)

    def import_file(self, title: str, source_path: PathLike) -> FileId:
        """
        Copy a file into storage and record it, without creating an asset.

        Args:
            title: Title for the file record
            source_path: File to copy

        Returns:
            Id of the new file record

        Raises:
            UnsupportedExtensionError: If the extension is not known; nothing is changed
            CopyFailedError: If the copy failed; the file record has been removed again
        """
        source = Path(source_path)
        extension = KnownExtension.from_path(source)
        if extension is None:
            logger.warning(f"Rejected {source}: unsupported extension")
            raise UnsupportedExtensionError(source)

        file_id, relative_dest = self.files.new_file(title, extension)
        destination = get_stored_path(self.files_dir, relative_dest)

        outcome = copy_into_storage(source, destination)
        if not outcome.succeeded:
            # The file is not actually in storage, don't leave an orphaned record.
            self.files.remove(file_id)
            logger.warning(
                f"Copy of {source} to {destination} failed, rolled back file {file_id}: {outcome.error}"
            )
            raise CopyFailedError(source, destination, outcome.error) from outcome.error

        stored = self.files.get(file_id)
        stored.tags.update(inspect_tags(extension, destination))

        logger.info(f"Stored {source} as {relative_dest} (file {file_id})")
        return file_id

    def add_from_disk(self, title: str, source_path: PathLike) -> AssetId:
        """
        Import a file and create an asset referring to it.

        Args:
            title: Title for both the asset and its file record
            source_path: File to copy

        Returns:
            Id of the new asset

        Raises:
            UnsupportedExtensionError: If the extension is not known; nothing is changed
            CopyFailedError: If the copy failed; no file record or asset remains
        """
        file_id = self.import_file(title, source_path)
        asset_id = self.assets.new_asset(title, file_id)

        logger.info(f"Added asset {asset_id} \"{title}\" for file {file_id}")
        return asset_id
