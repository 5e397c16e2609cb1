"""Catalog of assets backed by a managed files directory."""

from pathlib import Path
from typing import Iterator, Optional, Tuple

from common.logging_config import get_logger
from keeper import config
from keeper.exceptions import StorageInitError
from keeper.file_storage import get_stored_path
from keeper.importer import ImportCoordinator
from stores.asset_store import Asset, AssetId, AssetStore
from stores.extensions import PathLike
from stores.file_store import File, FileId, FileStore

logger = get_logger(__name__)


def ensure_directory(path: Path) -> None:
    """
    Ensure a directory exists, creating parents as needed.

    Raises:
        StorageInitError: If the directory cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageInitError(path, e) from e


class Catalog:
    """
    Owns the file and asset stores and the directories they live in.

    Usage:
        catalog = Catalog(save_dir, save_dir / "files")
        asset_id = catalog.add_asset_from_disk("Sword", "swords/tall.png")
        catalog.get_asset(asset_id).title

    The stores only live in memory; nothing is read from or written to the
    save directory besides creating it.
    """

    def __init__(self, save_dir: Path, files_dir: Path):
        """
        Initialize the catalog, creating both directories when they don't exist.

        Args:
            save_dir: Directory for catalog data
            files_dir: Directory where the actual files are stored

        Raises:
            StorageInitError: If either directory cannot be created
        """
        self.save_dir = Path(save_dir)
        self.files_dir = Path(files_dir)

        ensure_directory(self.save_dir)
        ensure_directory(self.files_dir)

        self.files = FileStore()
        self.assets = AssetStore()
        self.importer = ImportCoordinator(self.files, self.assets, self.files_dir)

        logger.info(f"Catalog ready (save dir: {self.save_dir}, files dir: {self.files_dir})")

    @classmethod
    def from_config(cls) -> "Catalog":
        """Create a catalog in the configured save and files directories."""
        return cls(config.SAVE_DIR, config.FILES_DIR)

    def add_asset_from_disk(self, title: str, source_path: PathLike) -> AssetId:
        """
        Add a new asset from disk, copying the file over to the files directory.

        Raises:
            UnsupportedExtensionError: If the file extension is not one we can deal with
            CopyFailedError: If something goes wrong during the copy
        """
        return self.importer.add_from_disk(title, source_path)

    def asset_count(self) -> int:
        return self.assets.count()

    def assets_iter(self) -> Iterator[Tuple[AssetId, Asset]]:
        return self.assets.items()

    def get_asset(self, asset_id: AssetId) -> Optional[Asset]:
        return self.assets.get(asset_id)

    def file_count(self) -> int:
        return self.files.count()

    def files_iter(self) -> Iterator[Tuple[FileId, File]]:
        return self.files.items()

    def get_file(self, file_id: FileId) -> Optional[File]:
        return self.files.get(file_id)

    def file_of(self, asset_id: AssetId) -> Optional[File]:
        """
        Resolve the file record an asset refers to.

        Returns:
            The file record, or None if the asset or its file doesn't exist
        """
        asset = self.assets.get(asset_id)
        if asset is None:
            return None
        return self.files.get(asset.file)

    def stored_path(self, file_id: FileId) -> Optional[Path]:
        """
        Get the location of a file record's bytes in the files directory.

        Returns:
            Path of the stored file inside files_dir, or None if the record doesn't exist
        """
        file = self.files.get(file_id)
        if file is None:
            return None
        return get_stored_path(self.files_dir, Path(file.filename))
