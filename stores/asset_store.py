"""In-memory index of assets: asset_id -> title and the file it refers to."""

from dataclasses import dataclass

from common.logging_config import get_logger
from stores.base import IndexedStore, StoreId
from stores.file_store import FileId

logger = get_logger(__name__)


@dataclass(frozen=True, order=True)
class AssetId(StoreId):
    """Handed out by an `AssetStore` when a new asset is added."""


@dataclass(frozen=True)
class Asset:
    """
    A titled catalog entry pointing at one stored file.

    The file is referenced by id only. Nothing checks that the file still
    exists after the asset was created.
    """
    title: str
    file: FileId


class AssetStore(IndexedStore[AssetId, Asset]):
    """Index of assets."""

    id_type = AssetId

    def new_asset(self, title: str, file: FileId) -> AssetId:
        """
        Create a new asset and return its id.

        The file id is stored as given; callers are responsible for it
        naming an existing file.
        """
        asset_id = self._allocate_id()
        self._insert(asset_id, Asset(title=title, file=file))

        logger.debug(f"Allocated asset {asset_id} for file {file}")
        return asset_id
