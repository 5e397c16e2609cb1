"""Identifier-keyed stores for managed files and assets."""

from stores.asset_store import Asset, AssetId, AssetStore
from stores.base import IndexedStore, StoreId
from stores.extensions import KnownExtension
from stores.file_store import File, FileId, FileStore, FileTag

__all__ = [
    "Asset",
    "AssetId",
    "AssetStore",
    "File",
    "FileId",
    "FileStore",
    "FileTag",
    "IndexedStore",
    "KnownExtension",
    "StoreId",
]
