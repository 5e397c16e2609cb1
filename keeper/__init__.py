"""Import coordination and catalog for managed asset files."""

from keeper.catalog import Catalog
from keeper.exceptions import (
    AssetKeeperError,
    CopyFailedError,
    StorageInitError,
    UnsupportedExtensionError,
)
from keeper.importer import ImportCoordinator

__all__ = [
    "AssetKeeperError",
    "Catalog",
    "CopyFailedError",
    "ImportCoordinator",
    "StorageInitError",
    "UnsupportedExtensionError",
]
