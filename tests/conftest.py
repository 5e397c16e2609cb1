"""Shared pytest fixtures for all tests."""

import pytest

from keeper.catalog import Catalog
from keeper.importer import ImportCoordinator
from samples import make_png
from stores.asset_store import AssetStore
from stores.file_store import FileStore


@pytest.fixture
def files_dir(tmp_path):
    """
    Create an existing managed files directory.

    Returns:
        Path to the files directory
    """
    path = tmp_path / "asset_keeper" / "files"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def source_dir(tmp_path):
    """Directory holding files to import."""
    path = tmp_path / "source"
    path.mkdir()
    return path


@pytest.fixture
def sample_png(source_dir):
    """
    Create an opaque PNG to import.

    Returns:
        Path to source.png
    """
    path = source_dir / "source.png"
    path.write_bytes(make_png("RGB"))
    return path


@pytest.fixture
def transparent_png(source_dir):
    """
    Create a PNG with an alpha channel.

    Returns:
        Path to transparent.png
    """
    path = source_dir / "transparent.png"
    path.write_bytes(make_png("RGBA"))
    return path


@pytest.fixture
def sample_pdf(source_dir):
    """Create a file with an extension the keeper doesn't support."""
    path = source_dir / "document.pdf"
    path.write_bytes(b"%PDF-1.4\n")
    return path


@pytest.fixture
def file_store():
    return FileStore()


@pytest.fixture
def asset_store():
    return AssetStore()


@pytest.fixture
def coordinator(file_store, asset_store, files_dir):
    """ImportCoordinator copying into the temporary files directory."""
    return ImportCoordinator(file_store, asset_store, files_dir)


@pytest.fixture
def catalog(tmp_path):
    """
    Create a Catalog in directories that don't exist yet.

    Returns:
        Catalog instance
    """
    save_dir = tmp_path / "catalog"
    return Catalog(save_dir, save_dir / "files")
