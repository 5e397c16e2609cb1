"""Command handler functions for CLI operations."""

from typing import Optional

from common.logging_config import get_logger
from cli.models import AddCommand, FilesCommand, ListCommand
from keeper.catalog import Catalog
from keeper.exceptions import AssetKeeperError

logger = get_logger(__name__)


_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """
    Get or create the catalog for this CLI session.

    Returns:
        Catalog instance built from configuration
    """
    global _catalog
    if _catalog is None:
        logger.debug("Creating new Catalog instance")
        _catalog = Catalog.from_config()
    return _catalog


def _format_tags(tags) -> str:
    if not tags:
        return "-"
    return ", ".join(sorted(tag.value for tag in tags))


def handle_add(cmd: AddCommand, catalog: Optional[Catalog] = None) -> str:
    """
    Handle 'add' command.

    Args:
        cmd: AddCommand with title and path
        catalog: Optional Catalog for dependency injection (testing)

    Returns:
        Success or error message
    """
    logger.info(f"Executing add command: title={cmd.title!r} path={cmd.path}")
    if catalog is None:
        catalog = get_catalog()

    try:
        asset_id = catalog.add_asset_from_disk(cmd.title, cmd.path)
    except AssetKeeperError as e:
        return f"Error: {e}"

    file = catalog.file_of(asset_id)
    return f"Added: {cmd.title} (stored as {file.filename}, Tags: {_format_tags(file.tags)})"


def handle_list(cmd: ListCommand, catalog: Optional[Catalog] = None) -> str:
    """
    Handle 'list' command.

    Args:
        cmd: ListCommand
        catalog: Optional Catalog for dependency injection (testing)

    Returns:
        Formatted list of assets
    """
    if catalog is None:
        catalog = get_catalog()

    entries = sorted(catalog.assets_iter())
    if not entries:
        return "No assets"

    lines = [f"Found {len(entries)} asset(s):"]
    for asset_id, asset in entries:
        file = catalog.get_file(asset.file)
        filename = file.filename if file is not None else "(missing file)"
        tags = _format_tags(file.tags) if file is not None else "-"
        lines.append(f"  {asset.title}  [{filename}]  Tags: {tags}")
    return "\n".join(lines)


def handle_files(cmd: FilesCommand, catalog: Optional[Catalog] = None) -> str:
    """
    Handle 'files' command.

    Args:
        cmd: FilesCommand
        catalog: Optional Catalog for dependency injection (testing)

    Returns:
        Formatted list of managed files
    """
    if catalog is None:
        catalog = get_catalog()

    entries = sorted(catalog.files_iter())
    if not entries:
        return "No files"

    lines = [f"Found {len(entries)} file(s) in {catalog.files_dir}:"]
    for file_id, file in entries:
        lines.append(f"  {file.filename}  {file.title}  Tags: {_format_tags(file.tags)}")
    return "\n".join(lines)
