"""In-memory index of managed files: file_id -> title, extension, system tags."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Set, Tuple

from common.logging_config import get_logger
from stores.base import IndexedStore, StoreId
from stores.extensions import KnownExtension

logger = get_logger(__name__)


@dataclass(frozen=True, order=True)
class FileId(StoreId):
    """Handed out by a `FileStore` when a new file is added."""


class FileTag(str, Enum):
    """System-assigned metadata flags on a stored file."""

    HAS_TRANSPARENCY = "has_transparency"


@dataclass
class File:
    """
    A file that lives in the managed files directory.

    The on-disk name depends only on the id and the extension, so the title
    can be any text at all.
    """
    id: FileId
    title: str
    extension: KnownExtension
    tags: Set[FileTag] = field(default_factory=set)

    @property
    def filename(self) -> str:
        return FileStore.storage_name(self.id, self.extension)


class FileStore(IndexedStore[FileId, File]):
    """Index of managed file records."""

    id_type = FileId

    @staticmethod
    def storage_name(file_id: FileId, extension: KnownExtension) -> str:
        """
        Name a file is stored under, relative to the managed files directory.

        Args:
            file_id: Id of the file record
            extension: Extension of the file

        Returns:
            "<id>.<extension>", e.g. "0.png"
        """
        return f"{file_id.value}.{extension.as_str()}"

    def new_file(self, title: str, extension: KnownExtension) -> Tuple[FileId, Path]:
        """
        Create a new file record.

        Only the record is created; copying the bytes to the returned
        location is up to the caller.

        Args:
            title: Human-facing title, never used on disk
            extension: Extension of the file

        Returns:
            Tuple of (new file id, storage path relative to the files directory)
        """
        file_id = self._allocate_id()
        new_file = File(id=file_id, title=title, extension=extension)
        self._insert(file_id, new_file)

        logger.debug(f"Allocated file record {file_id} as {new_file.filename}")
        return file_id, Path(new_file.filename)

    def remove(self, file_id: FileId) -> Optional[File]:
        """
        Remove a file record.

        The id is not handed out again.

        Args:
            file_id: Id of the file record

        Returns:
            The removed record, or None if there was nothing to remove
        """
        removed = self._items.pop(file_id, None)
        if removed is not None:
            logger.debug(f"Removed file record {file_id}")
        return removed
