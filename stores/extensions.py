"""Allow-list of file extensions the keeper knows how to store."""

import os
from enum import Enum
from pathlib import PurePath
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class KnownExtension(str, Enum):
    """Extensions that we know how to deal with."""

    PNG = "png"

    def as_str(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, text: str) -> Optional["KnownExtension"]:
        """
        Match extension text against the allow-list, ignoring case.

        Args:
            text: Extension without the leading dot (e.g. "PNG")

        Returns:
            The matching KnownExtension, or None if the text is not allow-listed
        """
        lowered = text.lower()
        for extension in cls:
            if extension.value == lowered:
                return extension
        return None

    @classmethod
    def from_path(cls, path: PathLike) -> Optional["KnownExtension"]:
        """
        Classify the extension of a filesystem path.

        The extension is the text after the final dot of the last path
        component. A dot that starts the name (".png") does not begin an
        extension. Never raises for odd strings; anything that is not a
        known extension yields None.

        Args:
            path: Path to classify

        Returns:
            The matching KnownExtension, or None
        """
        try:
            suffix = PurePath(path).suffix
        except (TypeError, ValueError):
            return None

        if not suffix.startswith("."):
            return None
        return cls.from_str(suffix[1:])
