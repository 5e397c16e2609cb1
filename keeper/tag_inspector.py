"""Derives system tags for stored files from their contents."""

from pathlib import Path
from typing import Callable, Dict, FrozenSet

from PIL import Image, UnidentifiedImageError

from common.logging_config import get_logger
from stores.extensions import KnownExtension
from stores.file_store import FileTag

logger = get_logger(__name__)

# Pillow modes with an alpha channel. PNG colour types 4 and 6 open as LA and RGBA.
ALPHA_MODES = ("RGBA", "LA", "PA", "RGBa", "La")


def png_tags(image: Image.Image) -> FrozenSet[FileTag]:
    """
    Inspect an opened PNG for transparency.

    A PNG is transparent when it has an alpha channel, or when it carries a
    tRNS chunk (exposed by Pillow as the "transparency" info key).

    Args:
        image: Image opened with Pillow

    Returns:
        Set of tags for the file
    """
    if image.mode in ALPHA_MODES or "transparency" in image.info:
        return frozenset({FileTag.HAS_TRANSPARENCY})
    return frozenset()


TAG_RULES: Dict[KnownExtension, Callable[[Image.Image], FrozenSet[FileTag]]] = {
    KnownExtension.PNG: png_tags,
}


def inspect_tags(extension: KnownExtension, path: Path) -> FrozenSet[FileTag]:
    """
    Compute the system tags of a stored file.

    A file that cannot be read or is not a valid image is logged and gets
    no tags.

    Args:
        extension: Extension the file was stored with
        path: Location of the stored file

    Returns:
        Set of tags for the file
    """
    rule = TAG_RULES.get(extension)
    if rule is None:
        return frozenset()

    try:
        with Image.open(path) as image:
            return rule(image)
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not inspect {path} for tags: {e}")
        return frozenset()
