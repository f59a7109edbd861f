"""Image utilities - directory listing and header probing."""

from __future__ import annotations
import os
from pathlib import Path
from typing import AbstractSet, List, Optional, Union

from PIL import Image, UnidentifiedImageError

from .errors import StartupError
from .types import Entry, ImageInfo


def list_entries(dirpath: Union[str, Path],
                 extensions: Optional[AbstractSet[str]] = None) -> List[Entry]:
    """List the regular files of a directory as entries, sorted by name.

    Args:
        dirpath: Directory path to scan.
        extensions: Lower-case suffixes to keep (e.g. ".png"); None keeps
            every regular file and leaves the decision to the renderer.

    Returns:
        Entries in name order.

    Raises:
        StartupError: the directory is missing, unreadable or yields nothing.
    """
    directory = Path(dirpath)
    try:
        names = sorted(os.listdir(directory))
    except OSError as e:
        raise StartupError(f"cannot read directory {directory}: {e.strerror or e}") from e

    result = []
    for name in names:
        path = directory / name
        if not path.is_file():
            continue
        if extensions is not None and path.suffix.lower() not in extensions:
            continue
        result.append(Entry(path))

    if not result:
        raise StartupError(f"no files found in image directory {directory}")
    return result


def read_image_info(filepath: Union[str, Path]) -> Optional[ImageInfo]:
    """Read format and dimensions from the file header without decoding pixels.

    Returns None when the file is not a recognisable image.
    """
    try:
        with Image.open(filepath) as img:
            return ImageInfo(format=img.format, size=(int(img.width), int(img.height)))
    except (OSError, UnidentifiedImageError, ValueError):
        return None
