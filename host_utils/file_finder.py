# host_utils/file_finder.py
"""
Depth-first search of a directory tree for an entry with a given name.

Children are visited in the order os.scandir reports them; no sorting is
applied, so when several entries share the name the one returned depends on
the filesystem.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from .debug_utils import get_logger
from .errors import InvalidArgumentError

log = get_logger("FileFinder")

PathLike = Union[str, "os.PathLike[str]"]


def find(
    root: Optional[PathLike],
    name: Optional[str],
    match_directories: bool = False,
    *,
    follow_symlinks: bool = False,
) -> Optional[Path]:
    """
    Return the first file under `root` called `name`, or None.

    With match_directories=True a directory called `name` also matches; it is
    returned as-is and its contents are not searched. Directory symlinks are
    only descended into when follow_symlinks=True.

    Raises:
        InvalidArgumentError: if root or name is None, or root is not a directory.
    """
    if root is None:
        raise InvalidArgumentError("Search root must not be None")
    if name is None:
        raise InvalidArgumentError("File name must not be None")

    root_path = Path(root)
    if not root_path.is_dir():
        raise InvalidArgumentError(f"Not a directory: {root_path.absolute()}")

    return _search(root_path, name, match_directories, follow_symlinks)


def find_file(root: Optional[PathLike], name: Optional[str]) -> Optional[Path]:
    """find() that only ever matches regular files."""
    return find(root, name, False)


def _search(directory: Path, name: str, match_directories: bool, follow_symlinks: bool) -> Optional[Path]:
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        log.debug(f"Skipping unreadable directory {directory}: {e}")
        return None

    for entry in entries:
        if entry.is_dir(follow_symlinks=follow_symlinks):
            if match_directories and entry.name == name:
                return Path(entry.path)
            # match_directories is passed down so nested directories can match too,
            # not only the direct children of the search root.
            match = _search(Path(entry.path), name, match_directories, follow_symlinks)
            if match is not None:
                return match
        elif entry.name == name and entry.is_file():
            return Path(entry.path)

    return None
