"""File discovery utilities for scanning build directories."""

import logging
import os
from typing import List, Set, Tuple, Union

from .errors import DirectoryReadError, UnsupportedPathEncoding


logger = logging.getLogger(__name__)

DEPFILE_SUFFIX = ".d"

PathLike = Union[str, "os.PathLike[str]"]


def find_files(root: PathLike, suffix: str) -> Set[str]:
    """
    Collect every entry under ``root`` whose path ends with ``suffix``.

    The match is a plain textual comparison on the full path, so directories
    whose name ends with the suffix are collected too. Directories are always
    descended into, whether they match or not.

    Args:
        root: Directory to scan.
        suffix: Trailing text to match, e.g. ``".d"``.

    Returns:
        Set of matching paths, each joined onto ``root`` as given.

    Raises:
        DirectoryReadError: If any directory cannot be listed.
        UnsupportedPathEncoding: If an entry path is not valid text.
    """
    if not suffix:
        raise ValueError("suffix must not be empty")

    found: Set[str] = set()
    stack: List[str] = [os.fspath(root)]

    while stack:
        current = stack.pop()
        logger.debug("Listing directory %s", current)

        for entry_path, is_dir in _list_directory(current):
            path = ensure_text(entry_path)
            if is_dir:
                stack.append(path)
            if path.endswith(suffix):
                found.add(path)

    return found


def ensure_text(path: str) -> str:
    """
    Return ``path`` unchanged if it is representable as UTF-8 text.

    Undecodable file names surface in Python as surrogate-escaped strings;
    those are rejected with the original bytes attached.
    """
    try:
        path.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnsupportedPathEncoding(os.fsencode(path)) from exc
    return path


def _list_directory(directory: str) -> List[Tuple[str, bool]]:
    """List ``(path, is_dir)`` pairs for one directory, closing the handle."""
    try:
        with os.scandir(directory) as entries:
            return [(entry.path, _is_dir(entry)) for entry in entries]
    except OSError as exc:
        raise DirectoryReadError(directory) from exc


def _is_dir(entry: "os.DirEntry[str]") -> bool:
    # Follows symlinks; an entry that cannot be inspected is not a directory.
    try:
        return entry.is_dir()
    except OSError:
        return False
