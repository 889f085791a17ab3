"""Symbolic link resolution for dependency paths."""

import logging
import os
import stat
from typing import List, Set, Tuple

from .discovery import PathLike, ensure_text
from .errors import LinkCycleError, LinkReadError, PathQueryError


logger = logging.getLogger(__name__)


def resolve_symlinks(path: PathLike) -> str:
    """
    Follow a chain of symbolic links until a non-link entry is reached.

    Absolute link targets replace the current path verbatim. Relative targets
    are joined onto the directory of the link that holds them, without any
    ``.``/``..`` normalization.

    Args:
        path: Path to resolve. Returned unchanged if it is not a link.

    Returns:
        The last path of the chain, which is not a symbolic link.

    Raises:
        PathQueryError: If an entry of the chain cannot be inspected.
        LinkReadError: If a link target cannot be read.
        UnsupportedPathEncoding: If a link target is not valid text.
        LinkCycleError: If the chain visits the same link twice.
    """
    current = os.fspath(path)
    chain: List[str] = []
    visited: Set[Tuple[int, int]] = set()

    info = _lstat(current)
    while stat.S_ISLNK(info.st_mode):
        identity = (info.st_dev, info.st_ino)
        if identity in visited:
            raise LinkCycleError(current, chain)
        visited.add(identity)
        chain.append(current)

        target = ensure_text(_read_link(current))
        if os.path.isabs(target):
            current = target
        else:
            # A bare link name has no directory; the target stays relative, no leading "/"
            current = os.path.join(os.path.dirname(current), target)
        logger.debug("Followed link %s -> %s", chain[-1], current)

        info = _lstat(current)

    return current


def _lstat(path: str) -> os.stat_result:
    try:
        return os.lstat(path)
    except OSError as exc:
        raise PathQueryError(path) from exc


def _read_link(path: str) -> str:
    try:
        return os.readlink(path)
    except OSError as exc:
        raise LinkReadError(path) from exc
