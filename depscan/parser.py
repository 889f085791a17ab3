"""Parser for compiler-generated .d dependency files."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Set

from .discovery import PathLike
from .errors import FileReadError, UnsupportedPathEncoding
from .resolver import resolve_symlinks


logger = logging.getLogger(__name__)

# Shorter lines cannot hold a path once the indentation byte is stripped
MIN_LINE_LENGTH = 4

CONTINUATION = b"\\"


def parse_depfile(path: PathLike, into: Optional[Set[str]] = None) -> Set[str]:
    """
    Read a .d file and add every dependency it lists to a set.

    The first line holds the build target and is skipped. Every following
    line names one dependency, indented by one byte and optionally ended by
    a `` \\`` continuation marker. Each dependency is resolved through its
    symbolic links before being added.

    Args:
        path: The .d file to read.
        into: Accumulator to add dependencies to. A new set is created if None.

    Returns:
        The accumulator set.

    Raises:
        FileReadError: If the file cannot be read.
        UnsupportedPathEncoding: If a dependency is not valid UTF-8.
        Any error raised by ``resolve_symlinks``.
    """
    deps: Set[str] = set() if into is None else into
    file_path = os.fspath(path)

    try:
        content = Path(file_path).read_bytes()
    except OSError as exc:
        raise FileReadError(file_path) from exc

    logger.debug("Parsing dependency file %s", file_path)

    for candidate in extract_dependency_paths(content):
        deps.add(resolve_symlinks(candidate))

    return deps


def extract_dependency_paths(content: bytes) -> List[str]:
    """
    Extract the raw dependency paths from the contents of a .d file.

    Args:
        content: Full file contents.

    Returns:
        Dependency paths in file order, not yet resolved.

    Raises:
        UnsupportedPathEncoding: If a dependency is not valid UTF-8.
    """
    paths: List[str] = []

    for line in content.split(b"\n")[1:]:
        fragment = _strip_line(line)
        if fragment is None:
            continue
        try:
            paths.append(fragment.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise UnsupportedPathEncoding(fragment) from exc

    return paths


def _strip_line(line: bytes) -> Optional[bytes]:
    """
    Remove the indentation byte and the continuation marker from a line.

    Returns None for lines too short to name a dependency.
    """
    if len(line) < MIN_LINE_LENGTH:
        return None
    if line.endswith(CONTINUATION):
        # The marker is always preceded by a separating space
        return line[1:-2]
    return line[1:]
