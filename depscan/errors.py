"""Exceptions raised while collecting dependencies from .d files."""

from typing import List, Optional


class DependencyListerError(Exception):
    """Base class for every failure of the dependency scan."""


class DirectoryReadError(DependencyListerError):
    """A directory could not be opened or listed."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to read directory: {path}")


class PathQueryError(DependencyListerError):
    """Metadata for a path could not be obtained (broken link, permissions)."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to query path: {path}")


class LinkReadError(DependencyListerError):
    """The target of a symbolic link could not be read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to read link target: {path}")


class FileReadError(DependencyListerError):
    """A dependency file could not be read in full."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to read dependency file: {path}")


class UnsupportedPathEncoding(DependencyListerError):
    """A path or a .d line fragment is not valid UTF-8 text."""

    def __init__(self, raw: bytes):
        self.raw = raw
        super().__init__(f"Unsupported path encoding: {raw!r}")


class LinkCycleError(DependencyListerError):
    """A chain of symbolic links loops back on itself."""

    def __init__(self, path: str, chain: Optional[List[str]] = None):
        self.path = path
        self.chain = list(chain or [])
        steps = " -> ".join(self.chain + [path])
        super().__init__(f"Symbolic link cycle detected: {steps}")


class ConfigError(DependencyListerError):
    """A configuration file is unreadable or holds invalid settings."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")
