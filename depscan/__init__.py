"""Scanner module for .d file discovery, parsing and symlink resolution."""

from .discovery import find_files
from .resolver import resolve_symlinks
from .parser import parse_depfile, extract_dependency_paths
from .builder import collect_dependencies, build_report
from .errors import (
    ConfigError,
    DependencyListerError,
    DirectoryReadError,
    FileReadError,
    LinkCycleError,
    LinkReadError,
    PathQueryError,
    UnsupportedPathEncoding,
)

__all__ = [
    "find_files",
    "resolve_symlinks",
    "parse_depfile",
    "extract_dependency_paths",
    "collect_dependencies",
    "build_report",
    "ConfigError",
    "DependencyListerError",
    "DirectoryReadError",
    "FileReadError",
    "LinkCycleError",
    "LinkReadError",
    "PathQueryError",
    "UnsupportedPathEncoding",
]
