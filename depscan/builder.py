"""Dependency collection that orchestrates discovery and parsing."""

import logging
from typing import Set

from report.model import DependencyReport
from .discovery import DEPFILE_SUFFIX, PathLike, find_files
from .parser import parse_depfile


logger = logging.getLogger(__name__)


def collect_dependencies(root: PathLike, suffix: str = DEPFILE_SUFFIX) -> Set[str]:
    """
    Collect every dependency listed by the .d files under a directory.

    Args:
        root: Directory to scan for .d files.
        suffix: Suffix identifying dependency files (default: ".d").

    Returns:
        Deduplicated set of resolved dependency paths.

    Raises:
        DependencyListerError: On the first failure of discovery or parsing.
            No partial result is returned.
    """
    deps: Set[str] = set()
    for depfile in sorted(find_files(root, suffix)):
        parse_depfile(depfile, deps)

    logger.debug("Collected %d dependencies under %s", len(deps), root)
    return deps


def build_report(root: PathLike, suffix: str = DEPFILE_SUFFIX) -> DependencyReport:
    """
    Scan a directory and record which dependency file lists what.

    Args:
        root: Directory to scan.
        suffix: Suffix identifying dependency files (default: ".d").

    Returns:
        DependencyReport whose ``dependencies`` equal ``collect_dependencies(root)``
        for the default suffix.
    """
    report = DependencyReport()

    for depfile in sorted(find_files(root, suffix)):
        report.add_depfile(depfile)
        for dependency in parse_depfile(depfile):
            report.add_dependency(depfile, dependency)

    logger.debug("Built %r for %s", report, root)
    return report
