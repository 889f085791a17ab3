"""ASCII tree-style exporter for dependency reports."""

from typing import List, Tuple

from report.model import DependencyReport


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "


def to_ascii(
    report: DependencyReport,
    style: str = "tree",
    show_empty: bool = False,
    mark_shared: bool = True,
) -> str:
    """
    Convert a dependency report to an ASCII tree.

    Each scanned .d file is rendered as a root with its resolved
    dependencies below it.

    Args:
        report: The dependency report to export.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).
        show_empty: If True, include .d files that list no dependency.
        mark_shared: If True, suffix dependencies listed by more than one
            .d file with " [shared]".

    Returns:
        ASCII tree string.
    """
    if style == "ascii":
        chars = (ASCII_BRANCH, ASCII_LAST)
    else:
        chars = (UNICODE_BRANCH, UNICODE_LAST)

    depfiles = sorted(report.depfiles)
    if not show_empty:
        depfiles = [d for d in depfiles if report.get_dependencies(d)]

    lines: List[str] = []

    for i, depfile in enumerate(depfiles):
        _render_depfile(report, depfile, chars, mark_shared, lines)

        # Add blank line between root trees (except after last)
        if i < len(depfiles) - 1:
            lines.append("")

    return "\n".join(lines)


def _render_depfile(
    report: DependencyReport,
    depfile: str,
    chars: Tuple[str, str],
    mark_shared: bool,
    lines: List[str],
) -> None:
    """Render one .d file and its dependencies into ``lines``."""
    branch, last = chars

    lines.append(depfile)

    children = sorted(report.get_dependencies(depfile))
    for index, dependency in enumerate(children):
        connector = last if index == len(children) - 1 else branch
        marker = ""
        if mark_shared and len(report.get_depfiles(dependency)) > 1:
            marker = " [shared]"
        lines.append(f"{connector}{dependency}{marker}")
