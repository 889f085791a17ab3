"""Plain exporter: one dependency path per line."""

from typing import Iterable


def to_plain(dependencies: Iterable[str]) -> str:
    """
    Convert a set of dependency paths to newline-separated text.

    Paths are sorted so repeated runs produce identical output.
    """
    return "\n".join(sorted(dependencies))
