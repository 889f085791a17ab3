"""Report model recording which .d file contributed which dependency."""

from typing import Dict, Iterator, Set, Tuple


class DependencyReport:
    """
    Resolved dependencies grouped by the .d file that lists them.

    Depfiles are the scanned dependency files; dependencies are the resolved
    paths they name. The same dependency may be listed by several depfiles
    and is counted once in ``dependencies``.
    """

    def __init__(self):
        self._depfiles: Set[str] = set()
        self._listed: Dict[str, Set[str]] = {}  # depfile -> resolved dependencies

    @property
    def depfiles(self) -> Set[str]:
        """Return every scanned .d file, including those listing nothing."""
        return self._depfiles.copy()

    @property
    def dependencies(self) -> Set[str]:
        """Return the union of all resolved dependencies."""
        union: Set[str] = set()
        for deps in self._listed.values():
            union.update(deps)
        return union

    def add_depfile(self, depfile: str) -> None:
        """Record a scanned .d file."""
        self._depfiles.add(depfile)

    def add_dependency(self, depfile: str, dependency: str) -> None:
        """
        Record that ``depfile`` lists ``dependency``.

        Automatically records the depfile as scanned.
        """
        self._depfiles.add(depfile)
        self._listed.setdefault(depfile, set()).add(dependency)

    def get_dependencies(self, depfile: str) -> Set[str]:
        """Get the dependencies listed by one .d file."""
        return self._listed.get(depfile, set()).copy()

    def get_depfiles(self, dependency: str) -> Set[str]:
        """Get the .d files that list ``dependency``."""
        return {depfile for depfile, deps in self._listed.items() if dependency in deps}

    def iter_pairs(self) -> Iterator[Tuple[str, str]]:
        """Iterate over ``(depfile, dependency)`` pairs in sorted order."""
        for depfile in sorted(self._listed):
            for dependency in sorted(self._listed[depfile]):
                yield depfile, dependency

    def __len__(self) -> int:
        """Return the number of distinct dependencies."""
        return len(self.dependencies)

    def __repr__(self) -> str:
        return f"DependencyReport(depfiles={len(self._depfiles)}, dependencies={len(self)})"
