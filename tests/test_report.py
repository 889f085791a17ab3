"""Tests for report data model."""

import pytest

from report.model import DependencyReport


class TestDependencyReport:
    """Tests for DependencyReport class."""

    def test_empty_report(self):
        """Test empty report initialization."""
        report = DependencyReport()
        assert len(report) == 0
        assert report.depfiles == set()
        assert report.dependencies == set()

    def test_add_depfile(self):
        """Test recording a .d file without dependencies."""
        report = DependencyReport()

        report.add_depfile("build/main.d")

        assert report.depfiles == {"build/main.d"}
        assert len(report) == 0

    def test_add_dependency(self):
        """Test recording a dependency."""
        report = DependencyReport()

        report.add_dependency("build/main.d", "src/main.c")

        assert "build/main.d" in report.depfiles
        assert "src/main.c" in report.dependencies
        assert report.get_dependencies("build/main.d") == {"src/main.c"}

    def test_union_is_deduplicated(self):
        """Test that shared dependencies are counted once."""
        report = DependencyReport()
        report.add_dependency("a.d", "common.h")
        report.add_dependency("b.d", "common.h")
        report.add_dependency("b.d", "b.c")

        assert report.dependencies == {"common.h", "b.c"}
        assert len(report) == 2

    def test_get_depfiles(self):
        """Test getting the .d files that list a dependency."""
        report = DependencyReport()
        report.add_dependency("a.d", "common.h")
        report.add_dependency("b.d", "common.h")
        report.add_dependency("b.d", "b.c")

        assert report.get_depfiles("common.h") == {"a.d", "b.d"}
        assert report.get_depfiles("b.c") == {"b.d"}
        assert report.get_depfiles("unknown.h") == set()

    def test_returned_sets_are_copies(self):
        """Test that callers cannot mutate the report through accessors."""
        report = DependencyReport()
        report.add_dependency("a.d", "a.c")

        report.get_dependencies("a.d").add("sneaky.c")
        report.depfiles.add("sneaky.d")

        assert report.get_dependencies("a.d") == {"a.c"}
        assert report.depfiles == {"a.d"}

    def test_iter_pairs(self):
        """Test iterating over (depfile, dependency) pairs in order."""
        report = DependencyReport()
        report.add_dependency("b.d", "z.c")
        report.add_dependency("a.d", "y.c")
        report.add_dependency("a.d", "x.c")

        assert list(report.iter_pairs()) == [
            ("a.d", "x.c"),
            ("a.d", "y.c"),
            ("b.d", "z.c"),
        ]

    def test_repr(self):
        """Test string representation."""
        report = DependencyReport()
        report.add_dependency("a.d", "a.c")
        report.add_depfile("b.d")

        assert repr(report) == "DependencyReport(depfiles=2, dependencies=1)"
