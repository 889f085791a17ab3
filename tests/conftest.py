"""Shared fixtures building small build trees on disk."""

import os

import pytest


DEPFILE_CONTENT = (
    "test/src/main.o: \\\n"
    " test/src/main.rs \\\n"
    " test/link2\n"
)


@pytest.fixture
def build_tree(tmp_path, monkeypatch):
    """
    Create a ``test/`` tree in a temporary working directory.

    Layout::

        test/source          regular file
        test/link1 -> source
        test/link2 -> link1
        test/readme.md
        test/test.rs
        test/test.d          lists src/main.rs and link2
        test/src/main.rs
        test/src/lib.rs
    """
    monkeypatch.chdir(tmp_path)

    root = tmp_path / "test"
    (root / "src").mkdir(parents=True)
    (root / "source").write_text("source", encoding="utf-8")
    (root / "readme.md").write_text("# readme", encoding="utf-8")
    (root / "test.rs").touch()
    (root / "src" / "main.rs").touch()
    (root / "src" / "lib.rs").touch()
    os.symlink("source", root / "link1")
    os.symlink("link1", root / "link2")
    (root / "test.d").write_text(DEPFILE_CONTENT, encoding="utf-8")

    return root
