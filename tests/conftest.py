"""Shared pytest fixtures for symfarm tests."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def target_dir(tmp_path):
    """Empty, canonical directory to install into."""
    target = tmp_path.resolve() / "target"
    target.mkdir()
    return target


@pytest.fixture
def make_package(tmp_path):
    """Factory building a package directory with a pkginfo and pkgfiles tree.

    files maps paths relative to pkgfiles to file contents; links maps paths
    relative to pkgfiles to raw symlink targets.
    """

    def _make(
        name: str = "pkg",
        files: dict[str, str] | None = None,
        links: dict[str, str] | None = None,
        dirs: tuple[str, ...] = (),
    ) -> Path:
        root = tmp_path.resolve() / name
        files_root = root / "pkgfiles"
        files_root.mkdir(parents=True)
        (root / "pkginfo").write_text(f"name = {name}\n")
        for rel in dirs:
            (files_root / rel).mkdir(parents=True, exist_ok=True)
        for rel, content in (files or {}).items():
            path = files_root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        for rel, link_target in (links or {}).items():
            path = files_root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.symlink_to(link_target)
        return root

    return _make


@pytest.fixture
def snapshot():
    """Function describing every entry under a root as (path, kind, link target)."""

    def _snapshot(root: Path) -> list[tuple[str, str, str | None]]:
        entries = []
        for dirpath, dirnames, filenames in os.walk(root):
            for name in dirnames + filenames:
                path = Path(dirpath) / name
                rel = str(path.relative_to(root))
                if path.is_symlink():
                    entries.append((rel, "link", os.readlink(path)))
                elif path.is_dir():
                    entries.append((rel, "dir", None))
                else:
                    entries.append((rel, "file", None))
        return sorted(entries)

    return _snapshot
