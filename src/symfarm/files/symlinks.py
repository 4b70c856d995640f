"""Symlink operations."""

import errno
import os
from pathlib import Path

from symfarm.exceptions import LinkCreateError
from symfarm.exceptions import LinkRemoveError
from symfarm.files.paths import rebase
from symfarm.files.paths import relative_path
from symfarm.models import EntryKind
from symfarm.models import FileEntry
from symfarm.models import InstalledLink
from symfarm.models import LinkState


def expected_link(entry: FileEntry, files_root: Path, target_root: Path) -> InstalledLink:
    """Derive the symlink installation makes for a source entry.

    Regular files get a link relative to the destination's directory;
    symlinks are copied with their target string unchanged.

    Args:
        entry: Regular file or symlink inside files_root
        files_root: Canonical package files root
        target_root: Canonical target root

    Raises:
        ValueError: If entry is neither a regular file nor a symlink
    """
    destination = rebase(entry.path, files_root, target_root)
    if entry.kind is EntryKind.REGULAR_FILE:
        target = os.fspath(relative_path(destination.parent, entry.path))
    elif entry.kind is EntryKind.SYMLINK:
        target = os.readlink(entry.path)
    else:
        raise ValueError(f"No link is installed for a {entry.kind.value}: {entry.path}")
    return InstalledLink(source=entry.path, destination=destination, target=target)


def check_link(link: InstalledLink) -> LinkState:
    """Compare what is at link.destination with the expected link.

    Only the exact target string counts; two different strings that happen
    to resolve to the same file are DIFFERENT.
    """
    try:
        actual = os.readlink(link.destination)
    except (FileNotFoundError, NotADirectoryError):
        return LinkState.MISSING
    except OSError as e:
        if e.errno == errno.EINVAL:
            return LinkState.NOT_A_SYMLINK
        raise

    if actual == link.target:
        return LinkState.CORRECT
    return LinkState.DIFFERENT


def create_symlink(link: InstalledLink) -> bool:
    """Create a symlink, never replacing anything already there.

    Returns:
        True if the link was created, False if an identical link was
        already in place

    Raises:
        LinkCreateError: If something else occupies the destination or the
            link cannot be created
    """
    try:
        os.symlink(link.target, link.destination)
    except FileExistsError as e:
        if check_link(link) is LinkState.CORRECT:
            return False
        raise LinkCreateError(link.destination, "destination already exists") from e
    except OSError as e:
        raise LinkCreateError(link.destination, e.strerror or str(e)) from e
    return True


def remove_symlink(link: InstalledLink) -> None:
    """Remove a symlink whose target has already been checked.

    Raises:
        LinkRemoveError: If unlinking fails
    """
    try:
        os.unlink(link.destination)
    except OSError as e:
        raise LinkRemoveError(link.destination, e.strerror or str(e)) from e
