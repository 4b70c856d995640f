"""Recursive, pre-order directory traversal."""

import os
from collections.abc import Callable
from pathlib import Path

from symfarm.exceptions import DirectoryReadError
from symfarm.exceptions import PathNotDirectoryError
from symfarm.exceptions import PathNotFoundError
from symfarm.files.paths import combine
from symfarm.models import EntryKind
from symfarm.models import FileEntry

Visitor = Callable[[FileEntry], None]


def walk(root: Path, visit: Visitor) -> None:
    """Call visit on every entry below root, parents before their children.

    Entries come in directory-enumeration order. Each directory is visited
    before it is descended into. Any exception raised by visit aborts the
    whole walk and propagates unchanged.

    Args:
        root: Directory to walk (not itself visited)
        visit: Callable receiving a FileEntry for every entry

    Raises:
        PathNotFoundError: If root does not exist
        PathNotDirectoryError: If root is not a directory
        DirectoryReadError: If a directory cannot be opened or enumerated
    """
    try:
        entries = os.scandir(root)
    except FileNotFoundError as e:
        raise PathNotFoundError(root) from e
    except NotADirectoryError as e:
        raise PathNotDirectoryError(root) from e
    except OSError as e:
        raise DirectoryReadError(root, e.strerror or str(e)) from e

    with entries:
        while True:
            try:
                entry = next(entries, None)
                if entry is None:
                    break
                kind = EntryKind.from_mode(entry.stat(follow_symlinks=False).st_mode)
            except OSError as e:
                raise DirectoryReadError(root, e.strerror or str(e)) from e

            path = combine(root, entry.name)
            visit(FileEntry(path=path, kind=kind))
            if kind is EntryKind.DIRECTORY:
                walk(path, visit)
