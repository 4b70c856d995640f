"""Path arithmetic for laying out links under a target root.

All functions here work on the textual form of absolute paths. None of them
touch the filesystem except `canonicalize`, so callers must canonicalize
their inputs first when the result has to be a valid symlink target.
"""

import os
from pathlib import Path

from symfarm.exceptions import NotAPrefixError
from symfarm.exceptions import PathNotFoundError
from symfarm.exceptions import PathTooLongError

SEP = "/"
PARENT = ".."
# Linux PATH_MAX, which counts the terminating NUL
PATH_MAX = 4096


def check_length(path: Path | str) -> Path:
    """Return path as a Path, or raise PathTooLongError if it cannot fit PATH_MAX."""
    if len(os.fsencode(path)) >= PATH_MAX:
        raise PathTooLongError(path, PATH_MAX)
    return Path(path)


def combine(directory: Path | str, name: str) -> Path:
    """Join a directory and a single path segment with exactly one separator.

    Args:
        directory: Directory path
        name: One path segment (no separators)

    Returns:
        The joined path

    Raises:
        ValueError: If name is empty or contains a separator
        PathTooLongError: If the result would not fit PATH_MAX
    """
    if not name or SEP in name:
        raise ValueError(f"Expected a single path segment, got {name!r}")
    directory = os.fspath(directory)
    joined = directory + name if directory.endswith(SEP) else directory + SEP + name
    return check_length(joined)


def common_prefix_length(a: Path | str, b: Path | str) -> int:
    """Find the offset of the last separator both paths share.

    The end of each path counts as a separator, so "/a/b" and "/a/b/c"
    share "/a/b" while "/a/b" and "/a/bc" only share "/a". The result always
    lands on a separator boundary and is 0 when the paths diverge at the root.

    Raises:
        ValueError: If either path is not absolute
    """
    a, b = os.fspath(a), os.fspath(b)
    if not a.startswith(SEP) or not b.startswith(SEP):
        raise ValueError(f"Expected absolute paths, got {a!r} and {b!r}")

    offset = 0
    for index, (x, y) in enumerate(zip(_terminated(a), _terminated(b))):
        if x != y:
            break
        if x == SEP:
            offset = index
    return offset


def relative_path(from_dir: Path | str, to_file: Path | str) -> Path:
    """Compute the path that reaches to_file when resolved relative to from_dir.

    Both paths must already be canonical and absolute; nothing is resolved
    here.

    Examples:
        relative_path("/opt/pkg/pkgfiles/bin", "/opt/pkg/pkgfiles/etc/conf")
            -> "../etc/conf"
        relative_path("/a/b", "/a/b/c") -> "c"
        relative_path("/a/x", "/b/y") -> "../../b/y"
    """
    from_dir, to_file = os.fspath(from_dir), os.fspath(to_file)
    offset = common_prefix_length(from_dir, to_file)

    ups = _terminated(from_dir)[offset + 1 :].count(SEP)
    suffix = to_file[offset + 1 :].strip(SEP)

    parts = [PARENT] * ups
    if suffix:
        parts.append(suffix)
    return Path(SEP.join(parts)) if parts else Path(".")


def remainder_after_prefix(prefix: Path | str, full: Path | str) -> Path:
    """Strip a segment-aligned prefix from full.

    Raises:
        NotAPrefixError: If full does not start with prefix at a segment boundary
    """
    prefix_text, full_text = os.fspath(prefix), os.fspath(full)
    trimmed = prefix_text.rstrip(SEP)
    if full_text != trimmed and not full_text.startswith(trimmed + SEP):
        raise NotAPrefixError(prefix, full)
    return Path(full_text[len(trimmed) :].lstrip(SEP))


def rebase(path: Path | str, old_root: Path | str, new_root: Path | str) -> Path:
    """Move path from under old_root to the same place under new_root.

    Every join is bounds-checked with combine().
    """
    result = check_length(new_root)
    for part in remainder_after_prefix(old_root, path).parts:
        result = combine(result, part)
    return result


def canonicalize(path: Path | str) -> Path:
    """Make path absolute with symlinks and "."/".." resolved.

    Raises:
        PathNotFoundError: If path does not exist
    """
    try:
        return Path(path).resolve(strict=True)
    except FileNotFoundError as e:
        raise PathNotFoundError(path) from e


def _terminated(path: str) -> str:
    return path if path.endswith(SEP) else path + SEP
