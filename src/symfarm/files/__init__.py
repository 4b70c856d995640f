"""Filesystem operations for symfarm."""

from symfarm.files.directories import ensure_directory
from symfarm.files.directories import remove_directory
from symfarm.files.paths import canonicalize
from symfarm.files.paths import combine
from symfarm.files.paths import common_prefix_length
from symfarm.files.paths import rebase
from symfarm.files.paths import relative_path
from symfarm.files.paths import remainder_after_prefix
from symfarm.files.symlinks import check_link
from symfarm.files.symlinks import create_symlink
from symfarm.files.symlinks import expected_link
from symfarm.files.symlinks import remove_symlink
from symfarm.files.walk import walk

__all__ = [
    "canonicalize",
    "check_link",
    "combine",
    "common_prefix_length",
    "create_symlink",
    "ensure_directory",
    "expected_link",
    "rebase",
    "relative_path",
    "remainder_after_prefix",
    "remove_directory",
    "remove_symlink",
    "walk",
]
