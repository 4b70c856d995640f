"""Data models for symfarm."""

import stat
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from enum import auto
from pathlib import Path
from typing import Self

DEFAULT_FILES_DIRNAME = "pkgfiles"
DEFAULT_INFO_FILENAME = "pkginfo"


class EntryKind(Enum):
    """Kind of filesystem entry found while walking a package tree."""

    DIRECTORY = "directory"
    REGULAR_FILE = "regular file"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block device"
    CHAR_DEVICE = "character device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> Self:
        """Classify an lstat() st_mode value."""
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR_FILE
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat.S_ISCHR(mode):
            return cls.CHAR_DEVICE
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN

    @property
    def is_other(self) -> bool:
        """True for kinds that are never installed."""
        return self not in (
            EntryKind.DIRECTORY,
            EntryKind.REGULAR_FILE,
            EntryKind.SYMLINK,
        )


@dataclass(frozen=True)
class FileEntry:
    """One node encountered during a walk."""

    path: Path  # Absolute source path
    kind: EntryKind


@dataclass(frozen=True)
class Package:
    """A package directory holding a files tree and a metadata file."""

    root: Path
    files_dirname: str = DEFAULT_FILES_DIRNAME
    info_filename: str = DEFAULT_INFO_FILENAME

    @property
    def files_root(self) -> Path:
        """Directory whose tree is replicated under the target root."""
        return self.root / self.files_dirname

    @property
    def info_path(self) -> Path:
        """Metadata file; acknowledged but never parsed."""
        return self.root / self.info_filename


@dataclass(frozen=True)
class InstalledLink:
    """A symlink installation creates, re-derived from the package tree."""

    source: Path  # Entry inside the package files root (absolute)
    destination: Path  # Where the link lives under the target root (absolute)
    target: str  # Exact string the link should contain


class LinkState(Enum):
    """What currently sits where an InstalledLink should be."""

    MISSING = auto()
    CORRECT = auto()
    DIFFERENT = auto()  # A symlink with some other target
    NOT_A_SYMLINK = auto()


class SkipReason(Enum):
    """Why an entry was deliberately left alone."""

    LINK_MISMATCH = "link target changed since install"
    NOT_A_SYMLINK = "destination is no longer a symlink"
    UNSUPPORTED_ENTRY_KIND = "unsupported entry kind"


@dataclass
class Skip:
    """An entry skipped with a warning rather than treated as a failure."""

    path: Path
    reason: SkipReason
    detail: str = ""


@dataclass
class PackageReport:
    """What one install or uninstall did to the target tree."""

    package: Path
    target_dir: Path
    links_created: list[Path] = field(default_factory=list)
    links_present: list[Path] = field(default_factory=list)
    directories_created: list[Path] = field(default_factory=list)
    directories_present: list[Path] = field(default_factory=list)
    links_removed: list[Path] = field(default_factory=list)
    links_missing: list[Path] = field(default_factory=list)
    directories_removed: list[Path] = field(default_factory=list)
    directories_kept: list[Path] = field(default_factory=list)
    skipped: list[Skip] = field(default_factory=list)


@dataclass
class PackageFailure:
    """A package whose install or uninstall failed."""

    package: Path
    error: Exception
    rollback_error: Exception | None = None
