"""Custom exceptions for symfarm."""

from collections.abc import Sequence
from pathlib import Path

from symfarm.models import PackageFailure
from symfarm.models import PackageReport


class SymfarmError(Exception):
    """Base exception for symfarm."""


class PathError(SymfarmError):
    """An error about one specific filesystem path."""

    def __init__(self, path: Path | str, message: str):
        self.path = Path(path)
        super().__init__(f"{message}: {path}")


class PathTooLongError(PathError):
    """Joined path would exceed the platform's maximum path length."""

    def __init__(self, path: Path | str, limit: int):
        self.limit = limit
        super().__init__(path, f"Path exceeds {limit} bytes")


class NotAPrefixError(SymfarmError):
    """Path does not descend from the root it was expected under."""

    def __init__(self, prefix: Path | str, path: Path | str):
        self.prefix = Path(prefix)
        self.path = Path(path)
        super().__init__(f"{path} is not inside {prefix}")


class PathNotFoundError(PathError):
    """Source or destination path does not exist."""

    def __init__(self, path: Path | str):
        super().__init__(path, "No such file or directory")


class PathNotDirectoryError(PathError):
    """Path exists but is not a directory."""

    def __init__(self, path: Path | str):
        super().__init__(path, "Not a directory")


class DirectoryReadError(PathError):
    """Directory could not be opened or enumerated."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(path, f"Failed to read directory ({reason})")


class DirectoryConflictError(PathError):
    """Destination is occupied by something unsafe to reuse as a directory."""

    def __init__(self, path: Path | str, reason: str):
        self.reason = reason
        super().__init__(path, f"Cannot use as directory ({reason})")


class DirectoryCreateError(PathError):
    """Destination directory could not be created."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(path, f"Failed to create directory ({reason})")


class DirectoryRemoveError(PathError):
    """Destination directory could not be removed."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(path, f"Failed to remove directory ({reason})")


class LinkCreateError(PathError):
    """Symlink could not be created at the destination."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(path, f"Failed to create symlink ({reason})")


class LinkRemoveError(PathError):
    """Matching symlink could not be removed."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(path, f"Failed to remove symlink ({reason})")


class InvalidPackageError(SymfarmError):
    """Package directory is invalid (missing files root, contains target, etc.)."""


class ConfigValidationError(SymfarmError):
    """Configuration file is invalid or malformed."""


class PackageFailuresError(SymfarmError):
    """One or more packages failed during a multi-package run."""

    def __init__(
        self,
        failures: Sequence[PackageFailure],
        reports: Sequence[PackageReport] = (),
    ):
        self.failures = failures
        self.reports = reports
        failed = ", ".join(str(f.package) for f in failures[:3])
        if len(failures) > 3:
            failed += f", ... ({len(failures)} total)"
        super().__init__(f"Packages failed: {failed}")
