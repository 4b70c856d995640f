"""Uninstall visitors.

Uninstall walks the package files tree twice. The first pass removes links
that still point exactly where installation pointed them. The second pass
collects destination directories and removes whichever ended up empty,
deepest first.
"""

from pathlib import Path

from loguru import logger

from symfarm.files import check_link
from symfarm.files import expected_link
from symfarm.files import rebase
from symfarm.files import remove_directory
from symfarm.files import remove_symlink
from symfarm.models import EntryKind
from symfarm.models import FileEntry
from symfarm.models import LinkState
from symfarm.models import PackageReport
from symfarm.models import Skip
from symfarm.models import SkipReason


class LinkUninstaller:
    """Remove destination links whose target still matches the package."""

    def __init__(self, files_root: Path, target_root: Path, report: PackageReport):
        self.files_root = files_root
        self.target_root = target_root
        self.report = report

    def __call__(self, entry: FileEntry) -> None:
        if entry.kind not in (EntryKind.REGULAR_FILE, EntryKind.SYMLINK):
            return

        link = expected_link(entry, self.files_root, self.target_root)
        match check_link(link):
            case LinkState.MISSING:
                self.report.links_missing.append(link.destination)
            case LinkState.CORRECT:
                remove_symlink(link)
                logger.debug(f"rm {link.destination}")
                self.report.links_removed.append(link.destination)
            case LinkState.DIFFERENT:
                logger.warning(
                    f"Link target changed since install, skipping: {link.destination}"
                )
                self.report.skipped.append(
                    Skip(link.destination, SkipReason.LINK_MISMATCH, link.target)
                )
            case LinkState.NOT_A_SYMLINK:
                logger.warning(f"Not a symlink anymore, skipping: {link.destination}")
                self.report.skipped.append(
                    Skip(link.destination, SkipReason.NOT_A_SYMLINK)
                )


class DirectoryPruner:
    """Remove destination directories left empty by LinkUninstaller.

    Directories are recorded during the pre-order walk and removed by
    prune() in reverse, so each one is tried only after its descendants.
    """

    def __init__(self, files_root: Path, target_root: Path, report: PackageReport):
        self.files_root = files_root
        self.target_root = target_root
        self.report = report
        self.directories: list[Path] = []

    def __call__(self, entry: FileEntry) -> None:
        if entry.kind is EntryKind.DIRECTORY:
            self.directories.append(
                rebase(entry.path, self.files_root, self.target_root)
            )

    def prune(self) -> None:
        for directory in reversed(self.directories):
            if remove_directory(directory):
                logger.debug(f"rmdir {directory}")
                self.report.directories_removed.append(directory)
            elif directory.exists():
                self.report.directories_kept.append(directory)
        self.directories.clear()
