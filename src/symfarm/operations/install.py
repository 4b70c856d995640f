"""Install visitor."""

from pathlib import Path

from loguru import logger

from symfarm.files import create_symlink
from symfarm.files import ensure_directory
from symfarm.files import expected_link
from symfarm.files import rebase
from symfarm.models import EntryKind
from symfarm.models import FileEntry
from symfarm.models import PackageReport
from symfarm.models import Skip
from symfarm.models import SkipReason


class LinkInstaller:
    """Create the destination for every entry of a package files tree.

    Directories become real 0755 directories, regular files become links
    relative to their destination directory, and symlinks are copied
    verbatim. Anything else is skipped with a warning.
    """

    def __init__(self, files_root: Path, target_root: Path, report: PackageReport):
        self.files_root = files_root
        self.target_root = target_root
        self.report = report

    def __call__(self, entry: FileEntry) -> None:
        if entry.kind is EntryKind.DIRECTORY:
            destination = rebase(entry.path, self.files_root, self.target_root)
            if ensure_directory(destination):
                logger.debug(f"mkdir {destination}")
                self.report.directories_created.append(destination)
            else:
                self.report.directories_present.append(destination)
        elif entry.kind.is_other:
            logger.warning(f"{entry.kind.value} not supported, skipping: {entry.path}")
            self.report.skipped.append(
                Skip(entry.path, SkipReason.UNSUPPORTED_ENTRY_KIND, entry.kind.value)
            )
        else:
            link = expected_link(entry, self.files_root, self.target_root)
            if create_symlink(link):
                logger.debug(f"ln -s {link.target} {link.destination}")
                self.report.links_created.append(link.destination)
            else:
                self.report.links_present.append(link.destination)
