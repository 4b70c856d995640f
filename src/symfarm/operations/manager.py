"""Install and uninstall over one or more packages."""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from symfarm.exceptions import PackageFailuresError
from symfarm.exceptions import SymfarmError
from symfarm.files import walk
from symfarm.models import DEFAULT_FILES_DIRNAME
from symfarm.models import DEFAULT_INFO_FILENAME
from symfarm.models import Package
from symfarm.models import PackageFailure
from symfarm.models import PackageReport
from symfarm.operations.install import LinkInstaller
from symfarm.operations.paths import normalize_package
from symfarm.operations.paths import normalize_target_dir
from symfarm.operations.paths import validate_install_directories
from symfarm.operations.uninstall import DirectoryPruner
from symfarm.operations.uninstall import LinkUninstaller


class PackageManager:
    """Place and remove package link farms under one target root.

    There is no record of what an install created: uninstall walks the
    package tree again and recomputes every expected destination, so the
    package tree must not change between install and uninstall. Nothing
    guards against two runs on the same target root at once.
    """

    def __init__(
        self,
        target_dir: Path,
        files_dirname: str = DEFAULT_FILES_DIRNAME,
        info_filename: str = DEFAULT_INFO_FILENAME,
    ):
        self.target_dir = normalize_target_dir(target_dir)
        self.files_dirname = files_dirname
        self.info_filename = info_filename

    def install_package(self, package_dir: Path) -> PackageReport:
        """Install one package, stopping at the first error.

        Raises:
            SymfarmError: On any package validation or entry failure
            OSError: On unexpected filesystem errors
        """
        return self._install(self._load_package(package_dir, installing=True))

    def uninstall_package(self, package_dir: Path) -> PackageReport:
        """Uninstall one package: matching links first, then empty directories.

        Raises:
            SymfarmError: On any package validation or entry failure
            OSError: On unexpected filesystem errors
        """
        return self._uninstall(self._load_package(package_dir))

    def install(self, packages: Iterable[Path]) -> list[PackageReport]:
        """Install each package in order, rolling back any that fail.

        A package that fails partway is uninstalled again before moving on.
        Packages that succeeded stay installed even when others fail.

        Returns:
            Reports for the packages that installed successfully

        Raises:
            PackageFailuresError: If any package failed, after all were tried
        """
        reports: list[PackageReport] = []
        failures: list[PackageFailure] = []

        for package_dir in packages:
            try:
                package = self._load_package(package_dir, installing=True)
            except (SymfarmError, OSError) as e:
                logger.error(f"Install of {package_dir} failed: {e}")
                failures.append(PackageFailure(package=Path(package_dir), error=e))
                continue

            try:
                reports.append(self._install(package))
            except (SymfarmError, OSError) as e:
                logger.error(f"Install of {package.root} failed: {e}")
                failure = PackageFailure(package=Path(package_dir), error=e)
                failure.rollback_error = self._rollback(package)
                failures.append(failure)

        if failures:
            raise PackageFailuresError(failures, reports)
        return reports

    def uninstall(self, packages: Iterable[Path]) -> list[PackageReport]:
        """Uninstall each package in order, continuing past failures.

        Returns:
            Reports for the packages that uninstalled successfully

        Raises:
            PackageFailuresError: If any package failed, after all were tried
        """
        reports: list[PackageReport] = []
        failures: list[PackageFailure] = []

        for package_dir in packages:
            try:
                reports.append(self.uninstall_package(package_dir))
            except (SymfarmError, OSError) as e:
                logger.error(f"Uninstall of {package_dir} failed: {e}")
                failures.append(PackageFailure(package=Path(package_dir), error=e))

        if failures:
            raise PackageFailuresError(failures, reports)
        return reports

    def _load_package(self, package_dir: Path, installing: bool = False) -> Package:
        package = normalize_package(package_dir, self.files_dirname, self.info_filename)
        if installing:
            validate_install_directories(package, self.target_dir)
        return package

    def _install(self, package: Package) -> PackageReport:
        logger.info(f"Installing {package.root} into {self.target_dir}")
        report = PackageReport(package=package.root, target_dir=self.target_dir)
        walk(
            package.files_root,
            LinkInstaller(package.files_root, self.target_dir, report),
        )
        logger.info(f"Installed {package.root}")
        return report

    def _uninstall(self, package: Package) -> PackageReport:
        logger.info(f"Uninstalling {package.root} from {self.target_dir}")
        report = PackageReport(package=package.root, target_dir=self.target_dir)
        walk(
            package.files_root,
            LinkUninstaller(package.files_root, self.target_dir, report),
        )
        pruner = DirectoryPruner(package.files_root, self.target_dir, report)
        walk(package.files_root, pruner)
        pruner.prune()
        logger.info(f"Uninstalled {package.root}")
        return report

    def _rollback(self, package: Package) -> Exception | None:
        """Best-effort uninstall of a package whose install failed."""
        logger.info(f"Rolling back {package.root}")
        try:
            self._uninstall(package)
        except (SymfarmError, OSError) as e:
            logger.error(f"Rollback of {package.root} failed: {e}")
            return e
        return None
