"""Package and target directory normalization and validation."""

from pathlib import Path

from loguru import logger

from symfarm.exceptions import InvalidPackageError
from symfarm.exceptions import PathNotDirectoryError
from symfarm.files import canonicalize
from symfarm.models import DEFAULT_FILES_DIRNAME
from symfarm.models import DEFAULT_INFO_FILENAME
from symfarm.models import Package


def normalize_package(
    package_dir: Path,
    files_dirname: str = DEFAULT_FILES_DIRNAME,
    info_filename: str = DEFAULT_INFO_FILENAME,
) -> Package:
    """Normalize and validate a package directory.

    Args:
        package_dir: Directory containing the files tree and metadata file
        files_dirname: Name of the files tree directory inside package_dir
        info_filename: Name of the metadata file inside package_dir

    Returns:
        Package rooted at the canonical package directory

    Raises:
        PathNotFoundError: If package_dir or its files tree does not exist
        PathNotDirectoryError: If either is not a directory
    """
    package = Package(
        root=canonicalize(package_dir),
        files_dirname=files_dirname,
        info_filename=info_filename,
    )
    if not package.root.is_dir():
        raise PathNotDirectoryError(package.root)

    files_root = canonicalize(package.files_root)
    if not files_root.is_dir():
        raise PathNotDirectoryError(files_root)
    if files_root != package.files_root:
        raise InvalidPackageError(
            f"Package files root must be a real directory, not a link: {package.files_root}"
        )

    if not package.info_path.is_file():
        logger.warning(f"Package has no {info_filename} file: {package.root}")

    return package


def normalize_target_dir(target_dir: Path) -> Path:
    """Normalize target directory path to an existing canonical directory.

    Raises:
        PathNotFoundError: If target_dir does not exist
        PathNotDirectoryError: If target_dir is not a directory
    """
    target_dir = canonicalize(target_dir)
    if not target_dir.is_dir():
        raise PathNotDirectoryError(target_dir)
    return target_dir


def validate_install_directories(package: Package, target_dir: Path) -> None:
    """Reject a target that lives inside the package files tree.

    Raises:
        InvalidPackageError: If target_dir is package.files_root or inside it
    """
    if target_dir == package.files_root or target_dir.is_relative_to(
        package.files_root
    ):
        raise InvalidPackageError(
            f"Target directory {target_dir} is inside package files {package.files_root}"
        )
