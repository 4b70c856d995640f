"""High-level operations for symfarm."""

from symfarm.operations.install import LinkInstaller
from symfarm.operations.manager import PackageManager
from symfarm.operations.paths import normalize_package
from symfarm.operations.paths import normalize_target_dir
from symfarm.operations.paths import validate_install_directories
from symfarm.operations.uninstall import DirectoryPruner
from symfarm.operations.uninstall import LinkUninstaller

__all__ = [
    "DirectoryPruner",
    "LinkInstaller",
    "LinkUninstaller",
    "PackageManager",
    "normalize_package",
    "normalize_target_dir",
    "validate_install_directories",
]
