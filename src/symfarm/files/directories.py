"""Directory creation and cleanup."""

import errno
import os
import stat
from pathlib import Path

from symfarm.exceptions import DirectoryConflictError
from symfarm.exceptions import DirectoryCreateError
from symfarm.exceptions import DirectoryRemoveError

DIRECTORY_MODE = 0o755


def ensure_directory(path: Path) -> bool:
    """Make sure path is a real directory with mode 0755.

    An existing directory is reused only when it is not a symlink and its
    permissions are exactly 0755.

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        DirectoryConflictError: If path exists but is unsafe to reuse
        DirectoryCreateError: If the directory cannot be created
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        raise DirectoryConflictError(path, e.strerror or str(e)) from e
    else:
        if not stat.S_ISDIR(st.st_mode):
            raise DirectoryConflictError(path, "not a directory")
        mode = stat.S_IMODE(st.st_mode)
        if mode != DIRECTORY_MODE:
            raise DirectoryConflictError(path, f"mode {mode:04o}, expected 0755")
        return False

    try:
        os.mkdir(path, DIRECTORY_MODE)
        # mkdir applies the umask
        os.chmod(path, DIRECTORY_MODE)
    except OSError as e:
        raise DirectoryCreateError(path, e.strerror or str(e)) from e
    return True


def remove_directory(path: Path) -> bool:
    """Remove path if it is an empty directory.

    Returns:
        True if removed, False if it was already gone or still has contents

    Raises:
        DirectoryRemoveError: For any other failure
    """
    try:
        os.rmdir(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
            return False
        raise DirectoryRemoveError(path, e.strerror or str(e)) from e
    return True
