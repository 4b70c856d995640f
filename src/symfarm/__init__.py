"""symfarm - install packages as a farm of relative symlinks."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version

try:
    __version__ = version("symfarm")
except PackageNotFoundError:
    __version__ = "unknown"
