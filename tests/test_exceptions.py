"""Tests for symfarm exceptions."""

from pathlib import Path

from symfarm.exceptions import DirectoryConflictError
from symfarm.exceptions import PackageFailuresError
from symfarm.exceptions import PathTooLongError
from symfarm.exceptions import SymfarmError
from symfarm.models import PackageFailure


class TestPathErrors:
    """Tests for path-bearing errors."""

    def test_message_names_offending_path(self):
        error = DirectoryConflictError("/target/etc", "mode 0700, expected 0755")

        assert error.path == Path("/target/etc")
        assert "/target/etc" in str(error)
        assert "mode 0700" in str(error)

    def test_path_too_long_keeps_limit(self):
        error = PathTooLongError("/very/long", 4096)

        assert error.limit == 4096
        assert isinstance(error, SymfarmError)


class TestPackageFailuresError:
    """Tests for PackageFailuresError."""

    def test_formats_message_with_few_failures(self):
        failures = [
            PackageFailure(package=Path("/pkgs/vim"), error=SymfarmError("boom")),
            PackageFailure(package=Path("/pkgs/zsh"), error=SymfarmError("boom")),
        ]

        error = PackageFailuresError(failures)

        assert "vim" in str(error)
        assert "zsh" in str(error)
        assert "..." not in str(error)
        assert error.reports == ()

    def test_formats_message_with_many_failures(self):
        """Test that error message truncates and shows count when > 3 failures."""
        failures = [
            PackageFailure(package=Path(f"/pkgs/p{i}"), error=SymfarmError("boom"))
            for i in range(5)
        ]

        error = PackageFailuresError(failures)

        assert "..." in str(error)
        assert "(5 total)" in str(error)
        assert "p3" not in str(error)
