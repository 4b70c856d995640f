"""Tests for configuration loading."""

from pathlib import Path

import pytest

from symfarm.config import Config
from symfarm.exceptions import ConfigValidationError


class TestConfig:
    """Tests for Config.load()."""

    def test_defaults_when_file_missing(self, tmp_path):
        config = Config.load(tmp_path / "config.toml")

        assert config.target_dir == Path("/")
        assert config.files_dirname == "pkgfiles"
        assert config.info_filename == "pkginfo"
        assert config.log_level == "WARNING"

    def test_reads_values(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            'target_dir = "/srv/root"\n'
            'files_dirname = "files"\n'
            'log_level = "debug"\n'
        )

        config = Config.load(path)

        assert config.target_dir == Path("/srv/root")
        assert config.files_dirname == "files"
        assert config.info_filename == "pkginfo"
        assert config.log_level == "DEBUG"

    def test_default_path_uses_config_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert Config.default_path() == tmp_path / "symfarm" / "config.toml"

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("target_dir = \n")

        with pytest.raises(ConfigValidationError, match="Invalid TOML"):
            Config.load(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('colour = "red"\n')

        with pytest.raises(ConfigValidationError, match="colour"):
            Config.load(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("target_dir = 3\n")

        with pytest.raises(ConfigValidationError, match="must be a string"):
            Config.load(path)

    def test_files_dirname_must_be_one_segment(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('files_dirname = "a/b"\n')

        with pytest.raises(ConfigValidationError):
            Config.load(path)

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('log_level = "loud"\n')

        with pytest.raises(ConfigValidationError, match="LOUD"):
            Config.load(path)
