"""Configuration file handling."""

import tomllib
from dataclasses import dataclass
from dataclasses import fields
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from symfarm.exceptions import ConfigValidationError
from symfarm.models import DEFAULT_FILES_DIRNAME
from symfarm.models import DEFAULT_INFO_FILENAME

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """User settings, all optional."""

    target_dir: Path = Path("/")
    files_dirname: str = DEFAULT_FILES_DIRNAME
    info_filename: str = DEFAULT_INFO_FILENAME
    log_level: str = "WARNING"

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location using platformdirs."""
        return user_config_path("symfarm") / "config.toml"

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from TOML."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown config keys: {', '.join(unknown)}")

        for key, value in data.items():
            if not isinstance(value, str):
                raise ConfigValidationError(
                    f"Config key '{key}' must be a string, got {type(value).__name__}"
                )

        config = cls(
            target_dir=Path(data.get("target_dir", cls.target_dir)),
            files_dirname=data.get("files_dirname", cls.files_dirname),
            info_filename=data.get("info_filename", cls.info_filename),
            log_level=data.get("log_level", cls.log_level).upper(),
        )
        for name in (config.files_dirname, config.info_filename):
            if not name or "/" in name:
                raise ConfigValidationError(
                    f"Package entry names must be a single path segment: {name!r}"
                )
        if config.log_level not in LOG_LEVELS:
            raise ConfigValidationError(f"Unknown log level: {config.log_level}")
        return config

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load config from a TOML file. Uses defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            data = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e
        return cls.from_dict(data)
