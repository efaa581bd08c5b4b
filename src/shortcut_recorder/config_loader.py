"""Configuration loader for shortcut-recorder.

This module handles loading and validating TOML configuration files.
"""

import tomllib
from pathlib import Path
from typing import Any
from typing import ClassVar

from .models import LabelStyle
from .models import RecorderConfig


class ConfigLoader:
    """Load and validate TOML configuration files."""

    DEFAULT_PATHS: ClassVar[list[Path]] = [
        Path.home() / '.config/shortcut-recorder/config.toml',
        Path('/etc/shortcut-recorder/config.toml'),
    ]

    @staticmethod
    def load(config_path: Path | None = None) -> tuple[RecorderConfig, Path | None]:
        """Load configuration from TOML file.

        Args:
            config_path: Path to config file. If None, tries default paths and
                falls back to built-in defaults when none exists.

        Returns:
            tuple[RecorderConfig, Path | None]: Parsed configuration and path to
                the loaded file (None when defaults are used)

        Raises:
            FileNotFoundError: If an explicit config file is not found
            ValueError: If configuration is invalid
            tomllib.TOMLDecodeError: If TOML syntax is invalid
        """
        if config_path:
            if not config_path.exists():
                raise FileNotFoundError(f'Config file not found: {config_path}')  # noqa: TRY003
            config = ConfigLoader._load_from_path(config_path)
            return (config, config_path.resolve())

        for path in ConfigLoader.DEFAULT_PATHS:
            if path.exists():
                config = ConfigLoader._load_from_path(path)
                return (config, path.resolve())

        return (RecorderConfig(), None)

    @staticmethod
    def _load_from_path(path: Path) -> RecorderConfig:
        """Load and parse TOML from specific path.

        Raises:
            ValueError: If configuration is invalid
            tomllib.TOMLDecodeError: If TOML syntax is invalid
        """
        try:
            with path.open('rb') as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise tomllib.TOMLDecodeError(  # noqa: TRY003
                f'Invalid TOML syntax in {path}: {e}'
            ) from e

        return ConfigLoader.parse_config(data)

    @staticmethod
    def parse_config(data: dict[str, Any]) -> RecorderConfig:
        """Parse TOML data into RecorderConfig.

        Args:
            data: Parsed TOML data

        Returns:
            RecorderConfig: Validated configuration object

        Raises:
            ValueError: If configuration is invalid
            TypeError: If a value has the wrong type
        """
        app_data = ConfigLoader._section(data, 'app')
        recorder_data = ConfigLoader._section(data, 'recorder')
        labels_data = ConfigLoader._section(data, 'labels')

        log_level = app_data.get('log_level', 'INFO')
        if not isinstance(log_level, str):
            raise TypeError("'log_level' must be a string")  # noqa: TRY003

        log_file = None
        log_file_str = app_data.get('log_file')
        if log_file_str:
            log_file = Path(log_file_str).expanduser()

        verbose_logging = app_data.get('verbose_logging', False)
        if not isinstance(verbose_logging, bool):
            raise TypeError("'verbose_logging' must be a boolean")  # noqa: TRY003

        unknown = set(labels_data) - {'separator', 'double_press_prefix', 'long_press_suffix', 'short_press_suffix'}
        if unknown:
            raise ValueError(f"Unknown [labels] option(s): {', '.join(sorted(unknown))}")  # noqa: TRY003

        try:
            return RecorderConfig(
                long_press_threshold_ms=recorder_data.get('long_press_threshold_ms', 500),
                double_press_threshold_ms=recorder_data.get('double_press_threshold_ms', 500),
                labels=LabelStyle(**labels_data),
                log_level=log_level.upper(),
                log_file=log_file,
                verbose_logging=verbose_logging,
            )
        except ValueError as e:
            raise ValueError(f'Invalid configuration: {e}') from e  # noqa: TRY003

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise TypeError(f'[{name}] must be a table')  # noqa: TRY003
        return section
