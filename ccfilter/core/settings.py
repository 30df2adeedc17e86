"""
Pydantic Settings for ccfilter.

Provides settings loading from the filter TOML file, environment variables,
and defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigValidationError
from .models.config import LoggingConfig

CONFIG_FILE_NAME = ".ccfilter.toml"
CONFIG_ENV_VAR = "CCFILTER_CONFIG"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .ccfilter.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.ccfilter] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.is_file():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.is_file():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError):
                continue
            tool = data.get("tool")
            if isinstance(tool, dict) and isinstance(tool.get("ccfilter"), dict):
                return pyproject

    return None


def resolve_config_path(config_path: Path | str | None = None, start_dir: str | None = None) -> Path | None:
    """Pick the filter document: explicit path, then $CCFILTER_CONFIG, then discovery."""
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return find_config_file(start_dir)


def extract_document(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Return the ccfilter part of a parsed TOML file.

    Raises:
        ConfigValidationError: If [tool] or [tool.ccfilter] is not a table
    """
    if path.name != "pyproject.toml":
        return data

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigValidationError(
            f"'tool' shall be a table in file {path}", key="tool", file_path=str(path)
        )
    document = tool.get("ccfilter", {})
    if not isinstance(document, dict):
        raise ConfigValidationError(
            f"'tool.ccfilter' shall be a table in file {path}",
            key="tool.ccfilter",
            file_path=str(path),
        )
    return document


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from the filter TOML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = resolve_config_path(self._config_path, self._start_dir)
        if path is None:
            return self._data

        from ..config import load_config_document

        # Read errors are fatal here too; the rule group is compiled separately
        document, _ = load_config_document(path)
        if isinstance(document.get("logging"), dict):
            self._data["logging"] = document["logging"]
        self._data["_config_file"] = str(path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return TOML data usable for settings initialization."""
        return {k: v for k, v in self._load_toml().items() if not k.startswith("_")}


class CcFilterSettings(BaseSettings):
    """ccfilter settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (CCFILTER_CONFIG, CCFILTER_LOGGING__<field>)
    3. [logging] table of the filter TOML file
    4. Model defaults
    """

    model_config = {
        "env_prefix": "CCFILTER_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    config: Path | None = None
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The config path cannot be passed through here, so it travels in
        module-level variables set by load_settings().
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> Path | None:
        """The filter document these settings were loaded alongside."""
        if self.config is not None:
            return self.config
        return Path(self._config_file) if self._config_file else None


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> CcFilterSettings:
    """Load ccfilter settings from config file and environment.

    Args:
        config_path: Explicit path to the filter TOML file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        CcFilterSettings instance with all sources merged
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = CcFilterSettings(config=config_path) if config_path else CcFilterSettings()

        toml_data = TomlConfigSource(CcFilterSettings, config_path, start_dir)._load_toml()
        if "_config_file" in toml_data:
            settings._config_file = toml_data["_config_file"]

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
