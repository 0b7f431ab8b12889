"""
Conversion configuration management.

This module merges conversion options from saved user settings, the
``[tool.excel2sql]`` table of pyproject.toml and environment variables, with
explicit overrides (usually CLI options) taking precedence over all of them.
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from excel2sql.dialects import DEFAULT_DIALECT, get_dialect, is_dialect_supported
from excel2sql.exceptions import ConfigurationError
from excel2sql.generator import DEFAULT_BATCH_SIZE
from excel2sql.settings import UserSettings
from excel2sql.typing import OperationMode

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ConversionConfig:
    """Options consumed by one conversion."""

    dialect: str = DEFAULT_DIALECT
    mode: OperationMode = OperationMode.CREATE_AND_INSERT
    batch_size: int = DEFAULT_BATCH_SIZE
    table_name: str | None = None
    quote_identifiers: bool = False
    validate: bool = False


class ConversionConfigManager:
    """Manages conversion configuration from multiple sources."""

    def __init__(
        self, project_root: str | None = None, settings: UserSettings | None = None
    ) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.settings = settings
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self, overrides: dict[str, Any] | None = None) -> ConversionConfig:
        """
        Load conversion configuration.

        Args:
            overrides: Explicit values; None entries are ignored

        Returns:
            ConversionConfig with merged configuration

        Raises:
            ConfigurationError: If a merged value is invalid
        """
        merged: dict[str, Any] = {}
        merged.update(self._load_settings_config())
        merged.update(self._load_toml_config())
        merged.update(self._load_env_config())
        if overrides:
            merged.update({key: value for key, value in overrides.items() if value is not None})

        return self._create_config(merged)

    def _load_settings_config(self) -> dict[str, Any]:
        """Map saved user settings onto configuration keys."""
        if self.settings is None:
            return {}
        return {"dialect": self.settings.target_dialect, "mode": self.settings.operation}

    def _load_toml_config(self) -> dict[str, Any]:
        """Load configuration from [tool.excel2sql] in pyproject.toml."""
        toml_file = self.project_root / "pyproject.toml"
        if not toml_file.exists():
            self.logger.debug("No pyproject.toml found")
            return {}

        try:
            with open(toml_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            self.logger.warning(f"Could not read pyproject.toml: {e}")
            return {}

        config = data.get("tool", {}).get("excel2sql", {})
        if not isinstance(config, dict):
            raise ConfigurationError("[tool.excel2sql] in pyproject.toml must be a table")
        return dict(config)

    def _load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        env_mappings = {
            "EXCEL2SQL_DIALECT": "dialect",
            "EXCEL2SQL_MODE": "mode",
            "EXCEL2SQL_BATCH_SIZE": "batch_size",
            "EXCEL2SQL_QUOTE_IDENTIFIERS": "quote_identifiers",
            "EXCEL2SQL_VALIDATE": "validate",
        }

        env_config = {}
        for env_var, config_key in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                env_config[config_key] = value
        return env_config

    def _create_config(self, config_dict: dict[str, Any]) -> ConversionConfig:
        """Validate merged values and create a ConversionConfig."""
        dialect = str(config_dict.get("dialect", DEFAULT_DIALECT))
        if not is_dialect_supported(dialect):
            raise ConfigurationError(f"Unsupported dialect: {dialect}")

        try:
            mode = OperationMode.from_string(
                config_dict.get("mode", OperationMode.CREATE_AND_INSERT)
            )
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        table_name = config_dict.get("table_name")

        return ConversionConfig(
            dialect=get_dialect(dialect).name,
            mode=mode,
            batch_size=_to_positive_int("batch_size", config_dict.get("batch_size", DEFAULT_BATCH_SIZE)),
            table_name=str(table_name) if table_name else None,
            quote_identifiers=_to_bool("quote_identifiers", config_dict.get("quote_identifiers", False)),
            validate=_to_bool("validate", config_dict.get("validate", False)),
        )


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {key}: {value!r}")


def _to_positive_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid integer for {key}: {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid integer for {key}: {value!r}") from e
    if number < 1:
        raise ConfigurationError(f"{key} must be at least 1, got {number}")
    return number


def load_conversion_config(
    overrides: dict[str, Any] | None = None,
    project_root: str | None = None,
    settings: UserSettings | None = None,
) -> ConversionConfig:
    """
    Convenience function to load conversion configuration.

    Args:
        overrides: Explicit values taking precedence over every other source
        project_root: Directory holding pyproject.toml (defaults to current directory)
        settings: Saved user settings used as the lowest-precedence source

    Returns:
        ConversionConfig object
    """
    manager = ConversionConfigManager(project_root, settings)
    return manager.load_config(overrides)
