"""
Persisted user preferences.

Preferences are a flat JSON record: the last operation, language, target dialect
and input/output paths. The CLI reads them as defaults and updates them after
conversions.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

from excel2sql.dialects import get_dialect, is_dialect_supported
from excel2sql.exceptions import SettingsError
from excel2sql.typing import OperationMode

SETTINGS_PATH_ENV = "EXCEL2SQL_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path.home() / ".excel2sql" / "settings.json"


@dataclass
class UserSettings:
    """User preferences remembered between runs."""

    operation: str = "create"
    language: str = "en"
    target_dialect: str = "MSSQL"
    input_path: str | None = None
    output_path: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserSettings":
        """Build settings from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def default_settings_path() -> Path:
    """Settings file location, honouring the EXCEL2SQL_SETTINGS_PATH variable."""
    override = os.getenv(SETTINGS_PATH_ENV)
    return Path(override).expanduser() if override else DEFAULT_SETTINGS_PATH


class SettingsStore:
    """Loads and saves user settings as a JSON file."""

    def __init__(self, path: Path | str | None = None) -> None:
        """
        Initialize the store.

        Args:
            path: Settings file path (defaults to default_settings_path())
        """
        self.path = Path(path) if path else default_settings_path()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load(self) -> UserSettings:
        """
        Load settings, creating the file with defaults when it does not exist.

        Returns:
            Loaded settings

        Raises:
            SettingsError: If the file exists but is not a JSON object
        """
        if not self.path.exists():
            settings = UserSettings()
            self.logger.debug(f"Settings file not found, writing defaults to {self.path}")
            self.save(settings)
            return settings

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsError(f"Could not load settings from {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must contain a JSON object")

        return UserSettings.from_dict(data)

    def save(self, settings: UserSettings) -> None:
        """
        Save settings.

        Args:
            settings: Settings to persist

        Raises:
            SettingsError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(settings.to_dict(), f, indent=2)
        except OSError as e:
            raise SettingsError(f"Could not save settings to {self.path}: {e}") from e
        self.logger.debug(f"Saved settings to {self.path}")

    def update(self, **changes: Any) -> UserSettings:
        """
        Load settings, apply changes and save them.

        Args:
            **changes: Field values to change

        Returns:
            Updated settings

        Raises:
            SettingsError: If a field name is unknown, or the dialect or operation is invalid
        """
        known = {f.name for f in fields(UserSettings)}
        unknown = set(changes) - known
        if unknown:
            raise SettingsError(
                f"Unknown setting(s): {sorted(unknown)}. Known settings: {sorted(known)}"
            )

        changes = _validate_changes(changes)
        settings = replace(self.load(), **changes)
        self.save(settings)
        return settings


def _validate_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Check dialect and operation values and store their canonical names."""
    validated = dict(changes)

    if "target_dialect" in validated:
        dialect = str(validated["target_dialect"])
        if not is_dialect_supported(dialect):
            raise SettingsError(f"Unsupported dialect: {dialect}")
        validated["target_dialect"] = get_dialect(dialect).name

    if "operation" in validated:
        try:
            validated["operation"] = OperationMode.from_string(str(validated["operation"])).value
        except ValueError as e:
            raise SettingsError(str(e)) from e

    return validated
