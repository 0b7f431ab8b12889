"""
Command context for shared setup across CLI commands.
"""

import traceback

import typer

from excel2sql.exceptions import (
    DelimiterDetectionError,
    EmptyInputError,
    GenerationError,
    ReaderError,
    SettingsError,
    SheetNotFoundError,
    UnsupportedFileError,
)
from excel2sql.i18n import TextCatalog
from excel2sql.settings import SettingsStore, UserSettings

from .utils import setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: logging, saved user settings and the text catalog.
    """

    def __init__(self, verbose: bool = False, language: str | None = None):
        """
        Initialize command context from parameters.

        Args:
            verbose: Enable verbose output
            language: Message language; defaults to the saved language setting
        """
        self.verbose = verbose
        setup_logging(self.verbose)

        self.settings_store = SettingsStore()
        try:
            self.settings = self.settings_store.load()
            settings_error = None
        except SettingsError as e:
            self.settings = UserSettings()
            settings_error = e

        self.catalog = TextCatalog(language or self.settings.language)
        if settings_error is not None:
            typer.echo(self.text("cant_load_settings") + str(settings_error), err=True)

    def text(self, key: str, **kwargs: object) -> str:
        """Get a localized message."""
        return self.catalog.get(key, **kwargs)

    def save_settings(self, **changes: object) -> None:
        """Persist setting changes, reporting but not failing on write errors."""
        try:
            for key, value in changes.items():
                setattr(self.settings, key, value)
            self.settings_store.save(self.settings)
        except SettingsError as e:
            typer.echo(f"{self.text('error_saving_file')}{e}", err=True)

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{self._describe(error)}", err=True)
        if show_traceback:
            traceback.print_exc()
        raise typer.Exit(1)

    def _describe(self, error: Exception) -> str:
        """Prefix an error with its localized description."""
        if isinstance(error, DelimiterDetectionError):
            return f"{self.text('delimiter_warning')} ({error})"
        if isinstance(error, SheetNotFoundError):
            return f"{self.text('sheet_not_found')} ({error})"
        if isinstance(error, UnsupportedFileError):
            return f"{self.text('unsupported_file')} ({error})"
        if isinstance(error, ReaderError):
            return f"{self.text('error_loading_file')}{error}"
        if isinstance(error, EmptyInputError):
            return f"{self.text('no_data_loaded')} ({error})"
        if isinstance(error, GenerationError):
            return f"{self.text('error_generating_sql')}{error}"
        if isinstance(error, OSError):
            return f"{self.text('error_saving_file')}{error}"
        return str(error)
