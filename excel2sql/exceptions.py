"""
Custom exceptions for the excel2sql package.
"""


class Excel2SQLError(Exception):
    """Base exception for all excel2sql errors."""

    pass


class EmptyInputError(Excel2SQLError):
    """Raised when no columns remain after empty-column removal."""

    pass


class GenerationError(Excel2SQLError):
    """Raised when SQL generation parameters are invalid."""

    pass


class ScriptValidationError(GenerationError):
    """Raised when a generated script does not parse in its target dialect."""

    pass


class MalformedGridError(Excel2SQLError):
    """Raised when a raw grid has invalid headers or ragged rows."""

    pass


class ReaderError(Excel2SQLError):
    """Base exception for tabular reader failures."""

    pass


class UnsupportedFileError(ReaderError):
    """Raised when no reader handles the file extension."""

    pass


class DelimiterDetectionError(ReaderError):
    """Raised when the delimiter of a text file cannot be detected."""

    pass


class SheetNotFoundError(ReaderError):
    """Raised when a requested worksheet does not exist."""

    pass


class ConfigurationError(Excel2SQLError):
    """Raised when conversion configuration is invalid."""

    pass


class SettingsError(Excel2SQLError):
    """Raised when the settings file cannot be read or written."""

    pass
