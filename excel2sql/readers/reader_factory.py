"""
Factory for creating tabular readers based on file type.
"""

from pathlib import Path

from excel2sql.exceptions import UnsupportedFileError

from .base import TabularReader
from .csv_reader import DelimitedTextReader
from .excel_reader import ExcelReader


class ReaderFactory:
    """Factory for creating the reader that handles a file's extension."""

    # Registry of readers by file extension
    _readers: dict[str, type[TabularReader]] = {
        **dict.fromkeys(DelimitedTextReader.extensions, DelimitedTextReader),
        **dict.fromkeys(ExcelReader.extensions, ExcelReader),
    }

    @classmethod
    def create_reader(cls, file_path: Path) -> TabularReader:
        """
        Create an appropriate reader for the given file path.

        Args:
            file_path: Path to the source file

        Returns:
            Reader instance

        Raises:
            UnsupportedFileError: If no reader is available for the file type
        """
        file_extension = Path(file_path).suffix.lower()
        reader_class = cls._readers.get(file_extension)
        if reader_class is None:
            supported = ", ".join(cls.supported_extensions())
            raise UnsupportedFileError(
                f"Unsupported file type: {file_extension or '(none)'}. Supported: {supported}"
            )
        return reader_class()

    @classmethod
    def is_supported(cls, file_path: Path) -> bool:
        """Check if a file type is supported."""
        return Path(file_path).suffix.lower() in cls._readers

    @classmethod
    def supported_extensions(cls) -> list[str]:
        return sorted(cls._readers)


def get_reader(file_path: Path) -> TabularReader:
    """Get the reader for a file."""
    return ReaderFactory.create_reader(file_path)
