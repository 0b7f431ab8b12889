"""
Abstract base class for tabular readers.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from excel2sql.typing import RawGrid


class TabularReader(ABC):
    """Abstract base class for readers that turn a file into a raw grid."""

    # File extensions handled by this reader, lowercase with leading dot
    extensions: tuple[str, ...] = ()

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def read(self, file_path: Path, **options: Any) -> RawGrid:
        """
        Read a file into a raw grid.

        Args:
            file_path: Path to the source file
            **options: Reader-specific options

        Returns:
            Header names and rows of text cells, each row padded or truncated to
            the header's arity

        Raises:
            ReaderError: If the file cannot be read
        """
        pass

    @staticmethod
    def _align_row(row: list[str | None], indexes: list[int]) -> list[str | None]:
        """Pick the cells at the kept header positions, padding missing ones with None."""
        return [row[index] if index < len(row) else None for index in indexes]
