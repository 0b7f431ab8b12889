"""
Base class for target SQL dialects.
"""

import logging
from abc import ABC, abstractmethod

from excel2sql.typing import DataType


class SQLDialect(ABC):
    """
    Abstract base class for target SQL dialects.

    A dialect knows how to spell column types, how to generate a fresh UUID, how to
    quote identifiers and literals, and which sqlglot dialect parses its output.
    """

    # Display name used in configuration and output
    name: str = ""

    # Additional lowercase names accepted by the registry
    aliases: tuple[str, ...] = ()

    # Matching sqlglot dialect name, used for script validation
    sqlglot_dialect: str = ""

    # Identifier quote characters (open, close)
    identifier_quotes: tuple[str, str] = ('"', '"')

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def type_names(self) -> dict[DataType, str]:
        """SQL type name for every data type."""
        pass

    @property
    @abstractmethod
    def uuid_function(self) -> str:
        """Expression generating a fresh UUID."""
        pass

    def get_sql_type(self, data_type: DataType) -> str:
        """
        Get the SQL type name for a data type.

        Args:
            data_type: Inferred column type

        Returns:
            The dialect's type name
        """
        return self.type_names[data_type]

    def quote_identifier(self, name: str) -> str:
        """Wrap an identifier in the dialect's quote characters."""
        open_quote, close_quote = self.identifier_quotes
        return f"{open_quote}{name.replace(close_quote, close_quote * 2)}{close_quote}"

    def quote_string(self, text: str) -> str:
        """Render text as a single-quoted string literal."""
        escaped = text.replace("'", "''")
        return f"'{escaped}'"

    def render_boolean(self, text: str) -> str:
        """Render boolean text; TRUE/FALSE keywords are accepted as written by default."""
        return text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
