"""
Microsoft SQL Server (T-SQL) dialect.
"""

from excel2sql.typing import DataType

from .base import SQLDialect
from .registry import register_dialect


class MSSQLDialect(SQLDialect):
    """SQL Server dialect."""

    name = "MSSQL"
    aliases = ("sqlserver", "tsql", "t-sql")
    sqlglot_dialect = "tsql"
    identifier_quotes = ("[", "]")

    @property
    def type_names(self) -> dict[DataType, str]:
        return {
            DataType.INTEGER: "INT",
            DataType.FLOAT: "FLOAT",
            DataType.DECIMAL: "DECIMAL",
            DataType.BOOLEAN: "BIT",
            DataType.BYTE: "TINYINT",
            DataType.DATETIME: "DATETIME2",
            DataType.GUID: "UNIQUEIDENTIFIER",
            DataType.STRING: "NVARCHAR(MAX)",
        }

    @property
    def uuid_function(self) -> str:
        return "NEWID()"

    def render_boolean(self, text: str) -> str:
        """BIT columns take 1/0; T-SQL has no TRUE/FALSE keywords."""
        return "1" if text.strip().lower() == "true" else "0"


register_dialect(MSSQLDialect.name, MSSQLDialect)
