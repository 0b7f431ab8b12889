"""
PostgreSQL dialect.
"""

from excel2sql.typing import DataType

from .base import SQLDialect
from .registry import register_dialect


class PostgreSQLDialect(SQLDialect):
    """PostgreSQL dialect."""

    name = "PostgreSQL"
    aliases = ("postgres", "pg")
    sqlglot_dialect = "postgres"
    identifier_quotes = ('"', '"')

    @property
    def type_names(self) -> dict[DataType, str]:
        return {
            DataType.INTEGER: "INTEGER",
            DataType.FLOAT: "DOUBLE PRECISION",
            DataType.DECIMAL: "DECIMAL",
            DataType.BOOLEAN: "BOOLEAN",
            DataType.BYTE: "SMALLINT",
            DataType.DATETIME: "TIMESTAMP WITHOUT TIME ZONE",
            DataType.GUID: "UUID",
            DataType.STRING: "TEXT",
        }

    @property
    def uuid_function(self) -> str:
        return "gen_random_uuid()"


register_dialect(PostgreSQLDialect.name, PostgreSQLDialect)
