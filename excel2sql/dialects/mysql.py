"""
MySQL dialect.
"""

from excel2sql.typing import DataType

from .base import SQLDialect
from .registry import register_dialect


class MySQLDialect(SQLDialect):
    """MySQL dialect."""

    name = "MySQL"
    aliases = ("mariadb",)
    sqlglot_dialect = "mysql"
    identifier_quotes = ("`", "`")

    @property
    def type_names(self) -> dict[DataType, str]:
        return {
            DataType.INTEGER: "INT",
            DataType.FLOAT: "DOUBLE",
            DataType.DECIMAL: "DECIMAL",
            DataType.BOOLEAN: "TINYINT(1)",
            DataType.BYTE: "TINYINT UNSIGNED",
            DataType.DATETIME: "DATETIME",
            DataType.GUID: "CHAR(36)",
            DataType.STRING: "TEXT",
        }

    @property
    def uuid_function(self) -> str:
        return "UUID()"


register_dialect(MySQLDialect.name, MySQLDialect)
