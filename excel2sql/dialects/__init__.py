"""
Target SQL dialects.

Each dialect maps inferred column types to SQL type names and renders
dialect-specific literals such as UUID generation calls.
"""

from .base import SQLDialect

# Import dialects to register them
from .mssql import MSSQLDialect
from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect
from .registry import (
    DialectRegistry,
    get_dialect,
    is_dialect_supported,
    list_available_dialects,
    register_dialect,
)

DEFAULT_DIALECT = MSSQLDialect.name

__all__ = [
    "SQLDialect",
    "DialectRegistry",
    "get_dialect",
    "register_dialect",
    "list_available_dialects",
    "is_dialect_supported",
    "DEFAULT_DIALECT",
    "MSSQLDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
]
