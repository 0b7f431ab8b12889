"""
Type definitions for the excel2sql grid and table model.
"""

from .table import (
    CellValue,
    Column,
    DataType,
    OperationMode,
    RawGrid,
    Table,
    TypedCell,
    TypedValue,
)

__all__ = [
    "CellValue",
    "Column",
    "DataType",
    "OperationMode",
    "RawGrid",
    "Table",
    "TypedCell",
    "TypedValue",
]
