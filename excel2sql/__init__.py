"""
excel2sql

Converts Excel worksheets and delimited text files into SQL CREATE TABLE /
INSERT INTO scripts for SQL Server, MySQL and PostgreSQL, inferring a data type
for every column.
"""

from .config import ConversionConfig, load_conversion_config
from .converter import ConversionResult, convert_file, convert_grid, resolve_output_path, write_script
from .dialects import get_dialect, list_available_dialects
from .exceptions import EmptyInputError, Excel2SQLError, GenerationError
from .generator import SQLGenerator, generate
from .inference import TypeInferencer, infer
from .typing import Column, DataType, OperationMode, RawGrid, Table, TypedValue

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ConversionConfig",
    "ConversionResult",
    "DataType",
    "EmptyInputError",
    "Excel2SQLError",
    "GenerationError",
    "OperationMode",
    "RawGrid",
    "SQLGenerator",
    "Table",
    "TypeInferencer",
    "TypedValue",
    "convert_file",
    "convert_grid",
    "generate",
    "get_dialect",
    "infer",
    "list_available_dialects",
    "load_conversion_config",
    "resolve_output_path",
    "write_script",
]
