"""
Conversion pipeline: file or raw grid -> typed table -> SQL script -> file.
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from excel2sql.config import ConversionConfig
from excel2sql.exceptions import EmptyInputError, GenerationError
from excel2sql.generator import generate
from excel2sql.inference import TypeInferencer
from excel2sql.readers import get_reader
from excel2sql.typing import OperationMode, RawGrid, Table

logger = logging.getLogger(__name__)

SQL_SUFFIX = ".sql"


@dataclass
class ConversionResult:
    """Outcome of one conversion."""

    script: str
    table: Table
    statement_count: int = 0


def convert_grid(
    grid: RawGrid, config: ConversionConfig, table_name: str | None = None
) -> ConversionResult:
    """
    Infer a typed table from a raw grid and generate its SQL script.

    Args:
        grid: Raw grid from a tabular reader
        config: Conversion options
        table_name: Target table name; overrides config.table_name

    Returns:
        ConversionResult with the script and the typed table

    Raises:
        EmptyInputError: If no columns remain after empty-column removal
        GenerationError: If generation parameters are invalid
    """
    name = table_name or config.table_name
    if not name or not name.strip():
        raise GenerationError("Table name must not be empty")

    table = TypeInferencer().infer(grid, table_name=name)
    if not table.columns:
        raise EmptyInputError("The input has no non-empty columns")

    script = generate(
        table,
        mode=config.mode,
        dialect=config.dialect,
        batch_size=config.batch_size,
        table_name=name,
        quote_identifiers=config.quote_identifiers,
        validate=config.validate,
    )
    statement_count = math.ceil(len(table) / config.batch_size)
    if config.mode == OperationMode.CREATE_AND_INSERT:
        statement_count += 1
    return ConversionResult(script=script, table=table, statement_count=statement_count)


def read_grid(
    input_path: Path | str, sheet: str | None = None, delimiter: str | None = None
) -> RawGrid:
    """
    Read a source file into a raw grid with the reader for its extension.

    Args:
        input_path: Spreadsheet or delimited text file
        sheet: Worksheet name for workbooks
        delimiter: Delimiter for text files (auto-detected when None)

    Returns:
        Raw grid
    """
    input_path = Path(input_path)
    reader = get_reader(input_path)
    options = {}
    if sheet is not None:
        options["sheet"] = sheet
    if delimiter:
        options["delimiter"] = delimiter
    return reader.read(input_path, **options)


def convert_file(
    input_path: Path | str,
    config: ConversionConfig,
    sheet: str | None = None,
    delimiter: str | None = None,
) -> ConversionResult:
    """
    Convert a spreadsheet or delimited text file into a SQL script.

    The table name defaults to the input file name without extension.

    Args:
        input_path: Source file
        config: Conversion options
        sheet: Worksheet name for workbooks
        delimiter: Delimiter for text files

    Returns:
        ConversionResult
    """
    input_path = Path(input_path)
    grid = read_grid(input_path, sheet=sheet, delimiter=delimiter)
    table_name = config.table_name or input_path.stem
    logger.info(f"Converting {input_path} into table {table_name}")
    return convert_grid(grid, config, table_name=table_name)


def resolve_output_path(input_path: Path | str, output: Path | str | None = None) -> Path:
    """
    Decide where the script for an input file is written.

    Args:
        input_path: Source file
        output: Requested output file or directory

    Returns:
        ``<input dir>/<stem>.sql`` when no output is given, ``<output>/<stem>.sql``
        when output is a directory or has no .sql suffix, otherwise output itself
    """
    input_path = Path(input_path)
    file_name = f"{input_path.stem}{SQL_SUFFIX}"

    if output is None or str(output) == "":
        return input_path.parent / file_name

    output = Path(output)
    if output.is_dir() or output.suffix.lower() != SQL_SUFFIX:
        return output / file_name
    return output


def write_script(script: str, output_path: Path | str) -> Path:
    """
    Write a script as UTF-8, creating parent directories.

    Args:
        script: SQL script text
        output_path: Destination file

    Returns:
        The written path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(script, encoding="utf-8")
    logger.info(f"Wrote SQL script to {output_path}")
    return output_path
