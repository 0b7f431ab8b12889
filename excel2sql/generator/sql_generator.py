"""
SQL script generation for typed tables.

Renders an optional CREATE TABLE statement followed by batched multi-row INSERT
statements in the target dialect. Generation is a pure function of its inputs:
the same table and options always give byte-identical output.
"""

import logging

from excel2sql.dialects import DEFAULT_DIALECT, SQLDialect, get_dialect
from excel2sql.exceptions import GenerationError
from excel2sql.typing import Column, DataType, OperationMode, Table, TypedCell

from .validation import validate_script

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 500


class SQLGenerator:
    """Generates CREATE TABLE / INSERT INTO scripts for one target dialect."""

    def __init__(
        self,
        dialect: str | SQLDialect = DEFAULT_DIALECT,
        batch_size: int = DEFAULT_BATCH_SIZE,
        quote_identifiers: bool = False,
    ) -> None:
        """
        Initialize the generator.

        Args:
            dialect: Target dialect name or instance
            batch_size: Maximum number of rows per INSERT statement
            quote_identifiers: Wrap table and column names in dialect quotes

        Raises:
            GenerationError: If the dialect is unknown or batch_size < 1
        """
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            raise GenerationError(f"Batch size must be a positive integer, got {batch_size!r}")

        self.dialect = get_dialect(dialect)
        self.batch_size = batch_size
        self.quote_identifiers = quote_identifiers
        self.logger = logging.getLogger(self.__class__.__name__)

    def generate(
        self,
        table: Table,
        mode: OperationMode | str = OperationMode.CREATE_AND_INSERT,
        table_name: str | None = None,
    ) -> str:
        """
        Generate the SQL script for a table.

        Args:
            table: Typed table produced by type inference
            mode: CREATE_AND_INSERT or INSERT_ONLY
            table_name: Target table name (defaults to table.name)

        Returns:
            Script text; every statement is followed by a blank line

        Raises:
            GenerationError: If the table name is empty or the table has no columns
        """
        try:
            mode = OperationMode.from_string(mode)
        except ValueError as e:
            raise GenerationError(str(e)) from e

        name = (table_name if table_name is not None else table.name).strip()
        if not name:
            raise GenerationError("Table name must not be empty")
        if not table.columns:
            raise GenerationError("Table has no columns")

        statements = []
        if mode == OperationMode.CREATE_AND_INSERT:
            statements.append(self.create_table_statement(table.columns, name))
        statements.extend(self.insert_statements(table, name))

        self.logger.info(
            f"Generated {len(statements)} statement(s) for table {name} "
            f"({self.dialect.name}, {len(table)} row(s))"
        )
        return "".join(f"{statement}\n\n" for statement in statements)

    def create_table_statement(self, columns: list[Column], table_name: str) -> str:
        """Build the CREATE TABLE statement."""
        column_defs = ", ".join(
            f"{self._identifier(column.name)} {self.dialect.get_sql_type(column.data_type)}"
            for column in columns
        )
        return f"CREATE TABLE {self._identifier(table_name)} ({column_defs});"

    def insert_statements(self, table: Table, table_name: str) -> list[str]:
        """Build one INSERT statement per batch of rows, in row order."""
        column_list = ", ".join(self._identifier(name) for name in table.column_names)
        prefix = f"INSERT INTO {self._identifier(table_name)} ({column_list}) VALUES "

        statements = []
        for start in range(0, len(table.rows), self.batch_size):
            batch = table.rows[start : start + self.batch_size]
            values = ", ".join(self.render_row(row, table.columns) for row in batch)
            statements.append(f"{prefix}{values};")
        return statements

    def render_row(self, row: list[TypedCell], columns: list[Column]) -> str:
        """Render a row as a parenthesised value tuple."""
        return "(" + ",".join(self.render_value(cell, column) for cell, column in zip(row, columns)) + ")"

    def render_value(self, cell: TypedCell, column: Column) -> str:
        """
        Render one cell as a SQL literal.

        Args:
            cell: Typed cell or None
            column: The cell's column

        Returns:
            SQL literal text
        """
        data_type = column.data_type

        if data_type == DataType.GUID and cell is None:
            return self.dialect.uuid_function
        if cell is None:
            return "NULL"
        if data_type.is_quoted:
            text = cell.text if data_type == DataType.STRING else cell.text.strip()
            return self.dialect.quote_string(text)
        if data_type == DataType.BOOLEAN:
            return self.dialect.render_boolean(cell.text.strip())
        return cell.text.strip()

    def _identifier(self, name: str) -> str:
        if self.quote_identifiers:
            return self.dialect.quote_identifier(name)
        return name


def generate(
    table: Table,
    mode: OperationMode | str = OperationMode.CREATE_AND_INSERT,
    dialect: str | SQLDialect = DEFAULT_DIALECT,
    batch_size: int = DEFAULT_BATCH_SIZE,
    table_name: str | None = None,
    quote_identifiers: bool = False,
    validate: bool = False,
) -> str:
    """
    Generate a SQL script for a typed table.

    Args:
        table: Typed table produced by type inference
        mode: CREATE_AND_INSERT or INSERT_ONLY
        dialect: Target dialect name or instance
        batch_size: Maximum rows per INSERT statement
        table_name: Target table name (defaults to table.name)
        quote_identifiers: Wrap identifiers in dialect quotes
        validate: Parse the finished script with sqlglot before returning it

    Returns:
        Script text

    Raises:
        GenerationError: On invalid parameters, or ScriptValidationError when
            validation is requested and the script does not parse
    """
    generator = SQLGenerator(
        dialect=dialect, batch_size=batch_size, quote_identifiers=quote_identifiers
    )
    script = generator.generate(table, mode=mode, table_name=table_name)
    if validate:
        validate_script(script, generator.dialect)
    return script
