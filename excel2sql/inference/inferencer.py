"""
Column type inference for raw grids.

Turns a raw grid of text cells into a typed table: empty columns are dropped, each
remaining column gets the first type in precedence order that every qualifying
value parses as, and null markers and blank cells become nulls.
"""

import logging

from excel2sql.exceptions import MalformedGridError
from excel2sql.typing import CellValue, Column, DataType, RawGrid, Table, TypedCell, TypedValue

from .parsers import TYPE_CHECKS, is_blank, is_null_marker

logger = logging.getLogger(__name__)

# Type given to a column with no qualifying values
FALLBACK_TYPE = DataType.INTEGER


class TypeInferencer:
    """Infers a single data type per column and rewrites the grid into a typed table."""

    def __init__(self, fallback_type: DataType = FALLBACK_TYPE) -> None:
        """
        Initialize the inferencer.

        Args:
            fallback_type: Type for columns whose cells are all blank or NULL markers
        """
        self.fallback_type = fallback_type
        self.logger = logging.getLogger(self.__class__.__name__)

    def infer(self, grid: RawGrid, table_name: str = "") -> Table:
        """
        Infer column types and build a typed table.

        Args:
            grid: Header names plus rows of text cells
            table_name: Name carried on the resulting table

        Returns:
            Typed table; empty when the grid has no non-empty columns

        Raises:
            MalformedGridError: If a kept column has an empty or duplicated name, or a
                row's arity differs from the header
        """
        self._validate_rows(grid)

        kept = self._non_empty_column_indexes(grid)
        self._validate_header(grid, kept)
        dropped = grid.column_count - len(kept)
        if dropped:
            self.logger.debug(f"Dropped {dropped} empty column(s)")

        columns: list[Column] = []
        for index in kept:
            name = grid.header[index].strip()
            values = [row[index] for row in grid.rows]
            data_type = self.infer_column_type(values)
            nullable = any(is_blank(v) or is_null_marker(v) for v in values)
            columns.append(Column(name=name, data_type=data_type, nullable=nullable))
            self.logger.debug(f"Column '{name}' inferred as {data_type.value}")

        rows: list[list[TypedCell]] = []
        for row in grid.rows:
            rows.append(
                [self._convert_cell(row[index], column.data_type) for index, column in zip(kept, columns)]
            )

        self.logger.info(f"Inferred {len(columns)} column(s) over {len(rows)} row(s)")
        return Table(name=table_name, columns=columns, rows=rows)

    def infer_column_type(self, values: list[CellValue]) -> DataType:
        """
        Pick the most specific type that fits all qualifying values of a column.

        Args:
            values: Raw cells of one column

        Returns:
            The first type in precedence order accepted by every qualifying value
        """
        qualifying = [
            v.strip() for v in values if not is_blank(v) and not is_null_marker(v)
        ]
        if not qualifying:
            return self.fallback_type

        for data_type, check in TYPE_CHECKS:
            if all(check(v) for v in qualifying):
                return data_type

        return DataType.STRING

    def _validate_rows(self, grid: RawGrid) -> None:
        """Check that every row matches the header arity."""
        width = grid.column_count
        for index, row in enumerate(grid.rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"Row {index + 1} has {len(row)} cells but the header has {width}"
                )

    def _validate_header(self, grid: RawGrid, kept: list[int]) -> None:
        """Check the names of the columns that survive empty-column removal."""
        names = [grid.header[index].strip() if grid.header[index] else "" for index in kept]
        if any(not name for name in names):
            raise MalformedGridError("Header contains an empty column name")
        if len(set(names)) != len(names):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise MalformedGridError(f"Header contains duplicate column names: {duplicates}")

    def _non_empty_column_indexes(self, grid: RawGrid) -> list[int]:
        """Indexes of columns holding at least one non-blank cell."""
        return [
            index
            for index in range(grid.column_count)
            if any(not is_blank(row[index]) for row in grid.rows)
        ]

    def _convert_cell(self, cell: CellValue, data_type: DataType) -> TypedCell:
        """Normalize null markers and blanks to null and wrap the rest."""
        if is_blank(cell) or is_null_marker(cell):
            return None
        if data_type == DataType.STRING:
            return TypedValue(data_type, cell)
        return TypedValue(data_type, cell.strip())


def infer(grid: RawGrid, table_name: str = "") -> Table:
    """
    Convenience function to infer a typed table from a raw grid.

    Args:
        grid: Header names plus rows of text cells
        table_name: Name carried on the resulting table

    Returns:
        Typed table
    """
    return TypeInferencer().infer(grid, table_name)
