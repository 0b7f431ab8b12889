"""
Type definitions for raw grids and typed tables.

A raw grid is what a tabular reader hands to the core: a header row and rows of
text cells. A table is the result of type inference: named, typed columns and rows
of typed cells, positionally aligned with the columns.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from excel2sql.exceptions import MalformedGridError

# Pre-inference cell: text or an explicit null
CellValue = str | None


class DataType(Enum):
    """Column data types, listed in inference precedence order after Guid/DateTime."""

    INTEGER = "Integer"
    DECIMAL = "Decimal"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    BYTE = "Byte"
    GUID = "Guid"
    DATETIME = "DateTime"
    STRING = "String"

    @property
    def is_quoted(self) -> bool:
        """Whether values of this type render as quoted string literals."""
        return self in (DataType.STRING, DataType.DATETIME, DataType.GUID)


class OperationMode(Enum):
    """What the generated script does with the target table."""

    CREATE_AND_INSERT = "create"
    INSERT_ONLY = "insert"

    @classmethod
    def from_string(cls, value: "str | OperationMode") -> "OperationMode":
        """
        Resolve a mode from its name or a common alias.

        Args:
            value: Mode name such as "create", "CreateAndInsert", "insert" or "InsertOnly"

        Returns:
            The matching OperationMode

        Raises:
            ValueError: If the name is not recognised
        """
        if isinstance(value, OperationMode):
            return value

        normalized = value.strip().lower().replace("_", "").replace("-", "")
        aliases = {
            "create": cls.CREATE_AND_INSERT,
            "createandinsert": cls.CREATE_AND_INSERT,
            "createtable": cls.CREATE_AND_INSERT,
            "insert": cls.INSERT_ONLY,
            "insertonly": cls.INSERT_ONLY,
            "update": cls.INSERT_ONLY,
            "updatetable": cls.INSERT_ONLY,
        }
        if normalized not in aliases:
            raise ValueError(f"Unknown operation mode: {value!r}")
        return aliases[normalized]


@dataclass
class RawGrid:
    """Header names plus rows of untyped text cells, as produced by a tabular reader."""

    header: list[str]
    rows: list[list[CellValue]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.header)


@dataclass(frozen=True)
class TypedValue:
    """A non-null cell after inference: its column type and the text it was read from."""

    data_type: DataType
    text: str

    @property
    def value(self) -> Any:
        """
        The cell converted to its native Python value.

        Part of the library API for callers that consume a Table directly; SQL
        generation renders from the source text and does not use it.
        """
        from excel2sql.inference.parsers import parse_value

        return parse_value(self.data_type, self.text)


# Post-inference cell: a typed value or null
TypedCell = TypedValue | None


@dataclass(frozen=True)
class Column:
    """A named table column with its inferred type."""

    name: str
    data_type: DataType
    nullable: bool = True


@dataclass
class Table:
    """
    A typed table ready for SQL generation.

    Row order is the source order and determines INSERT order.
    """

    name: str
    columns: list[Column] = field(default_factory=list)
    rows: list[list[TypedCell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        names = [column.name for column in self.columns]
        if any(not name for name in names):
            raise MalformedGridError("Column names must be non-empty")
        if len(set(names)) != len(names):
            raise MalformedGridError(f"Column names must be unique: {names}")

        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise MalformedGridError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def column_values(self, index: int) -> list[TypedCell]:
        """Return every cell of the column at the given position."""
        return [row[index] for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)
