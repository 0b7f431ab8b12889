"""
Tests for the grid and table model.
"""

import uuid
from datetime import datetime
from decimal import Decimal

import pytest

from excel2sql.exceptions import MalformedGridError
from excel2sql.typing import Column, DataType, OperationMode, Table, TypedValue


class TestOperationMode:
    """Tests for OperationMode name resolution."""

    def test_from_string_accepts_aliases(self):
        """Test that common spellings resolve to the right mode."""
        assert OperationMode.from_string("create") == OperationMode.CREATE_AND_INSERT
        assert OperationMode.from_string("CreateAndInsert") == OperationMode.CREATE_AND_INSERT
        assert OperationMode.from_string("insert_only") == OperationMode.INSERT_ONLY
        assert OperationMode.from_string("Update") == OperationMode.INSERT_ONLY

    def test_from_string_passes_modes_through(self):
        """Test that an OperationMode is returned unchanged."""
        assert OperationMode.from_string(OperationMode.INSERT_ONLY) is OperationMode.INSERT_ONLY

    def test_from_string_rejects_unknown(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError):
            OperationMode.from_string("upsert")


class TestTypedValue:
    """Tests for TypedValue native conversion."""

    def test_value_converts_to_native_types(self):
        """Test conversion for each data type."""
        assert TypedValue(DataType.INTEGER, "42").value == 42
        assert TypedValue(DataType.DECIMAL, "3.50").value == Decimal("3.50")
        assert TypedValue(DataType.FLOAT, "1e3").value == 1000.0
        assert TypedValue(DataType.BOOLEAN, "TRUE").value is True
        assert TypedValue(DataType.BYTE, "255").value == 255
        assert TypedValue(DataType.STRING, " kept ").value == " kept "
        assert TypedValue(DataType.DATETIME, "2024-01-15 10:30:00").value == datetime(
            2024, 1, 15, 10, 30
        )
        assert TypedValue(DataType.GUID, " 123e4567-e89b-12d3-a456-426614174000 ").value == uuid.UUID(
            "123e4567-e89b-12d3-a456-426614174000"
        )

    def test_quoted_types(self):
        """Test which types render as quoted literals."""
        quoted = {data_type for data_type in DataType if data_type.is_quoted}
        assert quoted == {DataType.STRING, DataType.DATETIME, DataType.GUID}


class TestTable:
    """Tests for Table invariants."""

    def test_rows_must_match_column_count(self):
        """Test that a ragged row is rejected."""
        columns = [Column("a", DataType.INTEGER), Column("b", DataType.STRING)]
        with pytest.raises(MalformedGridError):
            Table(name="t", columns=columns, rows=[[TypedValue(DataType.INTEGER, "1")]])

    def test_column_names_must_be_unique(self):
        """Test that duplicate column names are rejected."""
        columns = [Column("a", DataType.INTEGER), Column("a", DataType.STRING)]
        with pytest.raises(MalformedGridError):
            Table(name="t", columns=columns)

    def test_column_values(self):
        """Test reading one column across rows."""
        one = TypedValue(DataType.INTEGER, "1")
        table = Table(
            name="t",
            columns=[Column("a", DataType.INTEGER), Column("b", DataType.STRING)],
            rows=[[one, None], [None, TypedValue(DataType.STRING, "x")]],
        )

        assert table.column_names == ["a", "b"]
        assert table.column_values(0) == [one, None]
        assert len(table) == 2
