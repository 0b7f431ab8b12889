"""
Tests for SQL script generation.
"""

import pytest

from excel2sql.exceptions import GenerationError
from excel2sql.generator import SQLGenerator, generate
from excel2sql.inference import infer
from excel2sql.typing import Column, DataType, OperationMode, RawGrid, Table

DIALECTS = ["MSSQL", "MySQL", "PostgreSQL"]


def _table(header, rows, name="t") -> Table:
    return infer(RawGrid(header=header, rows=rows), table_name=name)


class TestScriptLayout:
    """Tests for statement layout and batching."""

    def test_people_scenario_postgresql(self, people_grid):
        """Test the full script for a small table."""
        table = infer(people_grid, table_name="people")
        script = generate(table, OperationMode.CREATE_AND_INSERT, "PostgreSQL", 500, "people")

        assert script == (
            "CREATE TABLE people (id INTEGER, name TEXT, score DECIMAL);\n"
            "\n"
            "INSERT INTO people (id, name, score) VALUES (1,'Alice',3.5), (2,'Bob',NULL);\n"
            "\n"
        )

    def test_float_column_renders_double_precision(self):
        """Test that a Float column maps to DOUBLE PRECISION on PostgreSQL."""
        table = _table(["score"], [["3.5e0"], ["NULL"]])
        script = generate(table, dialect="PostgreSQL", table_name="people")

        assert script.startswith("CREATE TABLE people (score DOUBLE PRECISION);\n\n")
        assert "VALUES (3.5e0), (NULL);" in script

    def test_batches_preserve_row_order(self):
        """Test that 5 rows with batch size 2 give 3 INSERTs of 2, 2 and 1 rows."""
        table = _table(["n"], [["1"], ["2"], ["3"], ["4"], ["5"]])
        script = generate(table, OperationMode.INSERT_ONLY, "MSSQL", 2, "t")

        assert script == (
            "INSERT INTO t (n) VALUES (1), (2);\n\n"
            "INSERT INTO t (n) VALUES (3), (4);\n\n"
            "INSERT INTO t (n) VALUES (5);\n\n"
        )

    def test_insert_only_has_no_create(self, people_grid):
        """Test INSERT_ONLY mode."""
        table = infer(people_grid)
        script = generate(table, OperationMode.INSERT_ONLY, "MySQL", 500, "people")

        assert "CREATE TABLE" not in script
        assert script.count("INSERT INTO") == 1

    def test_mode_accepts_strings(self, people_grid):
        """Test that the mode can be given by name."""
        table = infer(people_grid)
        script = generate(table, "insert", "MySQL", 500, "people")

        assert not script.startswith("CREATE")

    def test_zero_rows_emits_create_only(self):
        """Test that a table without rows has no INSERT statements."""
        table = Table(name="t", columns=[Column("a", DataType.INTEGER)], rows=[])
        script = generate(table, table_name="t")

        assert script == "CREATE TABLE t (a INT);\n\n"

    def test_generation_is_idempotent(self, people_grid):
        """Test that repeated generation gives byte-identical output."""
        table = infer(people_grid)
        first = generate(table, dialect="MySQL", batch_size=1, table_name="people")
        second = generate(table, dialect="MySQL", batch_size=1, table_name="people")

        assert first == second


class TestLiteralRendering:
    """Tests for per-type literal rendering."""

    def test_quotes_are_doubled_in_every_dialect(self):
        """Test that O'Brien renders as 'O''Brien'."""
        table = _table(["name"], [["O'Brien"]])
        for dialect in DIALECTS:
            script = generate(table, OperationMode.INSERT_ONLY, dialect, 500, "t")
            assert "VALUES ('O''Brien');" in script

    def test_datetime_is_quoted(self):
        """Test DateTime literals."""
        table = _table(["d"], [["2024-01-15 10:30:00"]])
        script = generate(table, OperationMode.INSERT_ONLY, "MSSQL", 500, "t")

        assert "VALUES ('2024-01-15 10:30:00');" in script

    def test_null_guid_uses_uuid_function(self):
        """Test that missing GUIDs are generated by the database."""
        guid = "123e4567-e89b-12d3-a456-426614174000"
        table = _table(["id"], [[guid], [""], ["NULL"]])
        expected = {"MSSQL": "NEWID()", "MySQL": "UUID()", "PostgreSQL": "gen_random_uuid()"}

        for dialect, function in expected.items():
            script = generate(table, OperationMode.INSERT_ONLY, dialect, 500, "t")
            assert f"VALUES ('{guid}'), ({function}), ({function});" in script

    def test_numbers_render_unquoted(self):
        """Test that numeric text is emitted as-is."""
        table = _table(["i", "d", "f"], [["1", "2.50", "1E3"]])
        script = generate(table, OperationMode.INSERT_ONLY, "PostgreSQL", 500, "t")

        assert "VALUES (1,2.50,1E3);" in script

    def test_boolean_rendering(self):
        """Test booleans: 1/0 on MSSQL, source text elsewhere."""
        table = _table(["flag"], [["true"], ["False"]])

        mssql = generate(table, OperationMode.INSERT_ONLY, "MSSQL", 500, "t")
        postgres = generate(table, OperationMode.INSERT_ONLY, "PostgreSQL", 500, "t")

        assert "VALUES (1), (0);" in mssql
        assert "VALUES (true), (False);" in postgres

    def test_null_cells(self):
        """Test that null cells render NULL."""
        table = _table(["a", "b"], [["1", "x"], ["NULL", ""]])
        script = generate(table, OperationMode.INSERT_ONLY, "MySQL", 500, "t")

        assert "(NULL,NULL)" in script


class TestTypeMapping:
    """Tests for CREATE TABLE type names."""

    def test_boolean_types_per_dialect(self):
        """Test Boolean mapping for the same table."""
        table = _table(["flag"], [["true"]])
        expected = {"MSSQL": "BIT", "MySQL": "TINYINT(1)", "PostgreSQL": "BOOLEAN"}

        for dialect, sql_type in expected.items():
            script = generate(table, dialect=dialect, table_name="t")
            assert script.startswith(f"CREATE TABLE t (flag {sql_type});")

    def test_all_types_mssql(self):
        """Test the full MSSQL column list."""
        columns = [Column(data_type.value.lower(), data_type) for data_type in DataType]
        table = Table(name="t", columns=columns)
        generator = SQLGenerator("MSSQL")

        assert generator.create_table_statement(table.columns, "t") == (
            "CREATE TABLE t (integer INT, decimal DECIMAL, float FLOAT, boolean BIT, "
            "byte TINYINT, guid UNIQUEIDENTIFIER, datetime DATETIME2, string NVARCHAR(MAX));"
        )


class TestIdentifierQuoting:
    """Tests for optional identifier quoting."""

    def test_quote_identifiers_per_dialect(self):
        """Test bracket, backtick and double-quote quoting."""
        table = _table(["first name"], [["Ann"]])
        expected = {
            "MSSQL": "INSERT INTO [my table] ([first name]) VALUES",
            "MySQL": "INSERT INTO `my table` (`first name`) VALUES",
            "PostgreSQL": 'INSERT INTO "my table" ("first name") VALUES',
        }

        for dialect, prefix in expected.items():
            script = generate(
                table, OperationMode.INSERT_ONLY, dialect, 500, "my table", quote_identifiers=True
            )
            assert script.startswith(prefix)

    def test_closing_quote_is_doubled(self):
        """Test escaping of quote characters inside names."""
        table = _table(['a"b'], [["1"]])
        script = generate(table, "insert", "PostgreSQL", 500, "t", quote_identifiers=True)

        assert script.startswith('INSERT INTO "t" ("a""b") VALUES')


class TestGenerationErrors:
    """Tests for invalid generation parameters."""

    def test_empty_table_name(self, people_grid):
        """Test that an empty table name is rejected."""
        table = infer(people_grid)
        with pytest.raises(GenerationError):
            generate(table, table_name="")
        with pytest.raises(GenerationError):
            generate(table, table_name="   ")

    def test_table_name_defaults_to_table(self, people_grid):
        """Test that the table's own name is used when none is given."""
        table = infer(people_grid, table_name="people")

        assert generate(table).startswith("CREATE TABLE people ")

    def test_zero_columns(self):
        """Test that a table without columns is rejected."""
        with pytest.raises(GenerationError):
            generate(Table(name="t"), table_name="t")

    def test_non_positive_batch_size(self, people_grid):
        """Test that batch sizes below 1 are rejected."""
        table = infer(people_grid)
        with pytest.raises(GenerationError):
            generate(table, batch_size=0, table_name="t")
        with pytest.raises(GenerationError):
            generate(table, batch_size=-5, table_name="t")

    def test_unknown_dialect(self, people_grid):
        """Test that unknown dialects are rejected."""
        table = infer(people_grid)
        with pytest.raises(GenerationError, match="Unsupported dialect"):
            generate(table, dialect="Oracle", table_name="t")

    def test_unknown_mode(self, people_grid):
        """Test that unknown modes are rejected."""
        table = infer(people_grid)
        with pytest.raises(GenerationError):
            generate(table, mode="merge", table_name="t")
