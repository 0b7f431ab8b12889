"""
Tests for the preview CLI command.
"""

import pytest
from click.exceptions import Exit as ClickExit

from excel2sql.cli.commands.preview import cmd_preview


class TestPreviewCommand:
    """Tests for the preview CLI command."""

    def test_preview_shows_types(self, people_csv, capsys):
        """Test the column listing."""
        cmd_preview(str(people_csv), dialect="PostgreSQL")

        output = capsys.readouterr().out
        assert "Inferred columns:" in output
        assert "Integer" in output
        assert "TIMESTAMP WITHOUT TIME ZONE" in output
        assert "NOT NULL" in output
        assert "Charlie | NULL" in output

    def test_preview_limits_rows(self, people_csv, capsys):
        """Test the row limit."""
        cmd_preview(str(people_csv), rows=1)

        output = capsys.readouterr().out
        assert "First 1 row(s):" in output
        assert "Alice" in output
        assert "Charlie" not in output

    def test_preview_missing_sheet(self, people_xlsx, capsys):
        """Test that an unknown sheet exits with code 1."""
        with pytest.raises(ClickExit) as exc_info:
            cmd_preview(str(people_xlsx), sheet="Nope")

        assert exc_info.value.exit_code == 1
        assert "worksheet does not exist" in capsys.readouterr().err
