"""
Unit tests for CLI help behavior when commands are called without required arguments.
"""

import subprocess
import sys
from pathlib import Path


class TestCLIHelpBehavior:
    """Test that commands show help when called without required arguments."""

    def _run_command(self, command: list) -> tuple[int, str, str]:
        """Run a CLI command and return exit code, stdout, stderr."""
        result = subprocess.run(
            [sys.executable, "-m", "excel2sql.cli.main"] + command,
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent.parent,
        )
        return result.returncode, result.stdout, result.stderr

    def test_without_command_shows_help(self):
        """Test that 'excel2sql' without any command shows help."""
        exit_code, stdout, stderr = self._run_command([])

        assert exit_code == 0
        output = stdout + stderr
        assert "Usage" in output
        for command in ["convert", "dialects", "preview", "settings", "sheets"]:
            assert command in output

    def test_commands_listed_alphabetically(self):
        """Test that commands are listed in alphabetical order."""
        _, stdout, _ = self._run_command(["--help"])

        positions = [stdout.find(f" {name} ") for name in ["convert", "dialects", "preview"]]
        assert all(position >= 0 for position in positions)
        assert positions == sorted(positions)

    def test_convert_without_argument_shows_help(self):
        """Test that 'excel2sql convert' without argument shows help."""
        exit_code, stdout, stderr = self._run_command(["convert"])

        assert exit_code == 0
        output = stdout + stderr
        assert "INPUT_PATH" in output or "input_path" in output
        assert "Convert a spreadsheet or CSV file" in output

    def test_preview_without_argument_shows_help(self):
        """Test that 'excel2sql preview' without argument shows help."""
        exit_code, stdout, stderr = self._run_command(["preview"])

        assert exit_code == 0
        assert "Show inferred column types" in stdout + stderr

    def test_sheets_without_argument_shows_help(self):
        """Test that 'excel2sql sheets' without argument shows help."""
        exit_code, stdout, stderr = self._run_command(["sheets"])

        assert exit_code == 0
        assert "List the worksheets" in stdout + stderr

    def test_invalid_dialect_is_rejected(self):
        """Test that an unknown dialect fails option validation."""
        exit_code, stdout, stderr = self._run_command(["convert", "data.csv", "-d", "oracle"])

        assert exit_code != 0
        assert "Unsupported dialect" in stdout + stderr

    def test_invalid_mode_is_rejected(self):
        """Test that an unknown mode fails option validation."""
        exit_code, stdout, stderr = self._run_command(["convert", "data.csv", "-m", "merge"])

        assert exit_code != 0
        assert "Invalid mode" in stdout + stderr
