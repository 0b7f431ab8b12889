"""
CLI command implementations.
"""

from excel2sql.cli.commands.convert import cmd_convert
from excel2sql.cli.commands.dialects import cmd_dialects
from excel2sql.cli.commands.preview import cmd_preview
from excel2sql.cli.commands.settings import cmd_settings
from excel2sql.cli.commands.sheets import cmd_sheets

__all__ = ["cmd_convert", "cmd_dialects", "cmd_preview", "cmd_settings", "cmd_sheets"]
