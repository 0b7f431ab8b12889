"""
Dialects command implementation.
"""

import typer

from excel2sql.cli.context import CommandContext
from excel2sql.dialects import get_dialect, list_available_dialects
from excel2sql.typing import DataType


def cmd_dialects(language: str | None = None, verbose: bool = False) -> None:
    """Print each supported dialect with its type mapping and UUID function."""
    ctx = CommandContext(verbose=verbose, language=language)

    typer.echo(ctx.text("supported_dialects"))
    for name in list_available_dialects():
        dialect = get_dialect(name)
        typer.echo(f"\n{dialect.name} (uuid: {dialect.uuid_function})")
        for data_type in DataType:
            typer.echo(f"  {data_type.value:<9} {dialect.get_sql_type(data_type)}")
