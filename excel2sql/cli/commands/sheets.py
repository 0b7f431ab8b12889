"""
Sheets command implementation.
"""

import typer

from excel2sql.cli.context import CommandContext
from excel2sql.readers import ExcelReader, get_reader


def cmd_sheets(
    input_path: str,
    language: str | None = None,
    verbose: bool = False,
) -> None:
    """List the worksheets of a workbook."""
    ctx = CommandContext(verbose=verbose, language=language)

    try:
        reader = get_reader(input_path)
        if not isinstance(reader, ExcelReader):
            typer.echo(ctx.text("no_sheets"))
            return

        sheet_names = reader.list_sheets(input_path)
        if not sheet_names:
            typer.echo(ctx.text("no_sheets"))
            return

        typer.echo(ctx.text("available_sheets", input=input_path))
        for index, name in enumerate(sheet_names, start=1):
            typer.echo(f"  {index}. {name}")

    except Exception as e:
        ctx.handle_error(e)
