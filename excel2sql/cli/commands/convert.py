"""
Convert command implementation.
"""

import typer

from excel2sql.cli.context import CommandContext
from excel2sql.config import load_conversion_config
from excel2sql.converter import convert_file, resolve_output_path, write_script


def cmd_convert(
    input_path: str,
    output: str | None = None,
    table_name: str | None = None,
    dialect: str | None = None,
    mode: str | None = None,
    batch_size: int | None = None,
    sheet: str | None = None,
    delimiter: str | None = None,
    quote_identifiers: bool | None = None,
    validate: bool | None = None,
    to_stdout: bool = False,
    language: str | None = None,
    verbose: bool = False,
) -> None:
    """
    Convert a spreadsheet or delimited text file into a SQL script.

    Options left as None fall back to environment variables, pyproject.toml and
    saved settings, in that order.

    Args:
        input_path: Source .xlsx/.csv file
        output: Output .sql file or directory
        table_name: Target table name (defaults to the input file name)
        dialect: Target dialect
        mode: "create" (CREATE TABLE + INSERT) or "insert" (INSERT only)
        batch_size: Maximum rows per INSERT statement
        sheet: Worksheet name for workbooks
        delimiter: Delimiter for text files
        quote_identifiers: Quote table and column names
        validate: Check the script parses in the target dialect
        to_stdout: Print the script instead of writing a file
        language: Message language
        verbose: Enable verbose output
    """
    ctx = CommandContext(verbose=verbose, language=language)

    try:
        config = load_conversion_config(
            overrides={
                "dialect": dialect,
                "mode": mode,
                "batch_size": batch_size,
                "table_name": table_name,
                "quote_identifiers": quote_identifiers,
                "validate": validate,
            },
            settings=ctx.settings,
        )

        result = convert_file(input_path, config, sheet=sheet, delimiter=delimiter)

        if to_stdout:
            typer.echo(result.script, nl=False)
        else:
            typer.echo(
                ctx.text(
                    "converting_file",
                    input=input_path,
                    table=result.table.name,
                    dialect=config.dialect,
                )
            )
            output_path = resolve_output_path(input_path, output or ctx.settings.output_path)
            write_script(result.script, output_path)
            typer.echo(
                ctx.text("statements_generated", count=result.statement_count, rows=len(result.table))
            )
            typer.echo(ctx.text("script_saved", path=output_path))
            ctx.save_settings(
                input_path=str(input_path),
                output_path=str(output_path.parent),
                target_dialect=config.dialect,
                operation=config.mode.value,
            )

    except Exception as e:
        ctx.handle_error(e)
