"""
excel2sql CLI Main Module

Command-line interface for converting spreadsheets and delimited text files
into SQL scripts.
"""

from typing import Any

import typer

from excel2sql.cli.commands import (
    cmd_convert,
    cmd_dialects,
    cmd_preview,
    cmd_settings,
    cmd_sheets,
)
from excel2sql.dialects import get_dialect, is_dialect_supported, list_available_dialects
from excel2sql.typing import OperationMode


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_dialect(value: str | None) -> str | None:
    """Validate the dialect option and return its canonical name."""
    if value is None:
        return None
    if not is_dialect_supported(value):
        available = ", ".join(list_available_dialects())
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Unsupported dialect '{value}'. Supported: {available}"
        )
    return get_dialect(value).name


def validate_mode(value: str | None) -> str | None:
    """Validate the operation mode option."""
    if value is None:
        return None
    try:
        return OperationMode.from_string(value).value
    except ValueError:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid mode '{value}'. Must be 'create' or 'insert'."
        ) from None


app = typer.Typer(
    name="excel2sql",
    help="excel2sql - turn spreadsheets and CSV files into SQL scripts",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
INPUT_ARG = typer.Argument(None, help="Path to the .xlsx or .csv source file")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
LANG_OPTION = typer.Option(None, "--lang", help="Message language (en, es, fr)")
SHEET_OPTION = typer.Option(None, "--sheet", help="Worksheet name (default: first sheet)")
DELIMITER_OPTION = typer.Option(
    None, "--delimiter", help="Field delimiter for text files (default: auto-detect)"
)
DIALECT_OPTION = typer.Option(
    None,
    "-d",
    "--dialect",
    help="Target dialect (MSSQL, MySQL, PostgreSQL)",
    callback=validate_dialect,
)


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def convert(
    ctx: typer.Context,
    input_path: str | None = INPUT_ARG,
    output: str | None = typer.Option(
        None, "-o", "--output", help="Output .sql file or directory (default: next to the input)"
    ),
    table_name: str | None = typer.Option(
        None, "-t", "--table", help="Target table name (default: input file name)"
    ),
    dialect: str | None = DIALECT_OPTION,
    mode: str | None = typer.Option(
        None,
        "-m",
        "--mode",
        help="create: CREATE TABLE + INSERT, insert: INSERT only",
        callback=validate_mode,
    ),
    batch_size: int | None = typer.Option(
        None, "-b", "--batch-size", min=1, help="Maximum rows per INSERT statement (default: 500)"
    ),
    sheet: str | None = SHEET_OPTION,
    delimiter: str | None = DELIMITER_OPTION,
    quote_identifiers: bool | None = typer.Option(
        None,
        "--quote-identifiers/--no-quote-identifiers",
        help="Quote table and column names for the target dialect",
    ),
    validate: bool | None = typer.Option(
        None, "--validate/--no-validate", help="Check the script parses in the target dialect"
    ),
    to_stdout: bool = typer.Option(False, "--stdout", help="Print the script instead of saving it"),
    lang: str | None = LANG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Convert a spreadsheet or CSV file into a SQL script."""
    _check_required_argument(ctx, "input_path", input_path)
    cmd_convert(
        input_path=input_path,
        output=output,
        table_name=table_name,
        dialect=dialect,
        mode=mode,
        batch_size=batch_size,
        sheet=sheet,
        delimiter=delimiter,
        quote_identifiers=quote_identifiers,
        validate=validate,
        to_stdout=to_stdout,
        language=lang,
        verbose=verbose,
    )


@app.command()
def preview(
    ctx: typer.Context,
    input_path: str | None = INPUT_ARG,
    sheet: str | None = SHEET_OPTION,
    delimiter: str | None = DELIMITER_OPTION,
    rows: int = typer.Option(10, "-n", "--rows", min=0, help="Number of rows to show"),
    dialect: str | None = DIALECT_OPTION,
    lang: str | None = LANG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show inferred column types and the first rows of a file."""
    _check_required_argument(ctx, "input_path", input_path)
    cmd_preview(
        input_path=input_path,
        sheet=sheet,
        delimiter=delimiter,
        rows=rows,
        dialect=dialect,
        language=lang,
        verbose=verbose,
    )


@app.command()
def sheets(
    ctx: typer.Context,
    input_path: str | None = INPUT_ARG,
    lang: str | None = LANG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List the worksheets of a workbook."""
    _check_required_argument(ctx, "input_path", input_path)
    cmd_sheets(input_path=input_path, language=lang, verbose=verbose)


@app.command()
def dialects(
    lang: str | None = LANG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List supported dialects and their type mapping."""
    cmd_dialects(language=lang, verbose=verbose)


@app.command()
def settings(
    set_items: list[str] | None = typer.Option(
        None, "--set", help="Update a saved preference (KEY=VALUE). Can be used multiple times."
    ),
    lang: str | None = LANG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show or update saved preferences."""
    cmd_settings(set_items=set_items, language=lang, verbose=verbose)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
