"""
Preview command implementation.
"""

import typer

from excel2sql.cli.context import CommandContext
from excel2sql.config import load_conversion_config
from excel2sql.converter import read_grid
from excel2sql.dialects import get_dialect
from excel2sql.inference import TypeInferencer


def cmd_preview(
    input_path: str,
    sheet: str | None = None,
    delimiter: str | None = None,
    rows: int = 10,
    dialect: str | None = None,
    language: str | None = None,
    verbose: bool = False,
) -> None:
    """Show the inferred column types and the first rows of a source file."""
    ctx = CommandContext(verbose=verbose, language=language)

    try:
        config = load_conversion_config(overrides={"dialect": dialect}, settings=ctx.settings)
        target = get_dialect(config.dialect)

        grid = read_grid(input_path, sheet=sheet, delimiter=delimiter)
        table = TypeInferencer().infer(grid)

        typer.echo(ctx.text("inferred_columns"))
        width = max((len(name) for name in table.column_names), default=0)
        for column in table.columns:
            nullable = "NULL" if column.nullable else "NOT NULL"
            typer.echo(
                f"  {column.name.ljust(width)}  {column.data_type.value:<8}  "
                f"{target.get_sql_type(column.data_type)}  {nullable}"
            )

        shown = table.rows[: max(rows, 0)]
        if shown:
            typer.echo("\n" + ctx.text("preview_rows", count=len(shown)))
            for row in shown:
                typer.echo("  " + " | ".join("NULL" if cell is None else cell.text for cell in row))

    except Exception as e:
        ctx.handle_error(e)
