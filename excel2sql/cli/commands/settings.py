"""
Settings command implementation.
"""

import typer

from excel2sql.cli.context import CommandContext
from excel2sql.cli.utils import parse_setting_items


def cmd_settings(
    set_items: list[str] | None = None,
    language: str | None = None,
    verbose: bool = False,
) -> None:
    """Show saved preferences, or update them from KEY=VALUE items."""
    ctx = CommandContext(verbose=verbose, language=language)

    try:
        if set_items:
            try:
                changes = parse_setting_items(set_items)
            except ValueError as e:
                typer.echo(ctx.text("invalid_setting", item=str(e)), err=True)
                raise typer.Exit(1) from None

            ctx.settings = ctx.settings_store.update(**changes)
            typer.echo(ctx.text("settings_saved", path=ctx.settings_store.path))
        else:
            typer.echo(ctx.text("settings_location", path=ctx.settings_store.path))

        for key, value in ctx.settings.to_dict().items():
            typer.echo(f"  {key} = {'' if value is None else value}")

    except typer.Exit:
        raise
    except Exception as e:
        ctx.handle_error(e)
