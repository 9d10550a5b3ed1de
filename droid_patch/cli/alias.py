"""Alias Typer app factory."""

import typer

from droid_patch.api.alias.cmd_list import cmd_list
from droid_patch.api.alias.cmd_remove import cmd_remove
from droid_patch.cli._handle_stage_result import _handle_stage_result


def alias() -> typer.Typer:
    """Create and configure the alias Typer app."""
    app = typer.Typer(
        name="alias",
        help="Manage droid-patch aliases",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(ctx: typer.Context) -> None:
        """List all droid-patch aliases."""
        _handle_stage_result(cmd_list, ctx)()

    @app.command(name="remove")
    def remove_cmd(
        ctx: typer.Context,
        target: str = typer.Argument(..., help="Alias name or file path to remove"),
    ) -> None:
        """Remove a droid-patch alias or patched binary file."""
        _handle_stage_result(cmd_remove, ctx)(target)

    return app
