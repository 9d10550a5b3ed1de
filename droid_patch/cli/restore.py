"""Restore Typer app factory - put the original droid binary back."""

from typing import Annotated

import typer

from droid_patch.api.patch.cmd_restore import cmd_restore
from droid_patch.cli._handle_stage_result import _handle_stage_result


def restore() -> typer.Typer:
    """Create and configure the restore Typer app."""
    app = typer.Typer(
        name="restore",
        help="Restore the original droid binary from its backup",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        path: Annotated[str | None, typer.Option("--path", "-p", help="Path to the droid binary")] = None,
    ) -> None:
        """Restore <path> from <path>.backup."""
        _handle_stage_result(cmd_restore, ctx)(path)

    return app
