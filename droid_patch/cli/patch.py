"""Patch Typer app factory - patch the droid binary."""

from typing import Annotated

import typer

from droid_patch.api.patch.cmd_apply import cmd_apply
from droid_patch.cli._handle_stage_result import _handle_stage_result


def patch() -> typer.Typer:
    """Create and configure the patch Typer app."""
    app = typer.Typer(
        name="patch",
        help="Patch the droid binary and install it as an alias",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        alias: Annotated[str | None, typer.Argument(help="Alias name for the patched binary")] = None,
        is_custom: Annotated[
            bool,
            typer.Option(
                "--is-custom",
                help="Patch isCustom:!0 to isCustom:!1 (enable context compression for custom models)",
            ),
        ] = False,
        skip_login: Annotated[
            bool,
            typer.Option("--skip-login", help="Inject a fake FACTORY_API_KEY to bypass the login requirement"),
        ] = False,
        dry_run: Annotated[
            bool, typer.Option("--dry-run", help="Verify patches without modifying the binary")
        ] = False,
        path: Annotated[str | None, typer.Option("--path", "-p", help="Path to the droid binary")] = None,
        output: Annotated[
            str | None, typer.Option("--output", "-o", help="Output directory for the patched binary")
        ] = None,
        backup: Annotated[
            bool | None,
            typer.Option("--backup/--no-backup", help="Create a backup of the original binary (default: patch.backup)"),
        ] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Include match previews")] = False,
    ) -> None:
        """Patch the droid binary.

        Examples:
        - droid-patch patch --is-custom droid-custom
        - droid-patch patch --skip-login droid-nologin
        - droid-patch patch --is-custom --skip-login -o . my-droid
        """
        _handle_stage_result(cmd_apply, ctx)(
            path=path,
            alias=alias,
            is_custom=is_custom,
            skip_login=skip_login,
            dry_run=dry_run,
            output_dir=output,
            backup=backup,
            verbose=verbose,
        )

    return app
