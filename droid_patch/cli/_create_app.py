"""Create the main Typer CLI app."""

import typer

from droid_patch.api.config.DroidPatchConfig import DroidPatchConfig
from droid_patch.cli.alias import alias
from droid_patch.cli.config import config
from droid_patch.cli.patch import patch
from droid_patch.cli.restore import restore
from droid_patch.utils.logger import configure_logging


def _setup_logging() -> None:
    try:
        level = DroidPatchConfig.load().log.level
    except ValueError:
        # Commands report the configuration error themselves
        level = "INFO"
    configure_logging(DroidPatchConfig.get_home_dir(), level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="droid-patch: patch the droid binary and install it as an alias",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(patch(), name="patch")
    app.add_typer(restore(), name="restore")
    app.add_typer(alias(), name="alias")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        _setup_logging()

    return app
