"""Create the main Typer CLI app."""

import typer

from telereset.cli.config import config
from telereset.cli.session import register_session
from telereset.cli.watch import register_watch


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Client for the editor telemetry reset backend",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    register_session(app)
    register_watch(app)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        url: str = typer.Option(None, "--url", help="Backend base URL, overriding backend.base_url"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["base_url"] = url

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
