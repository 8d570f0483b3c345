"""Config Typer app factory."""

import typer

from telereset.api.config.cmd_init import cmd_init
from telereset.api.config.cmd_path import cmd_path
from telereset.api.config.cmd_show import cmd_show
from telereset.cli._global_option import _global_option
from telereset.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
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

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (backend, sync, log)"),
    ) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="path")
    def path_cmd() -> None:
        """Show where the configuration file lives."""
        _handle_stage_result(cmd_path)()

    @app.command(name="init")
    def init_cmd(
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing configuration file"),
    ) -> None:
        """Write a configuration file holding the defaults (and the global --url, if given)."""
        _handle_stage_result(cmd_init)(_global_option("base_url"), force)

    return app
