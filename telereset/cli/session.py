"""Session commands registered directly on the root app."""

import typer

from telereset.api.session.cmd_disable_autoupdate import cmd_disable_autoupdate
from telereset.api.session.cmd_elevate import cmd_elevate
from telereset.api.session.cmd_health import cmd_health
from telereset.api.session.cmd_kill import cmd_kill
from telereset.api.session.cmd_preview import cmd_preview
from telereset.api.session.cmd_reset import cmd_reset
from telereset.api.session.cmd_status import cmd_status
from telereset.cli._confirmer import _confirmer
from telereset.cli._global_option import _global_option
from telereset.cli._handle_stage_result import _handle_stage_result


def register_session(app: typer.Typer) -> None:
    """Register the status and operation commands on the given app."""

    @app.command(name="status")
    def status_cmd() -> None:
        """Show backend, editor process and configuration status."""
        _handle_stage_result(cmd_status)(base_url=_global_option("base_url"))

    @app.command(name="health")
    def health_cmd() -> None:
        """Check that the backend is answering."""
        _handle_stage_result(cmd_health)(base_url=_global_option("base_url"))

    @app.command(name="reset")
    def reset_cmd(
        read_only: bool = typer.Option(False, "--read-only", help="Make the rewritten storage file read-only"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Answer yes to every prompt"),
    ) -> None:
        """Reset the editor's telemetry identifiers."""
        _handle_stage_result(cmd_reset)(
            read_only=read_only,
            confirm=_confirmer(yes),
            confirm_elevation=_confirmer(yes),
            base_url=_global_option("base_url"),
        )

    @app.command(name="kill")
    def kill_cmd() -> None:
        """Close every running editor process."""
        _handle_stage_result(cmd_kill)(confirm_elevation=_confirmer(False), base_url=_global_option("base_url"))

    @app.command(name="disable-autoupdate")
    def disable_autoupdate_cmd(
        yes: bool = typer.Option(False, "--yes", "-y", help="Answer yes to every prompt"),
    ) -> None:
        """Disable the editor's auto-update."""
        _handle_stage_result(cmd_disable_autoupdate)(
            confirm=_confirmer(yes),
            confirm_elevation=_confirmer(yes),
            base_url=_global_option("base_url"),
        )

    @app.command(name="preview")
    def preview_cmd() -> None:
        """Generate a new identifier set without applying it."""
        _handle_stage_result(cmd_preview)(base_url=_global_option("base_url"))

    @app.command(name="elevate")
    def elevate_cmd() -> None:
        """Restart the backend with administrator privileges."""
        _handle_stage_result(cmd_elevate)(base_url=_global_option("base_url"))
