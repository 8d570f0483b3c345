"""Watch command - live view of remote status and the audit trail."""

import asyncio

import typer
from rich.console import Console

from telereset.api.audit.AuditLogEntry import AuditLogEntry
from telereset.api.audit.Severity import Severity
from telereset.api.config.load_client_config import load_client_config
from telereset.api.session.watch_session import watch_session
from telereset.api.status.RemoteStatus import RemoteStatus
from telereset.cli._global_option import _global_option

_SEVERITY_STYLES = {
    Severity.INFO: "[blue]i[/blue]",
    Severity.SUCCESS: "[green]✓[/green]",
    Severity.ERROR: "[red]✗[/red]",
}


def _print_status(console: Console, status: RemoteStatus) -> None:
    if status.process_running is None:
        process = "[dim]unknown[/dim]"
    elif status.process_running:
        process = "[yellow]running[/yellow]"
    else:
        process = "[green]not running[/green]"
    machine_id = status.config_snapshot.machine_id if status.config_snapshot else "[dim]none[/dim]"
    admin = ""
    if status.system_info is not None:
        admin = " [green](admin)[/green]" if status.system_info.is_admin else " [dim](not admin)[/dim]"
    console.print(f"[bold]Editor:[/bold] {process}  [bold]Machine ID:[/bold] {machine_id}{admin}")


def _print_audit(console: Console, entry: AuditLogEntry) -> None:
    timestamp = entry.timestamp.astimezone().strftime("%H:%M:%S")
    console.print(f"[dim]{timestamp}[/dim] {_SEVERITY_STYLES[entry.severity]} {entry.message}")


def register_watch(app: typer.Typer) -> None:
    @app.command(name="watch")
    def watch_cmd(
        interval: float = typer.Option(None, "--interval", "-i", min=0.1, help="Poll interval in seconds"),
        duration: float = typer.Option(None, "--duration", min=0.0, help="Stop after this many seconds"),
    ) -> None:
        """Poll the backend and print status and audit changes until interrupted."""
        console = Console(stderr=True)
        try:
            config = load_client_config(_global_option("base_url"))
        except ValueError as e:
            console.print(f"[red]✗[/red] {e}")
            raise typer.Exit(1) from e
        if interval is not None:
            config = config.model_copy(update={"sync": config.sync.model_copy(update={"poll_interval_secs": interval})})

        console.print(f"[blue]i[/blue] Watching {config.backend.base_url} (Ctrl-C to stop)")
        try:
            asyncio.run(
                watch_session(
                    config,
                    on_status=lambda status: _print_status(console, status),
                    on_audit=lambda entry: _print_audit(console, entry),
                    duration_secs=duration,
                )
            )
        except KeyboardInterrupt:
            console.print("[dim]Stopped[/dim]")
