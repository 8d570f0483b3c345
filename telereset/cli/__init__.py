"""CLI - main entry point."""

import sys


def _setup_logging() -> None:
    from telereset.api.config.ClientConfig import ClientConfig
    from telereset.utils.configure_logging import configure_logging

    try:
        level = ClientConfig.load().log.level
    except ValueError:
        # Commands report the invalid file themselves.
        level = "INFO"
    configure_logging(level=level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from telereset.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from telereset.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(result.result)
        return 0 if result.success else 1

    _setup_logging()
    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.Abort:
        typer.echo("Aborted.", err=True)
        return 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
