import typer

from telereset.api.orchestrator.ask_confirmer import Confirmer


def _confirmer(assume_yes: bool) -> Confirmer:
    """Confirmation gate backed by ``typer.confirm``; ``--yes`` answers every prompt."""
    if assume_yes:
        return lambda message: True
    return lambda message: typer.confirm(message, default=False, err=True)
