from ..gateway.OperationKind import OperationKind
from ..gateway.OperationOutcome import OperationOutcome


def describe_success(kind: OperationKind, outcome: OperationOutcome) -> str:
    """One-line audit text for a successful operation."""
    if kind is OperationKind.RESET:
        message = "Configuration reset completed"
        if outcome.snapshot is not None:
            message += f"; new machine ID {outcome.snapshot.machine_id[:16]}..."
        if outcome.registry_modified:
            message += "; registry MachineGuid modified and backed up"
        return message + ". Restart the editor for changes to take effect"
    if kind is OperationKind.KILL_PROCESS:
        return "Editor processes closed"
    if kind is OperationKind.DISABLE_AUTO_UPDATE:
        steps = len(outcome.operations)
        return f"Auto-update disabled ({steps} step{'s' if steps != 1 else ''})"
    if kind is OperationKind.GENERATE_PREVIEW:
        return "Preview identifiers generated"
    if outcome.needs_restart:
        return "Privilege elevation initiated; continue in the new elevated instance"
    return "Privileges elevated"
