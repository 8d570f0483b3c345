"""Unit test fixtures.

Most helpers are in tests/conftest.py. This file adds the wired core
components the orchestration tests share.
"""

import pytest

from telereset.api.audit.AuditLog import AuditLog
from telereset.api.events.EventBus import EventBus
from telereset.api.orchestrator.ElevationFlow import ElevationFlow
from telereset.api.orchestrator.OperationContext import OperationContext
from telereset.api.orchestrator.Orchestrator import Orchestrator
from telereset.api.status.StatusSynchronizer import StatusSynchronizer

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    BACKEND_URL,
    FakeBackend,
    Gate,
    ScriptedGateway,
    config_data,
    minimal_config_dict,
    run_cmd,
    snapshot,
    system_info,
    system_info_data,
)

__all__ = [
    "BACKEND_URL",
    "Core",
    "FakeBackend",
    "Gate",
    "ScriptedGateway",
    "config_data",
    "minimal_config_dict",
    "run_cmd",
    "snapshot",
    "system_info",
    "system_info_data",
]


class Core:
    """Orchestrator, elevation flow and their collaborators around one ScriptedGateway."""

    def __init__(self, gateway: ScriptedGateway, confirm=None):
        self.gateway = gateway
        self.events = EventBus()
        self.audit = AuditLog(capacity=100)
        self.synchronizer = StatusSynchronizer(gateway, self.audit, events=self.events, poll_interval_secs=0.01)
        self.context = OperationContext(events=self.events)
        self.orchestrator = Orchestrator(gateway, self.synchronizer, self.audit, self.context, confirm=confirm)
        self.elevation = ElevationFlow(gateway, self.synchronizer, self.audit, self.context)

    def messages(self) -> list[str]:
        return [entry.message for entry in self.audit.entries]


@pytest.fixture
def core(gateway: ScriptedGateway) -> Core:
    return Core(gateway)
