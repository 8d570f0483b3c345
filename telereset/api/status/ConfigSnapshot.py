"""Immutable copy of the backend's telemetry identifiers."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigSnapshot(BaseModel):
    """Identifier set read from (or generated by) the backend.

    Field aliases follow the backend's JSON names, so a ``data`` object from
    ``GET /api/config``, ``POST /api/reset`` or ``POST /api/generate-ids``
    validates directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    machine_id: str = Field(..., alias="telemetryMachineId")
    mac_machine_id: str = Field(..., alias="telemetryMacMachineId")
    device_id: str = Field(..., alias="telemetryDevDeviceId")
    sqm_id: str = Field(..., alias="telemetrySqmId")
    last_modified: datetime | None = Field(None, alias="lastModified")

    @field_validator("last_modified", mode="before")
    @classmethod
    def blank_timestamp_is_absent(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
