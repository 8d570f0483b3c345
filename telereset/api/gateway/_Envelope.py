"""Wire model for the backend's response envelope."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Envelope(BaseModel):
    """``{success, data?, error?, ...}`` as every endpoint sends it."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    success: bool
    data: Any = None
    error: str | None = None
    message: str | None = None
    needs_elevation: bool = Field(False, alias="needsElevation")
    elevation_message: str | None = Field(None, alias="elevationMessage")
    registry_modified: bool = Field(False, alias="registryModified")
    needs_restart: bool = Field(False, alias="needsRestart")
    operations: list[str] | None = None
