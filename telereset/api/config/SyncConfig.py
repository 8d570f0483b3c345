"""Status synchronisation configuration."""

from pydantic import BaseModel, ConfigDict, Field


class SyncConfig(BaseModel):
    """Status polling configuration."""

    model_config = ConfigDict(extra="forbid")

    poll_interval_secs: float = Field(10.0, gt=0, description="Interval between process-status polls")
