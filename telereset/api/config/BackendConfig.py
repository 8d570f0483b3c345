"""Backend connection configuration."""

from pydantic import BaseModel, ConfigDict, Field


class BackendConfig(BaseModel):
    """Where the local reset backend listens and how long to wait for it."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field("http://localhost:8080", min_length=1, description="Base URL of the backend service")
    timeout_secs: float | None = Field(
        None,
        gt=0,
        description="Per-request timeout in seconds; null waits indefinitely for the backend to answer",
    )
