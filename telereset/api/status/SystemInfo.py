"""Backend host information."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SystemInfo(BaseModel):
    """Answer of ``GET /api/system-info``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    os: str
    username: str
    is_admin: bool = Field(..., alias="isAdmin")
    config_path: str = Field(..., alias="configPath")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
