"""Top-level telereset configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from .BackendConfig import BackendConfig
from .LogConfig import LogConfig
from .SyncConfig import SyncConfig


class ClientConfig(BaseModel):
    """Top-level configuration for the telereset client."""

    model_config = ConfigDict(extra="forbid")

    backend: BackendConfig = Field(default_factory=BackendConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get telereset home directory based on TELERESET_HOME or default to ~/.telereset."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "ClientConfig":
        """Load and validate config from file.

        A missing file yields the documented defaults; a file that exists must
        be valid in full.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object, got {type(raw).__name__}")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert ClientConfig instance to a dictionary for serialization."""
        return {
            "backend": self.backend.model_dump(),
            "sync": self.sync.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> Path:
        """Write the configuration to its file, replacing it atomically.

        Returns:
            Path of the file written

        Raises:
            RuntimeError: If the file could not be written
        """
        path = self.get_config_path()
        temp_path = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(self.to_dict(), indent=4) + "\n")
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save config to {path}: {e}") from e
        return path
