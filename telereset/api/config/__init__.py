"""Configuration models for the telereset client."""

from .BackendConfig import BackendConfig
from .ClientConfig import ClientConfig
from .load_client_config import load_client_config
from .LogConfig import LogConfig
from .SyncConfig import SyncConfig

__all__ = ["BackendConfig", "ClientConfig", "LogConfig", "SyncConfig", "load_client_config"]
