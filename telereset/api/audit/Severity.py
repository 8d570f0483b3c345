"""Audit entry severity."""

from enum import Enum


class Severity(str, Enum):
    """Severity of an audit trail entry."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"
