"""Remote operation gateway."""

from .Gateway import Gateway
from .GatewayError import (
    ApplicationError,
    ErrorKind,
    GatewayError,
    MalformedResponseError,
    TimedOutError,
    UnreachableError,
)
from .OperationKind import OperationKind
from .OperationOutcome import OperationOutcome
from .QueryKind import QueryKind

__all__ = [
    "ApplicationError",
    "ErrorKind",
    "Gateway",
    "GatewayError",
    "MalformedResponseError",
    "OperationKind",
    "OperationOutcome",
    "QueryKind",
    "TimedOutError",
    "UnreachableError",
]
